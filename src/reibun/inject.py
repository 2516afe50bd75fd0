from __future__ import annotations

import html
from typing import Sequence

from bs4 import BeautifulSoup, Tag

from .highlight import RenderedSentence

__all__ = [
    "ENTRY_SELECTOR",
    "DEFAULT_SPACING_PX",
    "entry_word",
    "entry_words",
    "build_sentences_block",
    "inject_block",
]

ENTRY_SELECTOR = ".concept_light"
ENTRY_WORD_SELECTOR = ".concept_light-wrapper .text"
DETAILS_LINK_SELECTOR = "a.light-details_link"
BLOCK_CLASS = "jisho-example-sentences"
HEADER_TEXT = "🤓☝️ Example sentences:"
# Used when the entry's rendered height is unknown, which is always the case offline.
DEFAULT_SPACING_PX = 100


def entry_word(entry: Tag) -> str | None:
    node = entry.select_one(ENTRY_WORD_SELECTOR)
    if node is None:
        return None
    word = node.get_text().strip()
    return word or None


def entry_words(document: Tag) -> list[str]:
    words: list[str] = []
    for entry in document.select(ENTRY_SELECTOR):
        word = entry_word(entry)
        if word:
            words.append(word)
    return words


def build_sentences_block(rendered: Sequence[RenderedSentence]) -> str | None:
    """Return the HTML for an entry's example-sentence block, or None when empty."""
    if not rendered:
        return None
    lines = [
        f'<div class="{BLOCK_CLASS}">',
        '<div style="height: 20px"></div>',
        f'<div style="font-weight: bold; margin-bottom: 8px">{html.escape(HEADER_TEXT)}</div>',
    ]
    for sentence in rendered:
        lines.append(
            "<p>"
            f'<span class="jp japanese-sentence">{sentence.japanese_markup}</span>'
            "<br/>"
            f'<span class="en">{html.escape(sentence.english_text, quote=False)}</span>'
            "</p>"
        )
    lines.append("</div>")
    return "".join(lines)


def _fragment(markup: str) -> Tag:
    fragment = BeautifulSoup(markup, "html.parser")
    node = fragment.find(True)
    if not isinstance(node, Tag):
        raise ValueError("Markup does not contain an element.")
    return node.extract()


def inject_block(entry: Tag, block_html: str, spacing_px: int = DEFAULT_SPACING_PX) -> None:
    """
    Place a spacer and the sentence block after the entry's details link.

    Entries without a details link get both appended at the end instead.
    """
    spacer = _fragment(f'<div style="height: {int(spacing_px)}px"></div>')
    block = _fragment(block_html)
    details_link = entry.select_one(DETAILS_LINK_SELECTOR)
    if details_link is not None:
        details_link.insert_after(spacer)
        spacer.insert_after(block)
    else:
        entry.append(spacer)
        entry.append(block)
