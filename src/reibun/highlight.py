from __future__ import annotations

import html
import re
from dataclasses import dataclass

from .furigana import AnnotatedText, RubyPair
from .sentences import SentenceRecord

__all__ = [
    "RenderedSentence",
    "render",
    "serialize",
    "strip_citation",
    "HIGHLIGHT_CLASS",
]

HIGHLIGHT_CLASS = "highlighted"

# " — Tatoeba", " - Tanaka Corpus", ...: a dash run after whitespace and everything after it.
_CITATION_RE = re.compile(r"\s+[—–-]+.*\Z", re.DOTALL)


@dataclass(frozen=True, slots=True)
class RenderedSentence:
    japanese_markup: str
    english_text: str


def _literal_matcher(word: str) -> re.Pattern[str] | None:
    if not word:
        return None
    return re.compile(re.escape(word))


def _mark(text: str, matcher: re.Pattern[str] | None) -> str:
    if matcher is None:
        return html.escape(text, quote=False)
    parts: list[str] = []
    pos = 0
    for match in matcher.finditer(text):
        parts.append(html.escape(text[pos : match.start()], quote=False))
        parts.append(
            f'<span class="{HIGHLIGHT_CLASS}">{html.escape(match.group(), quote=False)}</span>'
        )
        pos = match.end()
    parts.append(html.escape(text[pos:], quote=False))
    return "".join(parts)


def serialize(annotated: AnnotatedText, target_word: str = "") -> str:
    """
    Render segments as HTML, ruby pairs as ``<ruby>base<rt>reading</rt></ruby>``.

    When ``target_word`` is given, literal occurrences inside base text are
    wrapped in a highlight span. Readings are never searched.
    """
    matcher = _literal_matcher(target_word)
    parts: list[str] = []
    for segment in annotated.coalesced():
        if isinstance(segment, RubyPair):
            base = _mark(segment.base, matcher)
            reading = html.escape(segment.reading, quote=False)
            parts.append(f"<ruby>{base}<rt>{reading}</rt></ruby>")
        else:
            parts.append(_mark(segment.value, matcher))
    return "".join(parts)


def strip_citation(gloss: str) -> str:
    return _CITATION_RE.sub("", gloss, count=1).strip()


def render(record: SentenceRecord, target_word: str = "") -> RenderedSentence:
    return RenderedSentence(
        japanese_markup=serialize(record.japanese, target_word),
        english_text=strip_citation(record.english),
    )
