from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from bs4 import Tag

from .errors import FetchError
from .fetch import DocumentFetcher
from .highlight import RenderedSentence, render
from .inject import DEFAULT_SPACING_PX, ENTRY_SELECTOR, build_sentences_block, entry_word, inject_block
from .logging_utils import debug_log, warn_log
from .sentences import DEFAULT_MAX_SENTENCES, SentenceRecord, extract


@dataclass
class EntrySentences:
    word: str
    sentences: list[SentenceRecord] = field(default_factory=list)

    def rendered(self) -> list[RenderedSentence]:
        return [render(record, self.word) for record in self.sentences]


def lookup_sentences(
    word: str,
    fetcher: DocumentFetcher,
    max_count: int = DEFAULT_MAX_SENTENCES,
) -> EntrySentences | None:
    """Fetch and extract sentences for one word; None when the fetch failed."""
    try:
        document = fetcher.fetch_sentences(word)
    except FetchError as exc:
        warn_log(f"Error fetching sentences for {word}: {exc}")
        return None
    records = extract(document, max_count)
    debug_log(f"{word}: {len(records)} sentences")
    return EntrySentences(word=word, sentences=records)


def collect_sentences(
    words: Iterable[str],
    fetcher: DocumentFetcher,
    max_count: int = DEFAULT_MAX_SENTENCES,
) -> list[EntrySentences]:
    """
    Look up each word in turn, one request at a time.

    A word whose page cannot be fetched is reported and left out; the
    remaining words are still processed.
    """
    results: list[EntrySentences] = []
    for word in words:
        entry = lookup_sentences(word, fetcher, max_count)
        if entry is not None:
            results.append(entry)
    return results


def augment_document(
    document: Tag,
    fetcher: DocumentFetcher,
    max_count: int = DEFAULT_MAX_SENTENCES,
    spacing_px: int = DEFAULT_SPACING_PX,
) -> int:
    """Add example-sentence blocks to every entry of a results page; returns how many."""
    augmented = 0
    for entry in document.select(ENTRY_SELECTOR):
        word = entry_word(entry)
        if not word:
            continue
        found = lookup_sentences(word, fetcher, max_count)
        if found is None or not found.sentences:
            continue
        block = build_sentences_block(found.rendered())
        if block is None:
            continue
        inject_block(entry, block, spacing_px)
        augmented += 1
    return augmented
