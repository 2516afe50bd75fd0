from __future__ import annotations

import warnings
from dataclasses import dataclass

from bs4 import BeautifulSoup, FeatureNotFound, Tag, XMLParsedAsHTMLWarning

from .furigana import AnnotatedText, reconstruct
from .logging_utils import debug_log

__all__ = [
    "SentenceRecord",
    "DEFAULT_MAX_SENTENCES",
    "extract",
    "parse_document",
]

DEFAULT_MAX_SENTENCES = 3

SENTENCE_SELECTOR = ".sentence_content"
TOKEN_LIST_SELECTOR = ".japanese_sentence"
GLOSS_SELECTOR = ".english_sentence"


@dataclass(frozen=True, slots=True)
class SentenceRecord:
    japanese: AnnotatedText
    english: str


def parse_document(html: str) -> BeautifulSoup:
    for parser in ("lxml", "html.parser"):
        try:
            with warnings.catch_warnings():
                warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
                return BeautifulSoup(html, parser)
        except FeatureNotFound:
            continue
    # Last resort without suppression; if this raises, propagate upstream.
    return BeautifulSoup(html, "html.parser")


def extract(document: Tag, max_count: int = DEFAULT_MAX_SENTENCES) -> list[SentenceRecord]:
    """
    Pull up to ``max_count`` sentence pairs from a parsed sentences page.

    Candidates lacking a token list or a gloss, or whose sentence comes out
    empty, are skipped without counting toward the cap. Candidates after the
    cap is reached are never looked at.
    """
    records: list[SentenceRecord] = []
    if max_count <= 0:
        return records
    candidates = document.select(SENTENCE_SELECTOR)
    debug_log(f"found {len(candidates)} sentence candidates")
    for index, candidate in enumerate(candidates):
        if len(records) >= max_count:
            break
        token_list = candidate.select_one(TOKEN_LIST_SELECTOR)
        gloss = candidate.select_one(GLOSS_SELECTOR)
        if token_list is None or gloss is None:
            debug_log(f"candidate {index}: missing token list or gloss, skipped")
            continue
        japanese = reconstruct(token_list).strip()
        if not japanese:
            debug_log(f"candidate {index}: empty sentence, skipped")
            continue
        records.append(SentenceRecord(japanese=japanese, english=gloss.get_text()))
    return records
