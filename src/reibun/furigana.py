from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from bs4 import NavigableString, Tag

__all__ = [
    "PlainText",
    "RubyPair",
    "Segment",
    "AnnotatedText",
    "reconstruct",
    "TOKEN_TAG",
    "BASE_SELECTOR",
    "READING_SELECTOR",
]

TOKEN_TAG = "li"
BASE_SELECTOR = ".unlinked"
READING_SELECTOR = ".furigana"


@dataclass(frozen=True, slots=True)
class PlainText:
    value: str

    @property
    def kind(self) -> str:
        return "plain"

    @property
    def base(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class RubyPair:
    base: str
    reading: str

    @property
    def kind(self) -> str:
        return "ruby"


Segment = Union[PlainText, RubyPair]


@dataclass(frozen=True, slots=True)
class AnnotatedText:
    """
    Ordered run of plain and ruby segments making up one Japanese sentence.

    Joining every segment's base text in order yields the literal sentence;
    readings ride along on the ruby segments only.
    """

    segments: tuple[Segment, ...] = ()

    @classmethod
    def from_segments(cls, segments: Iterable[Segment]) -> AnnotatedText:
        return cls(tuple(segments))

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __bool__(self) -> bool:
        return bool(self.segments)

    @property
    def text(self) -> str:
        return "".join(segment.base for segment in self.segments)

    @property
    def reading(self) -> str:
        parts: list[str] = []
        for segment in self.segments:
            if isinstance(segment, RubyPair):
                parts.append(segment.reading)
            else:
                parts.append(segment.value)
        return "".join(parts)

    def coalesced(self) -> AnnotatedText:
        merged: list[Segment] = []
        for segment in self.segments:
            if isinstance(segment, PlainText) and merged and isinstance(merged[-1], PlainText):
                merged[-1] = PlainText(merged[-1].value + segment.value)
            else:
                merged.append(segment)
        return AnnotatedText(tuple(merged))

    def strip(self) -> AnnotatedText:
        """
        Trim whitespace at the sentence boundary only.

        Leading/trailing plain segments lose their outer whitespace and are
        dropped once empty; ruby segments stop the trim.
        """
        segments = list(self.segments)
        while segments and isinstance(segments[0], PlainText):
            head = segments[0].value.lstrip()
            if head:
                segments[0] = PlainText(head)
                break
            segments.pop(0)
        while segments and isinstance(segments[-1], PlainText):
            tail = segments[-1].value.rstrip()
            if tail:
                segments[-1] = PlainText(tail)
                break
            segments.pop()
        return AnnotatedText(tuple(segments))


def _token_segment(token: Tag) -> Segment | None:
    base_node = token.select_one(BASE_SELECTOR)
    if base_node is None:
        return None
    base = base_node.get_text().strip()
    if not base:
        # A reading without base text has nothing to attach to.
        return None
    reading_node = token.select_one(READING_SELECTOR)
    reading = reading_node.get_text().strip() if reading_node is not None else ""
    if reading:
        return RubyPair(base, reading)
    return PlainText(base)


def reconstruct(token_list: Tag | None) -> AnnotatedText:
    """
    Rebuild a sentence from a token list such as ``ul.japanese_sentence``.

    Children are walked in document order: bare text becomes a plain segment
    verbatim (spacing included), ``<li>`` tokens become ruby or plain segments
    depending on whether they carry a reading. Tokens without base text are
    dropped instead of failing the sentence.
    """
    if token_list is None:
        return AnnotatedText()
    segments: list[Segment] = []
    for child in token_list.children:
        if isinstance(child, NavigableString):
            # Comments, CDATA and doctypes subclass NavigableString.
            if type(child) is not NavigableString:
                continue
            text = str(child)
            if text:
                segments.append(PlainText(text))
        elif isinstance(child, Tag) and child.name == TOKEN_TAG:
            segment = _token_segment(child)
            if segment is not None:
                segments.append(segment)
    return AnnotatedText(tuple(segments))
