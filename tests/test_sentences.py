from __future__ import annotations

from bs4 import BeautifulSoup

from reibun.furigana import PlainText, RubyPair
from reibun.sentences import SentenceRecord, extract, parse_document

from helpers import li, sentence_block, sentences_page


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _valid_block(n: int) -> str:
    return sentence_block(f"\n {li('猫', 'ねこ')}{li('が')}{n}匹\n", f"{n} cats")


def test_extract_builds_records_in_document_order() -> None:
    html = sentences_page(
        sentence_block(f"{li('今日', 'きょう')}{li('は')}{li('雨', 'あめ')}{li('です')}", "It is raining today."),
        _valid_block(2),
    )
    records = extract(_soup(html))
    assert len(records) == 2
    first = records[0]
    assert isinstance(first, SentenceRecord)
    assert list(first.japanese) == [
        RubyPair("今日", "きょう"),
        PlainText("は"),
        RubyPair("雨", "あめ"),
        PlainText("です"),
    ]
    # Gloss stays verbatim, citation included.
    assert first.english == "It is raining today.\n— Tatoeba"
    assert records[1].japanese.text == "猫が2匹"


def test_extract_never_exceeds_max_count() -> None:
    html = sentences_page(*(_valid_block(n) for n in range(6)))
    assert len(extract(_soup(html))) == 3
    assert len(extract(_soup(html), max_count=5)) == 5
    assert [r.english for r in extract(_soup(html), max_count=1)] == ["0 cats\n— Tatoeba"]
    assert extract(_soup(html), max_count=0) == []


def test_invalid_candidates_do_not_count_toward_cap() -> None:
    html = sentences_page(
        sentence_block(None, "orphan gloss"),
        sentence_block(li("猫", "ねこ"), None),
        sentence_block(" \n ", "blank sentence"),
        sentence_block(li("", "あめ"), "reading only"),
        _valid_block(1),
        _valid_block(2),
        _valid_block(3),
        _valid_block(4),
    )
    records = extract(_soup(html))
    assert [r.japanese.text for r in records] == ["猫が1匹", "猫が2匹", "猫が3匹"]


def test_extract_without_candidates_returns_empty_list() -> None:
    assert extract(_soup("<html><body><p>No matches for 猫</p></body></html>")) == []
    assert extract(_soup("")) == []


def test_sentence_is_trimmed_at_boundary() -> None:
    records = extract(_soup(sentences_page(_valid_block(7))))
    assert records[0].japanese.segments[0] == RubyPair("猫", "ねこ")
    assert records[0].japanese.segments[-1] == PlainText("7匹")


def test_parse_document_handles_sentence_markup() -> None:
    document = parse_document(sentences_page(_valid_block(9)))
    records = extract(document)
    assert [r.japanese.reading for r in records] == ["ねこが9匹"]
