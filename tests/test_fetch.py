from __future__ import annotations

import pytest
import requests

from reibun.errors import FetchError
from reibun.fetch import DocumentFetcher, sentences_url
from reibun.sentences import extract

from helpers import li, sentence_block, sentences_page


class _Response:
    def __init__(self, status_code: int = 200, text: str = "") -> None:
        self.status_code = status_code
        self.text = text

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400


class _Session:
    def __init__(self, response: _Response | None = None, exc: Exception | None = None) -> None:
        self.headers: dict[str, str] = {}
        self.response = response
        self.exc = exc
        self.calls: list[tuple[str, float]] = []
        self.closed = False

    def get(self, url: str, timeout: float):
        self.calls.append((url, timeout))
        if self.exc is not None:
            raise self.exc
        return self.response

    def close(self) -> None:
        self.closed = True


def test_sentences_url_matches_encode_uri_component() -> None:
    assert sentences_url("猫") == "https://jisho.org/search/%E7%8C%AB%20%23sentences"
    assert sentences_url("a b/c") == "https://jisho.org/search/a%20b%2Fc%20%23sentences"
    assert sentences_url("(it's)!*") == "https://jisho.org/search/(it's)!*%20%23sentences"
    assert sentences_url("#", "http://localhost:8000/") == "http://localhost:8000/search/%23%20%23sentences"


def test_fetch_sentences_parses_document() -> None:
    html = sentences_page(sentence_block(li("猫", "ねこ") + "だ", "It is a cat."))
    session = _Session(_Response(200, html))
    fetcher = DocumentFetcher(timeout=5.0, user_agent="test-agent", session=session)
    document = fetcher.fetch_sentences("猫")
    assert session.calls == [("https://jisho.org/search/%E7%8C%AB%20%23sentences", 5.0)]
    assert session.headers["User-Agent"] == "test-agent"
    assert [r.japanese.text for r in extract(document)] == ["猫だ"]


def test_non_success_status_raises_fetch_error() -> None:
    fetcher = DocumentFetcher(session=_Session(_Response(404, "not found")))
    with pytest.raises(FetchError) as excinfo:
        fetcher.fetch("https://jisho.org/search/x")
    assert excinfo.value.status_code == 404
    assert excinfo.value.url == "https://jisho.org/search/x"


def test_transport_failure_raises_fetch_error() -> None:
    session = _Session(exc=requests.ConnectionError("boom"))
    fetcher = DocumentFetcher(session=session)
    with pytest.raises(FetchError) as excinfo:
        fetcher.fetch_sentences("猫")
    assert excinfo.value.status_code is None
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_context_manager_closes_session() -> None:
    session = _Session(_Response(200, ""))
    with DocumentFetcher(session=session) as fetcher:
        fetcher.fetch("https://jisho.org/")
    assert session.closed
