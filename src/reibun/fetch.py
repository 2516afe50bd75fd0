from __future__ import annotations

from urllib.parse import quote

import requests
from bs4 import BeautifulSoup

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, ReibunConfig
from .errors import FetchError
from .logging_utils import debug_log
from .sentences import parse_document

__all__ = ["DocumentFetcher", "FetchError", "sentences_url"]

# Characters encodeURIComponent leaves alone on top of quote()'s "_.-~".
_URI_COMPONENT_SAFE = "!*'()"
# " #sentences", percent-encoded, selects the sentences view of a search.
SENTENCES_SUFFIX = "%20%23sentences"


def sentences_url(word: str, base_url: str = DEFAULT_BASE_URL) -> str:
    encoded = quote(word, safe=_URI_COMPONENT_SAFE)
    return f"{base_url.rstrip('/')}/search/{encoded}{SENTENCES_SUFFIX}"


class DocumentFetcher:
    """
    Minimal HTTP client that returns parsed dictionary pages.

    One ``requests.Session`` is reused for every call; use the fetcher as a
    context manager (or call :meth:`close`) to release it.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers["User-Agent"] = user_agent

    @classmethod
    def from_config(cls, config: ReibunConfig) -> DocumentFetcher:
        return cls(config.base_url, config.timeout, user_agent=config.user_agent)

    def __enter__(self) -> DocumentFetcher:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def fetch(self, url: str) -> BeautifulSoup:
        debug_log(f"GET {url}")
        try:
            resp = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise FetchError(f"Failed to fetch {url}: {exc}", url=url) from exc
        if not resp.ok:
            raise FetchError(
                f"Failed to fetch {url}: HTTP {resp.status_code}",
                url=url,
                status_code=resp.status_code,
            )
        return parse_document(resp.text)

    def fetch_sentences(self, word: str) -> BeautifulSoup:
        return self.fetch(sentences_url(word, self.base_url))
