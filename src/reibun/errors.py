from __future__ import annotations


class ReibunError(RuntimeError):
    """Base class for errors raised by reibun."""


class FetchError(ReibunError):
    """Raised when a remote document cannot be fetched."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ConfigError(ReibunError):
    """Raised when an environment setting holds an unusable value."""
