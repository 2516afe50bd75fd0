from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .errors import ConfigError

DEFAULT_BASE_URL = "https://jisho.org"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "reibun (+https://jisho.org example sentences)"


@dataclass(slots=True)
class ReibunConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_sentences: int = 3
    user_agent: str = DEFAULT_USER_AGENT


def _env_float(environ: Mapping[str, str], key: str, default: float) -> float:
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{key} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"{key} must be positive, got {raw!r}")
    return value


def _env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise ConfigError(f"{key} must not be negative, got {raw!r}")
    return value


def load_config(environ: Mapping[str, str] | None = None) -> ReibunConfig:
    """Build a config from ``REIBUN_*`` environment variables."""
    if environ is None:
        environ = os.environ
    base_url = environ.get("REIBUN_BASE_URL", "").strip() or DEFAULT_BASE_URL
    user_agent = environ.get("REIBUN_USER_AGENT", "").strip() or DEFAULT_USER_AGENT
    return ReibunConfig(
        base_url=base_url.rstrip("/"),
        timeout=_env_float(environ, "REIBUN_TIMEOUT", DEFAULT_TIMEOUT),
        max_sentences=_env_int(environ, "REIBUN_MAX_SENTENCES", 3),
        user_agent=user_agent,
    )
