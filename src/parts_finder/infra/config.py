from __future__ import annotations

import os

DEFAULT_CATALOG_API_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MAX_FILTER_SESSIONS = 1000


def catalog_api_url() -> str:
    url = os.getenv("CATALOG_API_URL")

    if not url:
        raise RuntimeError("CATALOG_API_URL environment variable is not set")

    return url


def catalog_api_timeout() -> float:
    raw = os.getenv("CATALOG_API_TIMEOUT")

    if not raw:
        return DEFAULT_CATALOG_API_TIMEOUT

    try:
        timeout = float(raw)
    except ValueError as exc:
        raise RuntimeError(f"CATALOG_API_TIMEOUT must be a number of seconds, got {raw!r}") from exc

    if timeout <= 0:
        raise RuntimeError("CATALOG_API_TIMEOUT must be > 0")

    return timeout


def max_filter_sessions() -> int:
    raw = os.getenv("MAX_FILTER_SESSIONS")

    if not raw:
        return DEFAULT_MAX_FILTER_SESSIONS

    try:
        limit = int(raw)
    except ValueError as exc:
        raise RuntimeError(f"MAX_FILTER_SESSIONS must be an integer, got {raw!r}") from exc

    if limit < 1:
        raise RuntimeError("MAX_FILTER_SESSIONS must be >= 1")

    return limit


def log_level() -> str:
    return os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
