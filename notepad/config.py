"""Process configuration read from the environment."""

import logging
import os

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"


def get_host() -> str:
    return os.environ.get("HOST", DEFAULT_HOST)


def get_port() -> int:
    raw = os.environ.get("PORT")
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from exc


def get_log_level() -> str:
    """Return LOG_LEVEL upper-cased, or INFO when it names no logging level."""
    level = os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if level not in logging.getLevelNamesMapping():
        return DEFAULT_LOG_LEVEL
    return level
