from __future__ import annotations
import logging
import os
import sys

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_RECURSION_LIMIT = 50_000

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return raw.strip()


def get_log_level() -> str:
    return value_from_env("MINILISP_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_recursion_limit() -> int:
    raw = value_from_env("MINILISP_RECURSION_LIMIT", str(DEFAULT_RECURSION_LIMIT))
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"MINILISP_RECURSION_LIMIT must be an integer, got {raw!r}")


def apply_recursion_limit(limit: int) -> None:
    """Raise the interpreter's recursion limit to `limit`; never lowers it."""
    if limit > sys.getrecursionlimit():
        sys.setrecursionlimit(limit)


def setup_logging(level: str | None = None) -> None:
    """Configure root logging on stderr so program output on stdout stays clean."""
    level = (level or get_log_level()).upper()
    numeric_level = getattr(logging, level, logging.WARNING)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, stream=sys.stderr)
