from __future__ import annotations
import logging
import os
import sys

# Defaults
_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_PROMPT = ""
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_SERVER_HOST = "127.0.0.1"
_DEFAULT_SERVER_PORT = 8765


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    return raw if raw is not None else default


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_recursion_limit() -> int:
    return max(int_from_env('YAFT_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT), 100)


def get_prompt() -> str:
    return str_from_env('YAFT_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    name = str_from_env('YAFT_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_server_address() -> tuple[str, int]:
    host = str_from_env('YAFT_SERVER_HOST', _DEFAULT_SERVER_HOST)
    return host, int_from_env('YAFT_SERVER_PORT', _DEFAULT_SERVER_PORT)


def apply_recursion_limit() -> int:
    """Raise (never lower) the interpreter-wide recursion limit to the configured value.

    Evaluation itself is iterative; the limit bounds copying, comparing and
    printing of deeply nested quotations.
    """
    limit = get_recursion_limit()
    if sys.getrecursionlimit() < limit:
        sys.setrecursionlimit(limit)
    return sys.getrecursionlimit()
