import logging
import sys

import pytest

from yaft import config


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, 10000),
        ("", 10000),
        ("5000", 5000),
        (" 2500 ", 2500),
        ("lots", 10000),
        ("10", 100),
    ]
)
def test_recursion_limit(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("YAFT_RECURSION_LIMIT", raising=False)
    else:
        monkeypatch.setenv("YAFT_RECURSION_LIMIT", raw)
    assert config.get_recursion_limit() == expected


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, logging.WARNING),
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("chatty", logging.WARNING),
    ]
)
def test_log_level(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("YAFT_LOG_LEVEL", raising=False)
    else:
        monkeypatch.setenv("YAFT_LOG_LEVEL", raw)
    assert config.get_log_level() == expected


def test_prompt(monkeypatch):
    monkeypatch.delenv("YAFT_PROMPT", raising=False)
    assert config.get_prompt() == ""
    monkeypatch.setenv("YAFT_PROMPT", "yaft> ")
    assert config.get_prompt() == "yaft> "


def test_server_address(monkeypatch):
    monkeypatch.setenv("YAFT_SERVER_HOST", "0.0.0.0")
    monkeypatch.setenv("YAFT_SERVER_PORT", "9000")
    assert config.get_server_address() == ("0.0.0.0", 9000)
    monkeypatch.setenv("YAFT_SERVER_PORT", "http")
    assert config.get_server_address() == ("0.0.0.0", 8765)


def test_apply_recursion_limit_only_raises(monkeypatch, restore_recursion_limit):
    sys.setrecursionlimit(1000)
    monkeypatch.setenv("YAFT_RECURSION_LIMIT", "20000")
    assert config.apply_recursion_limit() == 20000
    monkeypatch.setenv("YAFT_RECURSION_LIMIT", "5000")
    assert config.apply_recursion_limit() == 20000
