"""
Pytest configuration for the phone bill calculator.

Provides fixtures for:
- The reference sample log
- Building call log lines from readable pieces
- Settings isolation from the caller's environment
"""

from __future__ import annotations

import logging
from typing import Callable, Generator

import pytest

from phone_bill.config import get_settings
from phone_bill.main import SAMPLE_LOG


@pytest.fixture(scope="session")
def sample_log() -> str:
    """
    The six-line log shipped with the CLI `demo` command.
    """
    return SAMPLE_LOG


@pytest.fixture()
def call_line() -> Callable[..., str]:
    """
    Build one log line; times are HH:MM:SS on 01-09-2023 unless a full timestamp is given.
    """

    def _build(number: str, start: str, end: str) -> str:
        if len(start) == 8:
            start = f"01-09-2023 {start}"
        if len(end) == 8:
            end = f"01-09-2023 {end}"
        return f"{number},{start},{end}"

    return _build


@pytest.fixture()
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Clear cached settings and strip related env vars before and after a test.
    """
    for name in (
        "APP_ENV",
        "LOG_LEVEL",
        "LOG_JSON",
        "PHONE_BILL_TIMESTAMP_POLICY",
        "PHONE_BILL_LOG_ENCODING",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def restore_root_logging() -> Generator[None, None, None]:
    """
    Undo `configure_logging` calls made by CLI commands under test.
    """
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            root.removeHandler(handler)
    root.setLevel(saved_level)
