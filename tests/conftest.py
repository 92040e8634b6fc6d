from __future__ import annotations

import time
from collections.abc import Generator
from datetime import UTC, datetime

import pytest

from utckit.clock import Clock, fixed_clock

# Instant returned by the fixed clock fixture
FIXED_NOW = datetime(2024, 6, 15, 12, 34, 56, 789000, tzinfo=UTC)


@pytest.fixture(autouse=True)
def app_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Forces test mode. Application code can use this to refuse dangerous behaviors.
    Automatically applied to all tests.
    """
    monkeypatch.setenv("APP_ENV", "test")


@pytest.fixture
def non_utc_host(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Switches the process zone to Asia/Kathmandu (UTC+05:45) for one test, so
    anything that leaks the machine's local time shows up as a wrong answer.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() not available on this platform")
    monkeypatch.setenv("TZ", "Asia/Kathmandu")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def clock() -> Clock:
    """A clock frozen at FIXED_NOW (2024-06-15 12:34:56.789 UTC)."""
    return fixed_clock(FIXED_NOW)


@pytest.fixture
def valid_datetime() -> str:
    return "2024-11-27 10:00:00"
