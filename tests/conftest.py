"""Shared pytest fixtures for dtutil tests."""

from __future__ import annotations

import os
from collections.abc import Callable, Generator
from datetime import UTC, datetime
from pathlib import Path

import pytest

from dtutil.config.settings import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test away from any real dtutil.toml or DTUTIL_* env var."""
    for key in list(os.environ):
        if key.startswith("DTUTIL_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def freeze_now(monkeypatch: pytest.MonkeyPatch) -> Callable[[datetime], list[datetime]]:
    """Pin the service clock to a fixed instant.

    Returns a setter; the list it returns records every clock read so
    tests can assert the clock was read exactly once.
    """

    def _freeze(instant: datetime) -> list[datetime]:
        reads: list[datetime] = []

        def fake_now() -> datetime:
            value = instant.astimezone(UTC)
            reads.append(value)
            return value

        monkeypatch.setattr("dtutil.services.datetimes.utc_now", fake_now)
        return reads

    return _freeze
