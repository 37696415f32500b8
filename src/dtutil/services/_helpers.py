"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current instant as a UTC-aware datetime. The single clock read per call."""
    return datetime.now(UTC)
