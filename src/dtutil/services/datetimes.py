"""Build UTC and timezone-local datetimes from optional components."""

from __future__ import annotations

from datetime import datetime

from dtutil.domain.parts import DateTimeParts
from dtutil.domain.zones import TimezoneLike, resolve_timezone, to_tz
from dtutil.services._helpers import utc_now


def create_utc_datetime(
    year: int | None = None,
    month: int | None = None,
    day: int | None = None,
    hour: int | None = None,
    minute: int | None = None,
    second: int | None = None,
) -> datetime:
    """Build a UTC datetime, taking any omitted field from the current UTC time.

    The clock is read once, so all defaulted fields agree with each other.

    Raises:
        InvalidDateTimeError: The fields do not form a valid date/time.
    """
    parts = DateTimeParts(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
    )
    return parts.resolve(utc_now())


def create_tz_datetime(
    tz: TimezoneLike,
    year: int | None = None,
    month: int | None = None,
    day: int | None = None,
    hour: int | None = None,
    minute: int | None = None,
    second: int | None = None,
) -> datetime:
    """Build a UTC datetime as :func:`create_utc_datetime` does, then express it in *tz*.

    The fields are interpreted as UTC; the result is the same instant on
    the wall clock of *tz*.

    Raises:
        InvalidTimezoneError: *tz* is not a tzinfo or a known IANA key.
        InvalidDateTimeError: The fields do not form a valid date/time, or the
            instant has no wall-clock time in *tz* (years 1-9999).
    """
    zone = resolve_timezone(tz)
    return to_tz(create_utc_datetime(year, month, day, hour, minute, second), zone)
