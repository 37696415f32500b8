"""Timezone resolution and instant conversion.

A timezone descriptor is either a ``tzinfo`` instance or an IANA key
string. Keys are resolved through :mod:`zoneinfo`; the ``tzdata``
distribution backs the lookup on hosts without a system database.

INVARIANT: functions here never return naive datetimes.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dtutil.errors import InvalidDateTimeError, InvalidTimezoneError

TimezoneLike = tzinfo | str


def resolve_timezone(tz: TimezoneLike) -> tzinfo:
    """Return a ``tzinfo`` for *tz*.

    Accepts an existing ``tzinfo`` unchanged, or an IANA key such as
    ``"Europe/Berlin"``. Raises :class:`InvalidTimezoneError` for empty,
    malformed, or unknown keys and for any other type.
    """
    if isinstance(tz, tzinfo):
        return tz
    if not isinstance(tz, str):
        msg = f"Timezone must be a tzinfo or IANA key, got {type(tz).__name__}"
        raise InvalidTimezoneError(msg)
    key = tz.strip()
    if not key:
        msg = "Timezone key must not be empty"
        raise InvalidTimezoneError(msg)
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        msg = f"Unknown timezone: {tz!r}"
        raise InvalidTimezoneError(msg) from exc


def as_utc(moment: datetime) -> datetime:
    """Return *moment* as a UTC-aware datetime. Naive values are taken as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def to_tz(moment: datetime, tz: TimezoneLike) -> datetime:
    """Express the instant *moment* in the wall-clock time of *tz*.

    Raises :class:`InvalidDateTimeError` when the local time falls outside
    the years 1-9999.
    """
    zone = resolve_timezone(tz)
    try:
        return as_utc(moment).astimezone(zone)
    except OverflowError as exc:
        msg = f"{moment.isoformat()} has no wall-clock time in {zone}"
        raise InvalidDateTimeError(msg) from exc


def local_midnight(day: date, zone: tzinfo) -> datetime:
    """UTC instant of the first moment of *day* in *zone*.

    Built with ``fold=0`` and normalized through UTC, so a midnight that
    falls in a DST gap resolves to the first real instant after it and an
    ambiguous midnight resolves to its earlier occurrence.
    """
    naive_local = datetime(day.year, day.month, day.day, tzinfo=zone)
    return naive_local.astimezone(UTC)
