"""Calendar enums and the window value type."""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import IntEnum, StrEnum
from typing import NamedTuple

from dtutil.domain.zones import TimezoneLike, as_utc, to_tz
from dtutil.errors import InvalidCalendarOptionError


class Weekday(IntEnum):
    """Day a week starts on. Values match :meth:`datetime.date.weekday`."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, value: object) -> Weekday:
        """Accept a Weekday, an int 0-6, or a case-insensitive day name.

        Raises :class:`InvalidCalendarOptionError` for anything else.
        """
        if isinstance(value, cls):
            return value
        try:
            if isinstance(value, str):
                name = value.strip().upper()
                return cls(int(name)) if name.isdigit() else cls[name]
            if isinstance(value, int) and not isinstance(value, bool):
                return cls(value)
        except (KeyError, ValueError) as exc:
            msg = f"Unknown weekday: {value!r}"
            raise InvalidCalendarOptionError(msg) from exc
        msg = f"Unknown weekday: {value!r}"
        raise InvalidCalendarOptionError(msg)


class DstPolicy(StrEnum):
    """How window boundaries advance across a DST transition.

    ``WALL_CLOCK`` keeps every boundary on local midnight; a window that
    spans a transition is an hour shorter or longer in elapsed time.
    ``ELAPSED`` keeps the UTC offset of the first aligned boundary and adds
    whole 24-hour days to it; windows keep their elapsed length but drift
    off local midnight after a transition.
    """

    WALL_CLOCK = "wall_clock"
    ELAPSED = "elapsed"

    @classmethod
    def parse(cls, value: object) -> DstPolicy:
        """Accept a DstPolicy or its string value."""
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown DST policy: {value!r}"
            raise InvalidCalendarOptionError(msg) from exc


class DateTimeRange(NamedTuple):
    """A half-open ``[start_at, end_at)`` window of UTC instants."""

    start_at: datetime
    end_at: datetime

    @property
    def duration(self) -> timedelta:
        """Elapsed time between the two instants."""
        return self.end_at - self.start_at

    def contains(self, moment: datetime) -> bool:
        """True if *moment* falls inside the window. Naive values are UTC."""
        return self.start_at <= as_utc(moment) < self.end_at

    def to_tz(self, tz: TimezoneLike) -> DateTimeRange:
        """The same window expressed in the wall-clock time of *tz*."""
        return DateTimeRange(to_tz(self.start_at, tz), to_tz(self.end_at, tz))
