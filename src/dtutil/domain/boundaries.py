"""Local calendar week and month boundaries.

Boundaries are computed on the local calendar date of an instant and
returned as UTC instants. Ends are exclusive: the end of a week or month
is the start of the next one.

Boundaries that would fall outside the years 1-9999 raise
:class:`InvalidDateTimeError`.
"""

from __future__ import annotations

import calendar
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta
from typing import TypeVar

from dtutil.domain.types import Weekday
from dtutil.domain.zones import TimezoneLike, local_midnight, resolve_timezone, to_tz
from dtutil.errors import DateTimeUtilError, InvalidDateTimeError

_DateT = TypeVar("_DateT", date, datetime)

DAYS_PER_WEEK = 7


@contextmanager
def supported_dates(what: str) -> Iterator[None]:
    """Report date arithmetic that leaves the years 1-9999 as :class:`InvalidDateTimeError`."""
    try:
        yield
    except DateTimeUtilError:
        raise
    except (OverflowError, ValueError) as exc:
        msg = f"{what} falls outside the supported date range: {exc}"
        raise InvalidDateTimeError(msg) from exc


def add_months(value: _DateT, months: int) -> _DateT:
    """Shift *value* by whole calendar months, clamping the day.

    Examples:
        >>> add_months(date(2024, 1, 31), 1)
        datetime.date(2024, 2, 29)
        >>> add_months(date(2023, 1, 31), 1)
        datetime.date(2023, 2, 28)
        >>> add_months(date(2024, 11, 15), 3)
        datetime.date(2025, 2, 15)
    """
    month_index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    if not MINYEAR <= year <= MAXYEAR:
        msg = f"{value.isoformat()} shifted by {months} months leaves years {MINYEAR}-{MAXYEAR}"
        raise InvalidDateTimeError(msg)
    last_day = calendar.monthrange(year, month)[1]
    return value.replace(year=year, month=month, day=min(value.day, last_day))


def local_date(moment: datetime, tz: TimezoneLike) -> date:
    """Calendar date of *moment* on the wall clock of *tz*."""
    return to_tz(moment, tz).date()


def week_start_date(day: date, week_start: Weekday = Weekday.MONDAY) -> date:
    """Most recent *week_start* day on or before *day*."""
    delta = (day.weekday() - week_start) % DAYS_PER_WEEK
    with supported_dates(f"week start before {day.isoformat()}"):
        return day - timedelta(days=delta)


def start_of_tz_week(
    moment: datetime,
    tz: TimezoneLike,
    week_start: Weekday = Weekday.MONDAY,
) -> datetime:
    """UTC instant of local midnight starting the week that contains *moment*."""
    zone = resolve_timezone(tz)
    with supported_dates("week start"):
        first_day = week_start_date(local_date(moment, zone), week_start)
        return local_midnight(first_day, zone)


def end_of_tz_week(
    moment: datetime,
    tz: TimezoneLike,
    week_start: Weekday = Weekday.MONDAY,
) -> datetime:
    """UTC instant of local midnight starting the week after *moment*'s week."""
    zone = resolve_timezone(tz)
    with supported_dates("week end"):
        first_day = week_start_date(local_date(moment, zone), week_start)
        return local_midnight(first_day + timedelta(days=DAYS_PER_WEEK), zone)


def start_of_tz_month(moment: datetime, tz: TimezoneLike) -> datetime:
    """UTC instant of local midnight on the first of *moment*'s local month."""
    zone = resolve_timezone(tz)
    with supported_dates("month start"):
        first_day = local_date(moment, zone).replace(day=1)
        return local_midnight(first_day, zone)


def end_of_tz_month(moment: datetime, tz: TimezoneLike) -> datetime:
    """UTC instant of local midnight on the first of the following month."""
    zone = resolve_timezone(tz)
    with supported_dates("month end"):
        first_day = local_date(moment, zone).replace(day=1)
        return local_midnight(add_months(first_day, 1), zone)
