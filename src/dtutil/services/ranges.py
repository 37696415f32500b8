"""Weekly and monthly window enumeration between two instants.

Windows are aligned to the local calendar of a timezone and returned as
half-open :class:`DateTimeRange` pairs of UTC instants. The first window
contains *start_at*; enumeration stops at the window that contains
*end_at*.

INVARIANT: windows are contiguous, ``windows[i].end_at == windows[i + 1].start_at``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import date, datetime, timedelta, tzinfo

from dtutil.config.models import CalendarConfig
from dtutil.config.settings import get_settings
from dtutil.domain.boundaries import DAYS_PER_WEEK, add_months, local_date, week_start_date
from dtutil.domain.types import DateTimeRange, DstPolicy, Weekday
from dtutil.domain.zones import TimezoneLike, as_utc, local_midnight, resolve_timezone
from dtutil.errors import RangeEnumerationError

logger = logging.getLogger(__name__)

WEEK = timedelta(days=DAYS_PER_WEEK)

# Slack on top of the expected window count; covers DST offsets and the
# local-versus-UTC month skew at either end of the span.
_WINDOW_SLACK = 3


def _calendar_defaults() -> CalendarConfig:
    return get_settings().calendar


def _resolve_policy(dst_policy: DstPolicy | str | None) -> DstPolicy:
    if dst_policy is None:
        return _calendar_defaults().dst_policy
    return DstPolicy.parse(dst_policy)


@contextmanager
def _within_supported_dates(period: str) -> Iterator[None]:
    try:
        yield
    except (OverflowError, ValueError) as exc:
        logger.warning("%s windows leave the supported date range", period)
        msg = f"{period} windows fall outside the years 1-9999: {exc}"
        raise RangeEnumerationError(msg) from exc


def _enumerate_windows(
    boundary: Callable[[int], datetime],
    end_at: datetime,
    limit: int,
    period: str,
) -> list[DateTimeRange]:
    """Collect windows ``[boundary(i), boundary(i + 1))`` until one passes *end_at*.

    Raises :class:`RangeEnumerationError` if a boundary fails to advance
    or more than *limit* windows would be produced.
    """
    windows: list[DateTimeRange] = []
    start = boundary(0)
    while True:
        end = boundary(len(windows) + 1)
        if end <= start:
            logger.warning("Non-monotonic %s boundary at %s", period, start.isoformat())
            msg = f"{period} boundary did not advance past {start.isoformat()}"
            raise RangeEnumerationError(msg)
        windows.append(DateTimeRange(start, end))
        if end > end_at:
            break
        if len(windows) >= limit:
            logger.warning("Aborted %s enumeration after %d windows", period, limit)
            msg = f"{period} enumeration exceeded {limit} windows before {end_at.isoformat()}"
            raise RangeEnumerationError(msg)
        start = end

    logger.debug("Computed %d %s windows", len(windows), period)
    return windows


def get_weekly_datetimes_between(
    start_at: datetime,
    end_at: datetime,
    tz: TimezoneLike,
    *,
    week_start: Weekday | int | str | None = None,
    dst_policy: DstPolicy | str | None = None,
) -> list[DateTimeRange]:
    """Local calendar weeks covering ``start_at`` through ``end_at``.

    The first window starts at local midnight on the most recent
    *week_start* day on or before *start_at*. Each following window
    starts exactly one week later. Naive datetimes are treated as UTC.

    Args:
        start_at: Instant the first window must contain.
        end_at: Instant the last window must contain.
        tz: Timezone whose calendar defines week boundaries.
        week_start: First day of the week. Defaults to ``[calendar] week_start``.
        dst_policy: Boundary policy across DST changes. Defaults to
            ``[calendar] dst_policy``.

    Raises:
        InvalidTimezoneError: *tz* cannot be resolved.
        InvalidCalendarOptionError: An option value is not recognized.
        RangeEnumerationError: Boundaries stopped advancing or left the
            years 1-9999.
    """
    zone = resolve_timezone(tz)
    first_weekday = (
        _calendar_defaults().week_start if week_start is None else Weekday.parse(week_start)
    )
    policy = _resolve_policy(dst_policy)

    with _within_supported_dates("weekly"):
        end_utc = as_utc(end_at)
        first_day = week_start_date(local_date(start_at, zone), first_weekday)
        first = local_midnight(first_day, zone)
        boundary = _weekly_boundary(first_day, first, zone, policy)

        span_weeks = max(int((end_utc - first) / WEEK), 0)
        return _enumerate_windows(boundary, end_utc, span_weeks + _WINDOW_SLACK, "weekly")


def _weekly_boundary(
    first_day: date,
    first: datetime,
    zone: tzinfo,
    policy: DstPolicy,
) -> Callable[[int], datetime]:
    if policy is DstPolicy.ELAPSED:
        return lambda index: first + index * WEEK
    return lambda index: local_midnight(first_day + index * WEEK, zone)


def get_monthly_datetimes_between(
    start_at: datetime,
    end_at: datetime,
    tz: TimezoneLike,
    *,
    dst_policy: DstPolicy | str | None = None,
) -> list[DateTimeRange]:
    """Local calendar months covering ``start_at`` through ``end_at``.

    The first window starts at local midnight on the first of *start_at*'s
    local month. Each following window starts one calendar month later.
    Naive datetimes are treated as UTC.

    Raises:
        InvalidTimezoneError: *tz* cannot be resolved.
        InvalidCalendarOptionError: An option value is not recognized.
        RangeEnumerationError: Boundaries stopped advancing or left the
            years 1-9999.
    """
    zone = resolve_timezone(tz)
    policy = _resolve_policy(dst_policy)

    with _within_supported_dates("monthly"):
        end_utc = as_utc(end_at)
        first_day = local_date(start_at, zone).replace(day=1)
        first = local_midnight(first_day, zone)
        boundary = _monthly_boundary(first_day, first, zone, policy)

        span_months = max((end_utc.year - first.year) * 12 + (end_utc.month - first.month), 0)
        return _enumerate_windows(boundary, end_utc, span_months + _WINDOW_SLACK, "monthly")


def _monthly_boundary(
    first_day: date,
    first: datetime,
    zone: tzinfo,
    policy: DstPolicy,
) -> Callable[[int], datetime]:
    # Elapsed boundaries keep the first boundary's UTC offset: whole local
    # days are added to the first instant, ignoring later DST changes.
    if policy is DstPolicy.ELAPSED:
        return lambda index: first + (add_months(first_day, index) - first_day)
    return lambda index: local_midnight(add_months(first_day, index), zone)
