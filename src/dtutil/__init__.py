"""dtutil — timezone-aware date-time construction and calendar windows."""

from dtutil.domain.boundaries import (
    add_months,
    end_of_tz_month,
    end_of_tz_week,
    start_of_tz_month,
    start_of_tz_week,
)
from dtutil.domain.parts import DateTimeParts
from dtutil.domain.types import DateTimeRange, DstPolicy, Weekday
from dtutil.domain.zones import as_utc, resolve_timezone, to_tz
from dtutil.errors import (
    ConfigError,
    DateTimeUtilError,
    InvalidCalendarOptionError,
    InvalidDateTimeError,
    InvalidTimezoneError,
    RangeEnumerationError,
)
from dtutil.services.datetimes import create_tz_datetime, create_utc_datetime
from dtutil.services.ranges import get_monthly_datetimes_between, get_weekly_datetimes_between

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DateTimeParts",
    "DateTimeRange",
    "DateTimeUtilError",
    "DstPolicy",
    "InvalidCalendarOptionError",
    "InvalidDateTimeError",
    "InvalidTimezoneError",
    "RangeEnumerationError",
    "Weekday",
    "add_months",
    "as_utc",
    "create_tz_datetime",
    "create_utc_datetime",
    "end_of_tz_month",
    "end_of_tz_week",
    "get_monthly_datetimes_between",
    "get_weekly_datetimes_between",
    "resolve_timezone",
    "start_of_tz_month",
    "start_of_tz_week",
    "to_tz",
]
