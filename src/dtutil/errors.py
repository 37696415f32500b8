"""Exception hierarchy for dtutil.

Every error the package raises derives from :class:`DateTimeUtilError`.
Value-shaped errors also derive from :class:`ValueError` so callers that
already catch ``ValueError`` around ``datetime`` construction keep working.
"""

from __future__ import annotations


class DateTimeUtilError(Exception):
    """Base class for all dtutil errors."""


class InvalidDateTimeError(DateTimeUtilError, ValueError):
    """The supplied fields do not form a valid calendar date/time."""


class InvalidTimezoneError(DateTimeUtilError, ValueError):
    """The timezone descriptor is invalid or unknown to the tz database."""


class RangeEnumerationError(DateTimeUtilError, RuntimeError):
    """Window enumeration failed to advance or exceeded its bound."""


class ConfigError(DateTimeUtilError):
    """The dtutil.toml file could not be parsed."""


class InvalidCalendarOptionError(DateTimeUtilError, ValueError):
    """A week start or DST policy option is not recognized."""
