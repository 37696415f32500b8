"""Optional date-time components resolved against a single "now".

INVARIANT: every defaulted field of one resolution comes from the same
captured instant, so a call straddling a second (or midnight) boundary
can never mix fields from two different clock readings.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel

from dtutil.errors import InvalidDateTimeError

PART_FIELDS: tuple[str, ...] = ("year", "month", "day", "hour", "minute", "second")


class DateTimeParts(BaseModel):
    """Six nullable calendar fields. ``None`` means "take it from now"."""

    model_config = {"frozen": True, "strict": True}

    year: int | None = None
    month: int | None = None
    day: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None

    def resolve(self, now: datetime) -> datetime:
        """Fill unset fields from *now* and build a UTC datetime.

        *now* must already be expressed in UTC. Microseconds are always
        zero. Raises :class:`InvalidDateTimeError` when the combined
        fields are not a real calendar date/time.
        """
        values: dict[str, int] = {}
        for name in PART_FIELDS:
            value = getattr(self, name)
            values[name] = getattr(now, name) if value is None else value
        try:
            return datetime(**values, tzinfo=UTC)
        except (ValueError, OverflowError) as exc:
            msg = (
                "Invalid date/time "
                f"{values['year']}-{values['month']}-{values['day']} "
                f"{values['hour']}:{values['minute']}:{values['second']}: {exc}"
            )
            raise InvalidDateTimeError(msg) from exc
