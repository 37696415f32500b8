"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dtutil.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from dtutil.domain.types import DstPolicy, Weekday

# --- dtutil.toml sections ---


class CalendarConfig(BaseModel):
    """[calendar] section."""

    model_config = {"frozen": True}

    week_start: Weekday = Weekday.MONDAY
    dst_policy: DstPolicy = DstPolicy.WALL_CLOCK

    @field_validator("week_start", mode="before")
    @classmethod
    def _parse_week_start(cls, value: object) -> Weekday:
        return Weekday.parse(value)


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    log_json: bool = False

