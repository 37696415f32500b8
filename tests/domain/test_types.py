"""Tests for Weekday, DstPolicy, and DateTimeRange."""

from datetime import UTC, datetime, timedelta

import pytest

from dtutil.domain.types import DateTimeRange, DstPolicy, Weekday
from dtutil.errors import DateTimeUtilError, InvalidCalendarOptionError


class TestWeekday:
    def test_values_match_date_weekday(self) -> None:
        # 2024-01-01 was a Monday, 2024-01-07 a Sunday.
        assert datetime(2024, 1, 1).weekday() == Weekday.MONDAY
        assert datetime(2024, 1, 7).weekday() == Weekday.SUNDAY

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("monday", Weekday.MONDAY),
            ("Sunday", Weekday.SUNDAY),
            (" SATURDAY ", Weekday.SATURDAY),
            ("2", Weekday.WEDNESDAY),
            (6, Weekday.SUNDAY),
            (Weekday.FRIDAY, Weekday.FRIDAY),
        ],
    )
    def test_parse(self, raw: object, expected: Weekday) -> None:
        assert Weekday.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["funday", "7", "9", 7, 9, -1, True, None, 1.0])
    def test_parse_rejects(self, raw: object) -> None:
        with pytest.raises(InvalidCalendarOptionError, match="Unknown weekday"):
            Weekday.parse(raw)

    def test_rejection_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Weekday.parse("funday")


class TestDstPolicy:
    def test_values(self) -> None:
        assert DstPolicy("wall_clock") is DstPolicy.WALL_CLOCK
        assert DstPolicy("elapsed") is DstPolicy.ELAPSED

    def test_parse(self) -> None:
        assert DstPolicy.parse("elapsed") is DstPolicy.ELAPSED
        assert DstPolicy.parse(DstPolicy.WALL_CLOCK) is DstPolicy.WALL_CLOCK

    @pytest.mark.parametrize("raw", ["sometimes", "", 3, None])
    def test_parse_rejects(self, raw: object) -> None:
        with pytest.raises(InvalidCalendarOptionError, match="Unknown DST policy"):
            DstPolicy.parse(raw)

    def test_rejection_shares_package_base(self) -> None:
        with pytest.raises(DateTimeUtilError):
            DstPolicy.parse("bogus")


class TestDateTimeRange:
    def _january(self) -> DateTimeRange:
        return DateTimeRange(
            datetime(2024, 1, 1, tzinfo=UTC),
            datetime(2024, 2, 1, tzinfo=UTC),
        )

    def test_is_a_tuple(self) -> None:
        start, end = self._january()
        assert start == datetime(2024, 1, 1, tzinfo=UTC)
        assert end == datetime(2024, 2, 1, tzinfo=UTC)

    def test_duration(self) -> None:
        assert self._january().duration == timedelta(days=31)

    def test_contains_is_half_open(self) -> None:
        window = self._january()
        assert window.contains(datetime(2024, 1, 1, tzinfo=UTC))
        assert window.contains(datetime(2024, 1, 31, 23, 59, 59, tzinfo=UTC))
        assert not window.contains(datetime(2024, 2, 1, tzinfo=UTC))
        assert not window.contains(datetime(2023, 12, 31, 23, 59, tzinfo=UTC))

    def test_contains_naive_as_utc(self) -> None:
        assert self._january().contains(datetime(2024, 1, 15))

    def test_to_tz(self) -> None:
        local = self._january().to_tz("Asia/Tokyo")
        assert local.start_at == datetime(2024, 1, 1, tzinfo=UTC)
        assert local.start_at.hour == 9
        assert str(local.end_at.tzinfo) == "Asia/Tokyo"
