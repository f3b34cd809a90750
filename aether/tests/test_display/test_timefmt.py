"""Tests for clock, day label and compass helpers."""

from datetime import UTC, timedelta, timezone

import pytest

from aether.display.timefmt import (
    compass_direction,
    day_length_hours,
    format_clock_time,
    format_day_label,
    local_date,
)

BASE_DT = 1780272000  # 2026-06-01 00:00 UTC, a Monday


class TestClockTime:
    def test_24_hour(self):
        assert format_clock_time(BASE_DT + 15 * 3600 + 7 * 60, UTC) == "15:07"

    def test_midnight_padded(self):
        assert format_clock_time(BASE_DT, UTC) == "00:00"

    def test_viewer_time_zone(self):
        toronto = timezone(timedelta(hours=-4))
        assert format_clock_time(BASE_DT, toronto) == "20:00"


class TestDayLabel:
    def test_long(self):
        assert format_day_label(BASE_DT, UTC) == "Monday, June 1"

    def test_short(self):
        assert format_day_label(BASE_DT + 86400, UTC, short=True) == "Tue, Jun 2"

    def test_local_date_follows_zone(self):
        behind = timezone(timedelta(hours=-5))
        assert local_date(BASE_DT, UTC).day == 1
        assert local_date(BASE_DT, behind).day == 31


class TestCompassDirection:
    @pytest.mark.parametrize(
        "degrees,expected",
        [
            (0, "N"),
            (22.4, "N"),
            (22.5, "NE"),
            (44, "NE"),
            (45, "NE"),
            (46, "NE"),
            (90, "E"),
            (180, "S"),
            (250, "W"),
            (315, "NW"),
            (337.4, "NW"),
            (337.5, "N"),
            (360, "N"),
        ],
    )
    def test_sectors(self, degrees: float, expected: str):
        assert compass_direction(degrees) == expected

    def test_out_of_range_normalized(self):
        assert compass_direction(405) == "NE"
        assert compass_direction(-45) == "NW"
        assert compass_direction(720) == "N"


class TestDayLength:
    def test_rounds_to_hours(self):
        assert day_length_hours(0, 15 * 3600 + 22 * 60) == 15
        assert day_length_hours(0, 14 * 3600 + 30 * 60) == 15
