"""
Tests for conversions between backend instants and form values.
"""
from datetime import timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from backoffice_ui.utils import format_display_date, format_display_day, map_date_to_iso, parse_instant

CARACAS = ZoneInfo("America/Caracas")


class TestParseInstant:
    def test_zulu_instant(self):
        parsed = parse_instant("2024-03-15T10:00:00.000Z")
        assert parsed.utcoffset() == timedelta(0)
        assert (parsed.hour, parsed.minute) == (10, 0)

    def test_date_only_is_utc_midnight(self):
        parsed = parse_instant("2024-03-15", CARACAS)
        assert parsed.tzinfo is timezone.utc
        assert parsed.hour == 0

    def test_naive_datetime_uses_display_zone(self):
        parsed = parse_instant("2024-03-15T10:00", CARACAS)
        assert parsed.utcoffset() == timedelta(hours=-4)

    @pytest.mark.parametrize("value", [None, "", "   ", "15/03/2024", "garbage"])
    def test_invalid_values_are_none(self, value):
        assert parse_instant(value) is None


class TestFormatDisplayDate:
    def test_utc_zone(self):
        assert format_display_date("2024-03-15T10:00:00.000Z", timezone.utc) == "2024-03-15T10:00"

    def test_shifts_into_display_zone(self):
        assert format_display_date("2024-03-15T10:00:00.000Z", CARACAS) == "2024-03-15T06:00"

    def test_crosses_day_boundary(self):
        assert format_display_date("2024-03-01T02:30:00.000Z", CARACAS) == "2024-02-29T22:30"

    def test_invalid_raises(self):
        with pytest.raises(ValueError):
            format_display_date("not a date", timezone.utc)


class TestMapDateToIso:
    def test_utc_zone(self):
        assert map_date_to_iso("2024-03-15T10:00", timezone.utc) == "2024-03-15T10:00:00.000Z"

    def test_local_wall_clock_to_utc(self):
        assert map_date_to_iso("2024-03-15T06:00", CARACAS) == "2024-03-15T10:00:00.000Z"

    @pytest.mark.parametrize(
        "instant",
        ["2024-03-15T10:00:00.000Z", "2024-12-31T23:59:00.000Z", "2024-02-29T03:15:00.000Z"],
    )
    @pytest.mark.parametrize("tz", [timezone.utc, CARACAS, ZoneInfo("Europe/Madrid")])
    def test_round_trip(self, instant, tz):
        assert map_date_to_iso(format_display_date(instant, tz), tz) == instant

    def test_invalid_raises(self):
        with pytest.raises(ValueError):
            map_date_to_iso("2024-13-40T99:00", timezone.utc)


class TestFormatDisplayDay:
    def test_truncates_to_date(self):
        assert format_display_day("2024-03-15T10:00:00.000Z") == "2024-03-15"

    def test_missing_value(self):
        assert format_display_day(None) == ""
