"""Tests for NMEA field parsing utilities."""

import datetime

import pytest

from gnssdecode.nmea.errors import FormatError
from gnssdecode.nmea.fields import (
    combine_utc,
    convert_to_decimal_degrees,
    optional_field,
    parse_float_field,
    parse_int_field,
    parse_latitude,
    parse_longitude,
    parse_status_field,
    parse_string_field,
    parse_utc_date,
    parse_utc_time,
    require_field_count,
)

UTC = datetime.timezone.utc


class TestNumericFields:
    """Tests for parse_float_field and parse_int_field."""

    def test_float(self):
        assert parse_float_field("545.4") == pytest.approx(545.4)

    def test_negative_float(self):
        assert parse_float_field("-34.2") == pytest.approx(-34.2)

    def test_float_leading_dot(self):
        assert parse_float_field(".5") == pytest.approx(0.5)

    def test_float_zero_is_not_absent(self):
        assert parse_float_field("0.0") == 0.0
        assert parse_float_field("0.0") is not None

    def test_empty_float_is_none(self):
        assert parse_float_field("") is None

    @pytest.mark.parametrize("value", ["abc", "1.2.3", "nan", "inf", "1e5", " 1.0"])
    def test_non_numeric_float_raises(self, value):
        with pytest.raises(FormatError):
            parse_float_field(value)

    def test_int(self):
        assert parse_int_field("08") == 8

    def test_empty_int_is_none(self):
        assert parse_int_field("") is None

    @pytest.mark.parametrize("value", ["1.0", "x8", "1_0"])
    def test_non_numeric_int_raises(self, value):
        with pytest.raises(FormatError):
            parse_int_field(value)

    @pytest.mark.parametrize("value", ["٣٧", "３７.５", "1٢"])
    def test_non_ascii_digits_raise(self, value):
        with pytest.raises(FormatError):
            parse_float_field(value)
        with pytest.raises(FormatError):
            parse_int_field(value.replace(".", ""))

    def test_string_field(self):
        assert parse_string_field("0000") == "0000"
        assert parse_string_field("") is None


class TestStatusField:
    """Tests for parse_status_field."""

    def test_active(self):
        assert parse_status_field("A") is True

    def test_void(self):
        assert parse_status_field("V") is False

    def test_empty_is_void(self):
        assert parse_status_field("") is False

    def test_unknown_raises(self):
        with pytest.raises(FormatError):
            parse_status_field("Q")


class TestDecimalDegrees:
    """Tests for degree-minute conversion."""

    def test_north(self):
        assert convert_to_decimal_degrees("4807.038", "N") == pytest.approx(48.1173)

    def test_west(self):
        result = convert_to_decimal_degrees("01131.000", "W")
        assert result == pytest.approx(-11.5166667)

    def test_three_digit_degrees(self):
        assert parse_longitude("12158.3416", "W") == pytest.approx(-121.972360)

    def test_no_decimal_point(self):
        assert parse_latitude("4807", "N") == pytest.approx(48.1166667)

    def test_zero_is_valid(self):
        assert parse_latitude("0000.000", "N") == 0.0

    def test_empty_value_is_none(self):
        assert parse_latitude("", "N") is None
        assert parse_latitude("", "") is None

    @pytest.mark.parametrize("hemisphere", ["S", "W"])
    def test_sign_negated(self, hemisphere):
        value = convert_to_decimal_degrees("3723.2475", hemisphere)
        assert value == pytest.approx(-37.3874583)

    @pytest.mark.parametrize("hemisphere", ["N", "E"])
    def test_sign_kept(self, hemisphere):
        value = convert_to_decimal_degrees("3723.2475", hemisphere)
        assert value == pytest.approx(37.3874583)

    def test_monotonic(self):
        values = ["0000.0000", "0059.9999", "0100.0000", "3723.2475", "8959.9999"]
        converted = [parse_latitude(value, "N") for value in values]
        assert converted == sorted(converted)

    def test_latitude_rejects_longitude_hemisphere(self):
        with pytest.raises(FormatError):
            parse_latitude("3723.2475", "E")

    def test_longitude_rejects_latitude_hemisphere(self):
        with pytest.raises(FormatError):
            parse_longitude("12158.3416", "N")

    def test_missing_hemisphere_raises(self):
        with pytest.raises(FormatError):
            parse_latitude("3723.2475", "")

    def test_non_numeric_raises(self):
        with pytest.raises(FormatError):
            parse_latitude("37x3.2475", "N")

    @pytest.mark.parametrize("value", ["-3723.2475", "+3723.2475"])
    def test_signed_value_raises(self, value):
        with pytest.raises(FormatError):
            parse_latitude(value, "N")


class TestUtcTime:
    """Tests for parse_utc_time."""

    def test_milliseconds(self):
        assert parse_utc_time("161229.487") == datetime.time(
            16, 12, 29, 487000, tzinfo=UTC
        )

    def test_centiseconds(self):
        assert parse_utc_time("202725.00") == datetime.time(20, 27, 25, tzinfo=UTC)

    def test_no_fraction(self):
        assert parse_utc_time("225446") == datetime.time(22, 54, 46, tzinfo=UTC)

    def test_rounding_stays_within_second(self):
        assert parse_utc_time("120000.9996") == datetime.time(
            12, 0, 0, 999000, tzinfo=UTC
        )

    def test_empty_is_none(self):
        assert parse_utc_time("") is None

    @pytest.mark.parametrize("value", ["2460.00", "246000", "235960", "12:00:00", "1200"])
    def test_invalid_raises(self, value):
        with pytest.raises(FormatError):
            parse_utc_time(value)

    def test_non_ascii_digits_raise(self):
        with pytest.raises(FormatError):
            parse_utc_time("１２００００")


class TestUtcDate:
    """Tests for parse_utc_date and combine_utc."""

    def test_nineteen_nineties(self):
        assert parse_utc_date("120598") == datetime.date(1998, 5, 12)

    def test_two_thousands(self):
        assert parse_utc_date("010120") == datetime.date(2020, 1, 1)

    def test_pivot(self):
        assert parse_utc_date("010180") == datetime.date(1980, 1, 1)
        assert parse_utc_date("010179") == datetime.date(2079, 1, 1)

    def test_empty_is_none(self):
        assert parse_utc_date("") is None

    @pytest.mark.parametrize("value", ["320598", "121398", "1205", "12-05-98"])
    def test_invalid_raises(self, value):
        with pytest.raises(FormatError):
            parse_utc_date(value)

    def test_combine(self):
        result = combine_utc(datetime.date(1998, 5, 12), parse_utc_time("161229.487"))
        assert result == datetime.datetime(1998, 5, 12, 16, 12, 29, 487000, tzinfo=UTC)
        assert result.tzinfo is UTC

    def test_combine_missing_part(self):
        assert combine_utc(None, parse_utc_time("161229.487")) is None
        assert combine_utc(datetime.date(1998, 5, 12), None) is None


class TestFieldCount:
    """Tests for require_field_count and optional_field."""

    def test_enough_fields(self):
        require_field_count(["a", "b"], 2, "XXX")

    def test_too_few_fields(self):
        with pytest.raises(FormatError, match="XXX needs at least 3 fields"):
            require_field_count(["a", "b"], 3, "XXX")

    def test_optional_field(self):
        assert optional_field(["a", "b"], 1) == "b"
        assert optional_field(["a", "b"], 2) == ""
