"""NMEA field parsing utilities.

This module provides utilities for parsing individual fields from NMEA sentences.
NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). These utilities return None for empty fields, allowing callers
to distinguish "no data" from "zero value", and raise ``FormatError`` when a
field that should be numeric holds anything else.
"""

import datetime
import re

from gnssdecode.nmea.errors import FormatError

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)", re.ASCII)
_INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_TIME_PATTERN = re.compile(r"(\d{2})(\d{2})(\d{2}(?:\.\d*)?)", re.ASCII)
_DATE_PATTERN = re.compile(r"(\d{2})(\d{2})(\d{2})", re.ASCII)

# Two-digit years at or above the pivot belong to the 1900s. GPS time starts
# in 1980, so no receiver reports an earlier date.
_CENTURY_PIVOT_YEAR = 80

_LATITUDE_HEMISPHERES = {"N": 1.0, "S": -1.0}
_LONGITUDE_HEMISPHERES = {"E": 1.0, "W": -1.0}


def require_field_count(
    fields: list[str], minimum: int, sentence_type: str
) -> None:
    """Raise ``FormatError`` if a sentence has fewer than ``minimum`` fields.

    Truncated sentences are common on noisy serial links; checking the count
    up front keeps decoders free of IndexError handling.
    """
    if len(fields) < minimum:
        raise FormatError(
            f"{sentence_type} needs at least {minimum} fields, got {len(fields)}"
        )


def optional_field(fields: list[str], index: int) -> str:
    """Return ``fields[index]``, or an empty string if the field is missing.

    Used for trailing fields added by later NMEA revisions (mode indicator,
    navigational status, system ID) that older receivers leave out.
    """
    if index < len(fields):
        return fields[index]
    return ""


def parse_float_field(value: str) -> float | None:
    """Parse a string field to float, returning None if empty.

    Example:
        >>> parse_float_field("545.4")
        545.4
        >>> parse_float_field("")  # empty field
        None
        >>> parse_float_field("54x")
        Traceback (most recent call last):
        ...
        FormatError: non-numeric field '54x'
    """
    if not value:
        return None
    if not _DECIMAL_PATTERN.fullmatch(value):
        raise FormatError(f"non-numeric field {value!r}")
    return float(value)


def parse_int_field(value: str) -> int | None:
    """Parse a string field to int, returning None if empty.

    Similar to parse_float_field but for integer values like satellite count,
    PRN numbers or fix quality indicators.

    Example:
        >>> parse_int_field("08")
        8
        >>> parse_int_field("")
        None
    """
    if not value:
        return None
    if not _INTEGER_PATTERN.fullmatch(value):
        raise FormatError(f"non-integer field {value!r}")
    return int(value)


def parse_string_field(value: str) -> str | None:
    """Parse a string field, returning None if empty.

    Used for fields like mode indicators or station IDs where the raw string
    value is meaningful.
    """
    if not value:
        return None
    return value


def parse_status_field(value: str) -> bool:
    """Parse a status field: 'A' (valid) or 'V' (void/warning).

    An empty status is treated as void.
    """
    if value == "A":
        return True
    if value in ("V", ""):
        return False
    raise FormatError(f"unknown status {value!r}")


def _convert_coordinate(
    value: str,
    hemisphere: str,
    signs: dict[str, float],
) -> float | None:
    magnitude = parse_float_field(value)
    if magnitude is None:
        return None

    # The hemisphere letter carries the sign
    if value[0] in "+-":
        raise FormatError(f"signed coordinate {value!r}")

    sign = signs.get(hemisphere)
    if sign is None:
        raise FormatError(f"invalid hemisphere {hemisphere!r} for {value!r}")

    degrees = int(magnitude // 100)
    minutes = magnitude - degrees * 100
    return sign * (degrees + minutes / 60.0)


def convert_to_decimal_degrees(value: str, hemisphere: str) -> float | None:
    """Convert NMEA coordinate (DDDMM.MMMM) to decimal degrees.

    NMEA uses degrees-minutes format with a hemisphere indicator.
    The integer part of value/100 is the degrees, the remainder the minutes:
        decimal_degrees = degrees + (minutes / 60)
    North/East are positive, South/West negative.

    Args:
        value: Coordinate in DDMM.MMMM or DDDMM.MMMM format
        hemisphere: "N", "S", "E" or "W"

    Returns:
        Signed decimal degrees, or None if the value field is empty

    Raises:
        FormatError: If the value is not numeric, or is present without a
            valid hemisphere letter.

    Example:
        >>> convert_to_decimal_degrees("4807.038", "N")
        48.1173  # 48° + 7.038'/60
        >>> convert_to_decimal_degrees("01131.000", "W")
        -11.5166667  # negative for West
    """
    signs = {**_LATITUDE_HEMISPHERES, **_LONGITUDE_HEMISPHERES}
    return _convert_coordinate(value, hemisphere, signs)


def parse_latitude(value: str, hemisphere: str) -> float | None:
    """Convert a DDMM.MMMM latitude with its N/S indicator."""
    return _convert_coordinate(value, hemisphere, _LATITUDE_HEMISPHERES)


def parse_longitude(value: str, hemisphere: str) -> float | None:
    """Convert a DDDMM.MMMM longitude with its E/W indicator."""
    return _convert_coordinate(value, hemisphere, _LONGITUDE_HEMISPHERES)


def parse_utc_time(value: str) -> datetime.time | None:
    """Parse an HHMMSS.sss UTC time field.

    The fractional seconds are rounded to milliseconds, the resolution
    receivers actually report.

    Example:
        >>> parse_utc_time("161229.487")
        datetime.time(16, 12, 29, 487000, tzinfo=datetime.timezone.utc)
    """
    if not value:
        return None

    match = _TIME_PATTERN.fullmatch(value)
    if match is None:
        raise FormatError(f"invalid UTC time {value!r}")

    hours, minutes, seconds = match.groups()
    whole_seconds = int(float(seconds))
    # Rounding must not carry into the next second ("29.9996" stays at 29.999)
    milliseconds = min(round(float(seconds) * 1000), whole_seconds * 1000 + 999)
    try:
        return datetime.time(
            int(hours),
            int(minutes),
            milliseconds // 1000,
            (milliseconds % 1000) * 1000,
            tzinfo=datetime.timezone.utc,
        )
    except ValueError as error:
        raise FormatError(f"invalid UTC time {value!r}") from error


def parse_utc_date(value: str) -> datetime.date | None:
    """Parse a DDMMYY date field.

    Two-digit years from 80 to 99 map to 1980-1999, the rest to 2000-2079.

    Example:
        >>> parse_utc_date("120598")
        datetime.date(1998, 5, 12)
    """
    if not value:
        return None

    match = _DATE_PATTERN.fullmatch(value)
    if match is None:
        raise FormatError(f"invalid UTC date {value!r}")

    day, month, short_year = (int(part) for part in match.groups())
    century = 1900 if short_year >= _CENTURY_PIVOT_YEAR else 2000
    try:
        return datetime.date(century + short_year, month, day)
    except ValueError as error:
        raise FormatError(f"invalid UTC date {value!r}") from error


def combine_utc(
    date: datetime.date | None,
    time: datetime.time | None,
) -> datetime.datetime | None:
    """Combine a date and a time of day into a UTC datetime.

    Returns None unless both parts are known.
    """
    if date is None or time is None:
        return None
    return datetime.datetime.combine(date, time)
