"""RMC sentence decoder.

RMC (Recommended Minimum Specific GNSS Data) is the only common sentence
carrying the UTC date, so it is the one that yields a full timestamp.

RMC Sentence Format:
    $GPRMC,161229.487,A,3723.2475,N,12258.3416,W,0.13,309.62,120598,,*13
           |          | |         | |          | |    |      |      ||
           |          | |         | |          | |    |      |      |+-- Variation E/W
           |          | |         | |          | |    |      |      +-- Magnetic variation
           |          | |         | |          | |    |      +-- UTC date (DDMMYY)
           |          | |         | |          | |    +-- Course over ground (degrees)
           |          | |         | |          | +-- Speed over ground (knots)
           |          | |         | +----------+-- Longitude + E/W
           |          | +---------+-- Latitude + N/S
           |          +-- Status (A=valid, V=warning)
           +-- UTC time (HHMMSS.sss)

NMEA 2.3 appends a mode indicator, NMEA 4.10 a navigational status.
"""

from gnssdecode.nmea.errors import FormatError
from gnssdecode.nmea.fields import (
    combine_utc,
    optional_field,
    parse_float_field,
    parse_latitude,
    parse_longitude,
    parse_status_field,
    parse_string_field,
    parse_utc_date,
    parse_utc_time,
    require_field_count,
)
from gnssdecode.nmea.types import Location, RMCData

_MINIMUM_FIELD_COUNT = 11


def _parse_magnetic_variation(value: str, direction: str) -> float | None:
    """Return the variation signed positive East, negative West."""
    variation = parse_float_field(value)
    if variation is None:
        return None
    if direction == "W":
        return -variation
    if direction in ("E", ""):
        return variation
    raise FormatError(f"invalid magnetic variation direction {direction!r}")


def decode_rmc(fields: list[str]) -> RMCData:
    """Construct an RMCData object from the fields of an RMC sentence.

    Maps NMEA field indices to RMCData attributes:
        fields[0]  -> location.utc_time
        fields[1]  -> valid (status)
        fields[2..5] -> latitude/longitude with hemispheres
        fields[6]  -> location.speed_knots
        fields[7]  -> location.course_degrees
        fields[8]  -> date, combined with fields[0] into location.timestamp
        fields[9..10] -> magnetic_variation_degrees
        fields[11] -> mode (optional)
        fields[12] -> navigational_status (optional)

    Raises:
        FormatError: If there are too few fields or a field is malformed.

    Example:
        >>> rmc = decode_rmc("161229.487,A,3723.2475,N,12258.3416,W,0.13,309.62,120598,,".split(","))
        >>> rmc.location.timestamp
        datetime.datetime(1998, 5, 12, 16, 12, 29, 487000, tzinfo=datetime.timezone.utc)
    """
    require_field_count(fields, _MINIMUM_FIELD_COUNT, "RMC")

    utc_time = parse_utc_time(fields[0])

    location = Location(
        latitude_degrees=parse_latitude(fields[2], fields[3]),
        longitude_degrees=parse_longitude(fields[4], fields[5]),
        utc_time=utc_time,
        timestamp=combine_utc(parse_utc_date(fields[8]), utc_time),
        speed_knots=parse_float_field(fields[6]),
        course_degrees=parse_float_field(fields[7]),
    )

    return RMCData(
        location=location,
        valid=parse_status_field(fields[1]),
        magnetic_variation_degrees=_parse_magnetic_variation(fields[9], fields[10]),
        mode=parse_string_field(optional_field(fields, 11)),
        navigational_status=parse_string_field(optional_field(fields, 12)),
    )
