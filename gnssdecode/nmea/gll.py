"""GLL sentence decoder.

GLL (Geographic Position - Latitude/Longitude) reports a position and the
UTC time it was computed at, without altitude or fix details.

GLL Sentence Format:
    $GPGLL,3723.2475,N,12158.3416,W,202725.00,A,D*70
           |         | |          | |         | |
           |         | |          | |         | +-- Mode indicator (optional)
           |         | |          | |         +-- Status (A=valid, V=void)
           |         | |          | +-- UTC time (HHMMSS.ss)
           |         | +----------+-- Longitude + E/W
           +---------+-- Latitude + N/S
"""

from gnssdecode.nmea.fields import (
    optional_field,
    parse_latitude,
    parse_longitude,
    parse_status_field,
    parse_string_field,
    parse_utc_time,
    require_field_count,
)
from gnssdecode.nmea.types import GLLData, Location

_MINIMUM_FIELD_COUNT = 6


def decode_gll(fields: list[str]) -> GLLData:
    """Construct a GLLData object from the fields of a GLL sentence.

    Raises:
        FormatError: If there are too few fields, a coordinate or time is
            malformed, or the status letter is unknown.
    """
    require_field_count(fields, _MINIMUM_FIELD_COUNT, "GLL")

    return GLLData(
        location=Location(
            latitude_degrees=parse_latitude(fields[0], fields[1]),
            longitude_degrees=parse_longitude(fields[2], fields[3]),
            utc_time=parse_utc_time(fields[4]),
        ),
        valid=parse_status_field(fields[5]),
        mode=parse_string_field(optional_field(fields, 6)),
    )
