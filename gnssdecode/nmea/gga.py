"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GPGGA,002153.000,3342.6618,N,11751.3858,W,1,10,1.2,27.0,M,-34.2,M,,0000*5E
           |          |         | |          | | |  |   |    | |     | | |
           |          |         | |          | | |  |   |    | |     | | +-- DGPS station ID
           |          |         | |          | | |  |   |    | |     | +-- DGPS age (seconds)
           |          |         | |          | | |  |   |    | +-----+-- Geoid separation (M)
           |          |         | |          | | |  |   +----+-- Altitude above MSL (M)
           |          |         | |          | | |  +-- HDOP (horizontal dilution)
           |          |         | |          | | +-- Number of satellites
           |          |         | |          | +-- Fix quality (0-6)
           |          |         | +----------+-- Longitude + E/W
           |          +---------+-- Latitude + N/S
           +-- UTC time (HHMMSS.sss)

Fix Quality Values:
    0 = Invalid (no fix)
    1 = GPS fix (SPS - Standard Positioning Service)
    2 = DGPS fix (Differential GPS)
    4 = RTK Fixed (Real-Time Kinematic, cm-level accuracy)
    5 = RTK Float (RTK converging, dm-level accuracy)
    6 = Dead reckoning mode
"""

from gnssdecode.nmea.fields import (
    optional_field,
    parse_float_field,
    parse_int_field,
    parse_latitude,
    parse_longitude,
    parse_string_field,
    parse_utc_time,
    require_field_count,
)
from gnssdecode.nmea.types import GGAData, Location

# Fields after the address; the trailing DGPS station ID is often dropped
_MINIMUM_FIELD_COUNT = 13


def decode_gga(fields: list[str]) -> GGAData:
    """Construct a GGAData object from the fields of a GGA sentence.

    Maps NMEA field indices to GGAData attributes:
        fields[0]  -> location.utc_time (HHMMSS.sss format)
        fields[1]  -> latitude (DDMM.MMMM format)
        fields[2]  -> latitude direction (N/S)
        fields[3]  -> longitude (DDDMM.MMMM format)
        fields[4]  -> longitude direction (E/W)
        fields[5]  -> fix_quality (0-6)
        fields[6]  -> num_satellites
        fields[7]  -> location.accuracy (HDOP)
        fields[8]  -> location.altitude_meters
        fields[10] -> geoid_separation_meters
        fields[12] -> dgps_age_seconds
        fields[13] -> dgps_station_id (may be absent)

    Args:
        fields: Comma-separated fields following the "$xxGGA" address

    Returns:
        GGAData with parsed values; valid=True only if fix_quality > 0

    Raises:
        FormatError: If there are too few fields or a numeric field is not
            numeric.

    Example:
        >>> gga = decode_gga("002153.000,3342.6618,N,11751.3858,W,1,10,1.2,27.0,M,-34.2,M,,0000".split(","))
        >>> gga.location.altitude_meters
        27.0
        >>> gga.location.time_of_day_milliseconds
        1313000
    """
    require_field_count(fields, _MINIMUM_FIELD_COUNT, "GGA")

    fix_quality = parse_int_field(fields[5])

    location = Location(
        latitude_degrees=parse_latitude(fields[1], fields[2]),
        longitude_degrees=parse_longitude(fields[3], fields[4]),
        altitude_meters=parse_float_field(fields[8]),
        accuracy=parse_float_field(fields[7]),
        utc_time=parse_utc_time(fields[0]),
    )

    return GGAData(
        location=location,
        fix_quality=fix_quality,
        num_satellites=parse_int_field(fields[6]),
        geoid_separation_meters=parse_float_field(fields[10]),
        dgps_age_seconds=parse_float_field(fields[12]),
        dgps_station_id=parse_string_field(optional_field(fields, 13)),
        # Navigation validity: only valid if we have a fix
        valid=fix_quality is not None and fix_quality > 0,
    )
