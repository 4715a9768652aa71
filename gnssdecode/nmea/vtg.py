"""VTG sentence decoder.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS.

VTG Sentence Format:
    $GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (A/D/E/N, optional)
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

Mode Indicators (FAA mode, NMEA 2.3+):
    A = Autonomous (standard GPS positioning)
    D = Differential (DGPS or RTK)
    E = Estimated (dead reckoning)
    N = Not valid (no fix)

Note: When stationary, the track angle may be empty (no heading when not moving).
"""

from gnssdecode.nmea.fields import (
    optional_field,
    parse_float_field,
    parse_string_field,
    require_field_count,
)
from gnssdecode.nmea.types import Location, VTGData

# 8 fields in basic format, 9 with FAA mode indicator
_MINIMUM_FIELD_COUNT = 8


def decode_vtg(fields: list[str]) -> VTGData:
    """Construct a VTGData object from the fields of a VTG sentence.

    Maps NMEA field indices to VTGData attributes:
        fields[0] -> location.course_degrees (track relative to true north)
        fields[2] -> course_magnetic_degrees
        fields[4] -> location.speed_knots
        fields[6] -> speed_kilometers_per_hour
        fields[8] -> mode (FAA mode indicator, if present)

    Navigation validity is determined by the mode indicator:
    - valid=True if mode is present and not N (not valid)
    - valid=False if mode is N or missing

    Raises:
        FormatError: If there are too few fields or a numeric field is not
            numeric.

    Example:
        >>> vtg = decode_vtg("054.7,T,034.4,M,005.5,N,010.2,K".split(","))
        >>> vtg.location.course_degrees, vtg.location.speed_knots
        (54.7, 5.5)
    """
    require_field_count(fields, _MINIMUM_FIELD_COUNT, "VTG")

    mode = parse_string_field(optional_field(fields, 8))

    return VTGData(
        location=Location(
            course_degrees=parse_float_field(fields[0]),
            speed_knots=parse_float_field(fields[4]),
        ),
        course_magnetic_degrees=parse_float_field(fields[2]),
        speed_kilometers_per_hour=parse_float_field(fields[6]),
        mode=mode,
        # Navigation validity: mode must exist and not be 'N' (not valid)
        valid=mode is not None and mode != "N",
    )
