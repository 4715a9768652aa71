"""GSA sentence decoder.

GSA (GNSS DOP and Active Satellites) lists the satellites used in the
navigation solution and the dilution of precision values of that solution.

GSA Sentence Format:
    $GNGSA,A,3,65,67,80,81,82,88,66,,,,,,1.2,0.7,1.0*20
           | | |                       | |   |   |
           | | |                       | |   |   +-- VDOP
           | | |                       | |   +-- HDOP
           | | |                       | +-- PDOP
           | | +-----------------------+-- 12 PRN slots (blank = unused)
           | +-- Fix (1=none, 2=2D, 3=3D)
           +-- Selection mode (A=automatic, M=manual)

NMEA 4.10 receivers append a GNSS system ID after VDOP.
"""

from gnssdecode.nmea.errors import FormatError
from gnssdecode.nmea.fields import (
    optional_field,
    parse_float_field,
    parse_int_field,
    require_field_count,
)
from gnssdecode.nmea.types import Fix, GSAData, OperationMode

# mode, fix, 12 PRN slots, PDOP, HDOP, VDOP
_MINIMUM_FIELD_COUNT = 17
_PRN_SLOTS = slice(2, 14)


def _parse_operation_mode(value: str) -> OperationMode | None:
    if not value:
        return None
    try:
        return OperationMode(value)
    except ValueError as error:
        raise FormatError(f"unknown GSA selection mode {value!r}") from error


def _parse_fix(value: str) -> Fix | None:
    fix = parse_int_field(value)
    if fix is None:
        return None
    try:
        return Fix(fix)
    except ValueError as error:
        raise FormatError(f"unknown GSA fix type {value!r}") from error


def _parse_satellites_in_use(slots: list[str]) -> tuple[int, ...]:
    prns = (parse_int_field(slot) for slot in slots)
    return tuple(prn for prn in prns if prn is not None)


def decode_gsa(fields: list[str]) -> GSAData:
    """Construct a GSAData object from the fields of a GSA sentence.

    Maps NMEA field indices to GSAData attributes:
        fields[0]      -> operation_mode
        fields[1]      -> fix
        fields[2..13]  -> satellites_in_use (blank slots dropped)
        fields[14]     -> position_dilution_of_precision
        fields[15]     -> horizontal_dilution_of_precision
        fields[16]     -> vertical_dilution_of_precision
        fields[17]     -> system_id (NMEA 4.10+, may be absent)

    Raises:
        FormatError: If there are too few fields, a numeric field is not
            numeric, or the mode/fix value is unknown.

    Example:
        >>> gsa = decode_gsa("A,3,65,67,80,81,82,88,66,,,,,,1.2,0.7,1.0".split(","))
        >>> gsa.operation_mode, gsa.fix
        (<OperationMode.AUTO: 'A'>, <Fix.FIX_3D: 3>)
        >>> gsa.satellites_in_use
        (65, 67, 80, 81, 82, 88, 66)
    """
    require_field_count(fields, _MINIMUM_FIELD_COUNT, "GSA")

    return GSAData(
        operation_mode=_parse_operation_mode(fields[0]),
        fix=_parse_fix(fields[1]),
        satellites_in_use=_parse_satellites_in_use(fields[_PRN_SLOTS]),
        position_dilution_of_precision=parse_float_field(fields[14]),
        horizontal_dilution_of_precision=parse_float_field(fields[15]),
        vertical_dilution_of_precision=parse_float_field(fields[16]),
        system_id=parse_int_field(optional_field(fields, 17)),
    )
