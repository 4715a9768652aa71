"""GSV sentence decoder.

GSV (GNSS Satellites in View) describes up to four satellites per sentence.
A receiver tracking more satellites emits a group of GSV sentences numbered
1..N; each one is decoded independently here.

GSV Sentence Format:
    $GPGSV,3,1,12,02,25,259,,07,06,279,,08,73,296,,10,61,090,*70
           | | |  |  |  |   |
           | | |  +--+--+---+-- Satellite block: PRN, elevation, azimuth, SNR
           | | +-- Satellites in view
           | +-- Message number
           +-- Total number of messages

Blocks repeat up to four times. NMEA 4.10 appends a signal ID after the last
block.
"""

from gnssdecode.nmea.errors import FormatError
from gnssdecode.nmea.fields import (
    parse_int_field,
    parse_string_field,
    require_field_count,
)
from gnssdecode.nmea.types import GSVData, Satellite

_HEADER_FIELD_COUNT = 3
_BLOCK_SIZE = 4
_MAXIMUM_SATELLITES = 4


def _parse_satellites(blocks: list[str]) -> tuple[Satellite, ...]:
    satellites = []
    for start in range(0, len(blocks), _BLOCK_SIZE):
        prn, elevation, azimuth, snr = blocks[start : start + _BLOCK_SIZE]
        prn_number = parse_int_field(prn)
        if prn_number is None:
            # Padding block
            continue
        satellites.append(
            Satellite(
                prn=prn_number,
                elevation_degrees=parse_int_field(elevation),
                azimuth_degrees=parse_int_field(azimuth),
                snr_db=parse_int_field(snr),
            )
        )
    return tuple(satellites)


def _required_int(value: str, name: str) -> int:
    number = parse_int_field(value)
    if number is None:
        raise FormatError(f"GSV {name} is empty")
    return number


def decode_gsv(fields: list[str]) -> GSVData:
    """Construct a GSVData object from the fields of a GSV sentence.

    Raises:
        FormatError: If the header is incomplete, the satellite blocks do not
            divide into groups of four, or a numeric field is not numeric.
    """
    require_field_count(fields, _HEADER_FIELD_COUNT, "GSV")

    blocks = fields[_HEADER_FIELD_COUNT:]
    signal_id = None
    if len(blocks) % _BLOCK_SIZE == 1:
        signal_id = parse_string_field(blocks.pop())
    if len(blocks) % _BLOCK_SIZE != 0:
        raise FormatError(
            f"GSV satellite fields do not form blocks of {_BLOCK_SIZE}: {len(blocks)}"
        )
    if len(blocks) > _MAXIMUM_SATELLITES * _BLOCK_SIZE:
        raise FormatError(
            f"GSV carries at most {_MAXIMUM_SATELLITES} satellites per sentence, "
            f"got {len(blocks) // _BLOCK_SIZE}"
        )

    return GSVData(
        total_messages=_required_int(fields[0], "total message count"),
        message_number=_required_int(fields[1], "message number"),
        satellites_in_view=parse_int_field(fields[2]),
        satellites=_parse_satellites(blocks),
        signal_id=signal_id,
    )
