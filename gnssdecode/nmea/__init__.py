"""NMEA 0183 parser for GSA, GLL, GGA, RMC, VTG and GSV sentences."""

from gnssdecode.nmea.checksum import compute_checksum, validate_checksum
from gnssdecode.nmea.errors import (
    ChecksumMismatchError,
    FormatError,
    NMEAError,
    UnsupportedSentenceTypeError,
)
from gnssdecode.nmea.parser import SUPPORTED_SENTENCE_TYPES, parse
from gnssdecode.nmea.talker import GnssMode, resolve_gnss_mode
from gnssdecode.nmea.types import (
    Fix,
    GGAData,
    GLLData,
    GSAData,
    GSVData,
    Location,
    OperationMode,
    RMCData,
    Satellite,
    Sentence,
    SentenceData,
    VTGData,
)

__all__ = [
    "SUPPORTED_SENTENCE_TYPES",
    "ChecksumMismatchError",
    "Fix",
    "FormatError",
    "GGAData",
    "GLLData",
    "GSAData",
    "GSVData",
    "GnssMode",
    "Location",
    "NMEAError",
    "OperationMode",
    "RMCData",
    "Satellite",
    "Sentence",
    "SentenceData",
    "UnsupportedSentenceTypeError",
    "VTGData",
    "compute_checksum",
    "parse",
    "resolve_gnss_mode",
    "validate_checksum",
]
