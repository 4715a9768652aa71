"""Decoder for NMEA 0183 sentences from GNSS receivers."""

from gnssdecode.nmea import (
    ChecksumMismatchError,
    Fix,
    FormatError,
    GGAData,
    GLLData,
    GnssMode,
    GSAData,
    GSVData,
    Location,
    NMEAError,
    OperationMode,
    RMCData,
    Satellite,
    Sentence,
    UnsupportedSentenceTypeError,
    VTGData,
    compute_checksum,
    parse,
    resolve_gnss_mode,
    validate_checksum,
)

__all__ = [
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
    "UnsupportedSentenceTypeError",
    "VTGData",
    "compute_checksum",
    "parse",
    "resolve_gnss_mode",
    "validate_checksum",
]
