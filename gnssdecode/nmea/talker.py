"""Talker ID to satellite constellation resolution.

The two characters after '$' identify the system that produced a sentence.
Multi-constellation receivers use "GN" for solutions combining several
systems and a per-system prefix for constellation-specific sentences such as
GSV.
"""

import enum


class GnssMode(enum.Enum):
    """Satellite system that produced a sentence."""

    GPS = "gps"
    GLONASS = "glonass"
    BEIDOU = "beidou"
    GALILEO = "galileo"
    QZSS = "qzss"
    NAVIC = "navic"
    GNSS = "gnss"
    OTHER = "other"


# Talker ID -> constellation
#   GP = GPS (USA)
#   GL = GLONASS (Russia)
#   GA = Galileo (Europe)
#   GB, BD = BeiDou (China; BD is the pre-4.10 prefix)
#   GQ, CQ, QZ = QZSS (Japan; vendors disagree on the prefix)
#   GI, IR = NavIC / IRNSS (India)
#   GN = Multi-GNSS (combined solution)
_TALKER_TO_GNSS_MODE: dict[str, GnssMode] = {
    "GP": GnssMode.GPS,
    "GL": GnssMode.GLONASS,
    "GA": GnssMode.GALILEO,
    "GB": GnssMode.BEIDOU,
    "BD": GnssMode.BEIDOU,
    "GQ": GnssMode.QZSS,
    "CQ": GnssMode.QZSS,
    "QZ": GnssMode.QZSS,
    "GI": GnssMode.NAVIC,
    "IR": GnssMode.NAVIC,
    "GN": GnssMode.GNSS,
}


def talker_to_gnss_mode(talker_id: str) -> GnssMode:
    """Look up the constellation for a 2-letter talker ID.

    Unknown talkers resolve to ``GnssMode.OTHER``; this never raises.

    Example:
        >>> talker_to_gnss_mode("GN")
        <GnssMode.GNSS: 'gnss'>
        >>> talker_to_gnss_mode("XX")
        <GnssMode.OTHER: 'other'>
    """
    return _TALKER_TO_GNSS_MODE.get(talker_id, GnssMode.OTHER)


def resolve_gnss_mode(sentence: str) -> GnssMode:
    """Resolve the constellation of a sentence from its talker prefix.

    Only the talker characters are inspected, so truncated sentences such as
    "$GNGSA,A,3,65" still resolve.

    Args:
        sentence: A sentence starting with '$', or an address/body without it.

    Returns:
        The matching ``GnssMode``; ``GnssMode.OTHER`` for unknown or short
        input.
    """
    start = 1 if sentence.startswith("$") else 0
    return talker_to_gnss_mode(sentence[start : start + 2])
