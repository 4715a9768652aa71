"""NMEA 0183 sentence classifier and dispatcher.

``parse`` is the single entry point for decoding a sentence of any supported
type. It performs:
1. Whitespace stripping (handles \\r\\n line endings)
2. Structural checks: leading '$', '*' followed by two hex digits, and a
   five-letter address (2-letter talker ID + 3-letter sentence ID)
3. Optional checksum verification
4. Field extraction, keeping empty fields so positions never shift
5. Dispatch to the decoder registered for the sentence ID
6. Constellation resolution from the talker ID

The checksum is only verified when ``verify_checksum=True`` is passed; use
``validate_checksum`` to check it separately.
"""

import logging
from collections.abc import Callable

from gnssdecode.nmea.checksum import compute_checksum, read_checksum_suffix
from gnssdecode.nmea.errors import (
    ChecksumMismatchError,
    FormatError,
    UnsupportedSentenceTypeError,
)
from gnssdecode.nmea.gga import decode_gga
from gnssdecode.nmea.gll import decode_gll
from gnssdecode.nmea.gsa import decode_gsa
from gnssdecode.nmea.gsv import decode_gsv
from gnssdecode.nmea.rmc import decode_rmc
from gnssdecode.nmea.talker import talker_to_gnss_mode
from gnssdecode.nmea.types import Sentence, SentenceData
from gnssdecode.nmea.vtg import decode_vtg

logger = logging.getLogger(__name__)

_DECODERS: dict[str, Callable[[list[str]], SentenceData]] = {
    "GSA": decode_gsa,
    "GLL": decode_gll,
    "GGA": decode_gga,
    "RMC": decode_rmc,
    "VTG": decode_vtg,
    "GSV": decode_gsv,
}

SUPPORTED_SENTENCE_TYPES = tuple(_DECODERS)

_ADDRESS_LENGTH = 5
_TALKER_LENGTH = 2


def _split_sentence(sentence: str) -> tuple[str, list[str]]:
    """Split a stripped sentence into its address and field list.

    Example:
        >>> _split_sentence("$GNGSA,A,3,,1.2*2E")
        ('GNGSA', ['A', '3', '', '1.2'])
    """
    if not sentence.startswith("$"):
        raise FormatError("sentence does not start with '$'", sentence)

    if read_checksum_suffix(sentence) is None:
        raise FormatError(
            "sentence does not end with '*' and two hex digits", sentence
        )

    content = sentence[1 : sentence.index("*")]
    address, *fields = content.split(",")

    if (
        len(address) != _ADDRESS_LENGTH
        or not address.isascii()
        or not address.isalpha()
    ):
        raise FormatError(f"malformed address field {address!r}", sentence)

    return address, fields


def _verify_checksum(sentence: str) -> None:
    expected = read_checksum_suffix(sentence)
    computed = compute_checksum(sentence)
    if expected != computed:
        raise ChecksumMismatchError(expected, computed, sentence)


def parse(sentence: str, *, verify_checksum: bool = False) -> Sentence:
    """Decode one NMEA 0183 sentence.

    Args:
        sentence: Raw sentence, e.g. "$GPGGA,002153.000,...*5E". Trailing
            whitespace is ignored.
        verify_checksum: Raise ``ChecksumMismatchError`` if the checksum
            suffix does not match. Off by default.

    Returns:
        A ``Sentence`` whose ``data`` is the record matching the sentence ID.

    Raises:
        FormatError: If the sentence is structurally malformed, has too few
            fields, or a numeric field holds non-numeric text.
        UnsupportedSentenceTypeError: If no decoder exists for the sentence ID.
        ChecksumMismatchError: If ``verify_checksum`` is set and the checksum
            is wrong.

    Example:
        >>> result = parse("$GNGSA,A,3,65,67,80,81,82,88,66,,,,,,1.2,0.7,1.0*20")
        >>> result.gnss_mode, result.data.fix
        (<GnssMode.GNSS: 'gnss'>, <Fix.FIX_3D: 3>)
    """
    sentence = sentence.strip()
    address, fields = _split_sentence(sentence)

    if verify_checksum:
        _verify_checksum(sentence)

    talker_id = address[:_TALKER_LENGTH]
    sentence_type = address[_TALKER_LENGTH:]

    decoder = _DECODERS.get(sentence_type)
    if decoder is None:
        logger.debug("No decoder for %s sentence: %s", sentence_type, sentence)
        raise UnsupportedSentenceTypeError(talker_id, sentence_type, sentence)

    try:
        data = decoder(fields)
    except FormatError as error:
        logger.debug("Rejected %s sentence: %s (%s)", address, sentence, error)
        error.sentence = sentence
        raise

    return Sentence(
        talker_id=talker_id,
        sentence_type=sentence_type,
        gnss_mode=talker_to_gnss_mode(talker_id),
        data=data,
    )
