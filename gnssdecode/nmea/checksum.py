"""NMEA checksum computation and validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit hexadecimal number after the '*'.

Example sentence structure:
    $GPGLL,3723.2475,N,12158.3416,W,202725.00,A,D*70
     ^               checksum content          ^ ^^
     start                                 end   checksum (0x70 = 112)
"""

import string

_HEX_DIGITS = frozenset(string.hexdigits)


def _checksum_span(text: str) -> str:
    """Return the part of ``text`` covered by the checksum.

    Scanning starts after the first '$' when there is one, otherwise at
    index 0, and stops before the first '*' that follows, or at the end of
    the string. This lets the same function serve full sentences
    ("$GPGLL,...*70") and bare bodies ("GPGLL,...").

    Example:
        >>> _checksum_span("$GNGSA,A,1*2E")
        'GNGSA,A,1'
        >>> _checksum_span("GNGSA,A,1")
        'GNGSA,A,1'
    """
    start = text.find("$") + 1
    end = text.find("*", start)
    if end == -1:
        end = len(text)
    return text[start:end]


def _calculate_xor_checksum(content: str) -> int:
    result = 0
    for character in content:
        result ^= ord(character)
    return result & 0xFF


def compute_checksum(text: str) -> int:
    """Calculate the XOR checksum of a sentence or sentence body.

    The NMEA checksum algorithm XORs the character code of each character
    in the content. Characters outside 8 bits never appear in valid NMEA,
    so the result is masked to a byte.

    Args:
        text: A complete sentence ("$...*XX"), a sentence without checksum
            ("$..."), or a bare body ("GPGSV,3,1,12,...").

    Returns:
        Integer checksum value (0-255)

    Example:
        >>> f"{compute_checksum('GNGSA,M,1,65,67,80,81,82,88,66,,,,,,1.2,0.7,1.0'):02X}"
        '2E'
    """
    return _calculate_xor_checksum(_checksum_span(text))


def _extract_checksum_parts(sentence: str) -> tuple[str, str] | None:
    """Extract the payload content and provided checksum from an NMEA sentence.

    Returns:
        A tuple of (content, checksum_hex) if the sentence has valid structure,
        or None if:
        - Missing '$' start delimiter
        - Missing '*' checksum delimiter
        - The suffix after '*' is not exactly 2 hexadecimal digits
    """
    if not sentence.startswith("$") or "*" not in sentence:
        return None

    end = sentence.index("*")
    content = sentence[1:end]
    provided = sentence[end + 1 :]

    if len(provided) != 2 or not _HEX_DIGITS.issuperset(provided):
        return None

    return content, provided


def read_checksum_suffix(sentence: str) -> int | None:
    """Return the checksum value written after '*', or None if malformed."""
    parts = _extract_checksum_parts(sentence.strip())
    if parts is None:
        return None
    return int(parts[1], 16)


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Performs end-to-end validation by:
    1. Extracting the content between '$' and '*'
    2. Computing the XOR of all content bytes
    3. Comparing against the provided 2-digit hex checksum (either case)

    Args:
        sentence: Complete NMEA sentence including '$', '*', and checksum.
                  May include trailing whitespace/newlines (will be stripped).

    Returns:
        True if the checksum is valid, False if:
        - Sentence is malformed (missing delimiters)
        - Checksum is truncated, too long or non-hexadecimal
        - Calculated checksum doesn't match provided checksum

    Example:
        >>> validate_checksum("$GPGSA,A,1,,,,,,,,,,,,,99.99,99.99,99.99*30")
        True
        >>> validate_checksum("$GPGSA,A,1,,,,,,,,,,,,,99.99,99.99,99.99*29")
        False
    """
    sentence = sentence.strip()

    parts = _extract_checksum_parts(sentence)
    if parts is None:
        return False

    content, provided = parts
    return _calculate_xor_checksum(content) == int(provided, 16)
