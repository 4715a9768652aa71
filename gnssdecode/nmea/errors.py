"""Exceptions raised while decoding NMEA sentences.

All errors derive from ``ValueError``; ``except ValueError`` catches every
decode failure.
"""


class NMEAError(ValueError):
    """Base class for every NMEA decoding failure.

    Attributes:
        sentence: The offending sentence, or None when the error was raised
            from a decoder that only saw the field list.
    """

    def __init__(self, message: str, sentence: str | None = None) -> None:
        super().__init__(message)
        self.sentence = sentence


class FormatError(NMEAError):
    """The sentence violates the NMEA 0183 structure.

    Raised for a missing '$', a missing or short checksum suffix, a malformed
    address field, too few fields for the sentence type, non-numeric text in
    a numeric field, or an unknown value in an enumerated field.
    """


class UnsupportedSentenceTypeError(NMEAError):
    """The sentence is well formed but no decoder exists for its type."""

    def __init__(
        self,
        talker_id: str,
        sentence_type: str,
        sentence: str | None = None,
    ) -> None:
        super().__init__(
            f"unsupported sentence type {talker_id}{sentence_type}", sentence
        )
        self.talker_id = talker_id
        self.sentence_type = sentence_type


class ChecksumMismatchError(NMEAError):
    """The checksum suffix does not match the sentence content.

    Only raised when checksum verification was requested explicitly.
    """

    def __init__(self, expected: int, computed: int, sentence: str | None = None):
        super().__init__(
            f"checksum mismatch: expected {expected:02X}, computed {computed:02X}",
            sentence,
        )
        self.expected = expected
        self.computed = computed
