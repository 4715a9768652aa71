"""Tests for talker ID to constellation resolution."""

import pytest

from gnssdecode import GnssMode, resolve_gnss_mode
from gnssdecode.nmea.talker import talker_to_gnss_mode


class TestResolveGnssMode:
    """Tests for resolve_gnss_mode function."""

    @pytest.mark.parametrize(
        ("sentence", "expected"),
        [
            ("$GNGSA,A,3,65", GnssMode.GNSS),
            ("$GPGSA,A,3,65", GnssMode.GPS),
            ("$BDGSA,A,3,65", GnssMode.BEIDOU),
            ("$GBGSA,A,3,65", GnssMode.BEIDOU),
            ("$GLGSA,A,3,65", GnssMode.GLONASS),
            ("$CQGSA,A,3,65", GnssMode.QZSS),
            ("$GQGSA,A,3,65", GnssMode.QZSS),
            ("$GAGSA,A,3,65", GnssMode.GALILEO),
            ("$GIGSA,A,3,65", GnssMode.NAVIC),
            ("$XXGSA,A,3,65", GnssMode.OTHER),
        ],
    )
    def test_talker_table(self, sentence, expected):
        assert resolve_gnss_mode(sentence) is expected

    def test_without_dollar(self):
        assert resolve_gnss_mode("GLGSV,3,1,12") is GnssMode.GLONASS

    @pytest.mark.parametrize("sentence", ["", "$", "$G", "G", "gp", "$gpGGA"])
    def test_short_or_lowercase_input_is_other(self, sentence):
        assert resolve_gnss_mode(sentence) is GnssMode.OTHER

    def test_deterministic(self):
        assert resolve_gnss_mode("$GPGGA") is resolve_gnss_mode("$GPGGA")


class TestTalkerToGnssMode:
    """Tests for talker_to_gnss_mode function."""

    def test_known_talker(self):
        assert talker_to_gnss_mode("GA") is GnssMode.GALILEO

    def test_unknown_talker(self):
        assert talker_to_gnss_mode("PU") is GnssMode.OTHER
