"""Tests for GSA sentence decoding."""

import pytest

from gnssdecode import Fix, FormatError, GSAData, OperationMode, parse
from gnssdecode.nmea.gsa import decode_gsa


class TestDecodeGSA:
    """Tests for GSA decoding."""

    @pytest.mark.parametrize(
        ("sentence", "mode", "fix"),
        [
            ("$GNGSA,A,3,65,67,80,81,82,88,66,,,,,,1.2,0.7,1.0*20", OperationMode.AUTO, Fix.FIX_3D),
            ("$GNGSA,A,2,65,67,80,81,82,88,66,,,,,,1.2,0.7,1.0*21", OperationMode.AUTO, Fix.FIX_2D),
            ("$GNGSA,A,1,65,67,80,81,82,88,66,,,,,,1.2,0.7,1.0*22", OperationMode.AUTO, Fix.NO_FIX),
            ("$GNGSA,M,1,65,67,80,81,82,88,66,,,,,,1.2,0.7,1.0*2E", OperationMode.MANUAL, Fix.NO_FIX),
        ],
    )
    def test_mode_and_fix(self, sentence, mode, fix):
        result = parse(sentence).data
        assert isinstance(result, GSAData)
        assert result.operation_mode is mode
        assert result.fix is fix

    def test_satellites_and_dop(self):
        result = parse("$GNGSA,A,3,65,67,80,81,82,88,66,,,,,,1.2,0.7,1.0*20").data
        assert result.satellites_in_use == (65, 67, 80, 81, 82, 88, 66)
        assert result.position_dilution_of_precision == pytest.approx(1.2)
        assert result.horizontal_dilution_of_precision == pytest.approx(0.7)
        assert result.vertical_dilution_of_precision == pytest.approx(1.0)
        assert result.system_id is None

    def test_no_satellites(self):
        result = parse("$GPGSA,A,1,,,,,,,,,,,,,99.99,99.99,99.99*30").data
        assert result.satellites_in_use == ()
        assert result.position_dilution_of_precision == pytest.approx(99.99)

    def test_system_id(self):
        result = parse("$GNGSA,A,3,05,13,15,18,,,,,,,,,1.6,0.9,1.3,1*37").data
        assert result.satellites_in_use == (5, 13, 15, 18)
        assert result.system_id == 1

    def test_blank_dop_is_absent(self):
        result = decode_gsa(["A", "1"] + [""] * 15)
        assert result.position_dilution_of_precision is None
        assert result.horizontal_dilution_of_precision is None
        assert result.vertical_dilution_of_precision is None

    def test_blank_mode_and_fix_are_absent(self):
        result = decode_gsa([""] * 17)
        assert result.operation_mode is None
        assert result.fix is None

    def test_unknown_mode(self):
        with pytest.raises(FormatError):
            parse("$GNGSA,X,3,65,67,80,81,82,88,66,,,,,,1.2,0.7,1.0*39")

    def test_unknown_fix(self):
        with pytest.raises(FormatError):
            decode_gsa(["A", "4"] + [""] * 15)

    def test_truncated(self):
        with pytest.raises(FormatError):
            parse("$GNGSA,A,3,65*01")
