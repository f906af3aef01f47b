from __future__ import annotations

import math
import struct

import pytest

from tle_parser.config import NumericConvention
from tle_parser.core import Field, FieldError, Line, LineSizeError, NonAsciiCharacterError
from tle_parser.core.fields import (
    as_digits,
    compute_checksum,
    decode_decimal,
    decode_eccentricity,
    decode_exponent,
    trim_leading_space,
    validate_line,
)

LINE1 = "1 25544U 98067A   08264.51782528 -.00002182  00000-0 -11606-4 0  2927"
LINE2 = "2 25544  51.6416 247.4627 0006703 130.5360 325.0288 15.72125391563537"


def test_as_digits_is_valid() -> None:
    assert as_digits("1234") == 1234
    assert as_digits("0234") == 234
    assert as_digits("9009") == 9009
    assert as_digits("8") == 8
    assert as_digits("00234") == 234


@pytest.mark.parametrize("chars", ["", " 123", "12 3", "12a", "-1", "+1", "1.0"])
def test_as_digits_rejects_non_digits(chars: str) -> None:
    assert as_digits(chars) is None


def test_trim_leading_space() -> None:
    assert trim_leading_space("  292") == "292"
    assert trim_leading_space("292 ") == "292 "
    assert trim_leading_space("") == ""
    assert trim_leading_space("    ") == ""


def test_validate_line_returns_characters() -> None:
    text = validate_line(LINE1.encode("ascii"), Line.LINE1)
    assert text == LINE1
    assert len(text) == 69
    assert validate_line(bytearray(LINE2, "ascii"), Line.LINE2) == LINE2
    assert validate_line(memoryview(LINE2.encode("ascii")), Line.LINE2) == LINE2


def test_validate_line_size() -> None:
    with pytest.raises(LineSizeError) as info:
        validate_line(LINE1.encode("ascii") + b"\n", Line.LINE1)
    assert info.value.line is Line.LINE1
    assert info.value.length == 70


def test_validate_line_non_ascii() -> None:
    raw = LINE2.encode("ascii")
    raw = raw[:10] + b"\xb0" + raw[11:]
    with pytest.raises(NonAsciiCharacterError) as info:
        validate_line(raw, Line.LINE2)
    assert info.value.line is Line.LINE2


def test_validate_line_encodes_text_as_utf8() -> None:
    text = LINE1[:10] + "é" + LINE1[11:]
    with pytest.raises(LineSizeError) as info:
        validate_line(text, Line.LINE1)
    assert info.value.length == 70


@pytest.mark.parametrize(
    "chars, expected",
    [
        (" 51.6416", 51.6416),
        ("-.00002182", -0.00002182),
        (" .00001264", 0.00001264),
        ("264.51782528", 264.51782528),
        ("15.72125391", 15.72125391),
        ("  90", 90.0),
        ("+1.5", 1.5),
    ],
)
def test_decode_decimal(chars: str, expected: float) -> None:
    assert decode_decimal(chars, Field.INCLINATION, Line.LINE2) == expected


@pytest.mark.parametrize("chars", ["", "   ", "51.64 6", "51.6416 ", "inf", "nan", "1e5", "1_0.5", "-", "."])
def test_decode_decimal_rejects_outside_grammar(chars: str) -> None:
    with pytest.raises(FieldError) as info:
        decode_decimal(chars, Field.MEAN_ANOMALY, Line.LINE2)
    assert info.value.field is Field.MEAN_ANOMALY
    assert info.value.line is Line.LINE2


def test_decode_exponent_literal_arithmetic() -> None:
    assert decode_exponent(" 12345-3", Field.SECOND_DERIVATIVE, Line.LINE1) == 12345.0 ** -3
    assert decode_exponent(" 00000-0", Field.SECOND_DERIVATIVE, Line.LINE1) == 1.0
    assert decode_exponent("11606-4", Field.B_STAR, Line.LINE1) == 11606.0 ** -4
    assert decode_exponent(" 00000-4", Field.SECOND_DERIVATIVE, Line.LINE1) == math.inf


def test_decoded_values_keep_double_precision() -> None:
    value = decode_exponent("11606-4", Field.B_STAR, Line.LINE1)
    single = struct.unpack("<f", struct.pack("<f", value))[0]
    assert value != single
    assert decode_eccentricity("0006703") == 6703.0 ** -4


@pytest.mark.parametrize("chars", [" 00000+0", "-12345-3", " 12345", " 1234 -3", " 12345-", "-3", "        "])
def test_decode_exponent_literal_rejects(chars: str) -> None:
    with pytest.raises(FieldError) as info:
        decode_exponent(chars, Field.B_STAR, Line.LINE1)
    assert info.value.field is Field.B_STAR


def test_decode_exponent_literal_requires_mantissa_digits() -> None:
    with pytest.raises(FieldError):
        decode_exponent("     -3", Field.SECOND_DERIVATIVE, Line.LINE1)


@pytest.mark.parametrize(
    "chars, expected",
    [
        (" 12345-3", 0.12345e-3),
        (" 00000-0", 0.0),
        (" 00000+0", 0.0),
        ("-11606-4", -0.11606e-4),
        (" 11842-3", 0.11842e-3),
        ("+29621+1", 2.9621),
    ],
)
def test_decode_exponent_standard(chars: str, expected: float) -> None:
    value = decode_exponent(chars, Field.B_STAR, Line.LINE1, NumericConvention.STANDARD)
    assert value == pytest.approx(expected, rel=1e-12, abs=0.0)


@pytest.mark.parametrize("chars", [" 12345 3", "1234.5-3", " 12345-10", "        "])
def test_decode_exponent_standard_rejects(chars: str) -> None:
    with pytest.raises(FieldError):
        decode_exponent(chars, Field.SECOND_DERIVATIVE, Line.LINE1, NumericConvention.STANDARD)


def test_decode_eccentricity_literal() -> None:
    assert decode_eccentricity("0006703") == 6703.0 ** -4
    assert decode_eccentricity("1000000") == 1000000.0 ** -1
    assert decode_eccentricity("0000001") == 1.0


def test_decode_eccentricity_literal_rejects_zero() -> None:
    with pytest.raises(FieldError) as info:
        decode_eccentricity("0000000")
    assert info.value.field is Field.ECCENTRICITY
    assert info.value.line is Line.LINE2


def test_decode_eccentricity_standard() -> None:
    assert decode_eccentricity("0006703", convention=NumericConvention.STANDARD) == 0.0006703
    assert decode_eccentricity("0000000", convention=NumericConvention.STANDARD) == 0.0


@pytest.mark.parametrize("chars", [" 006703", "000670A", "-006703"])
def test_decode_eccentricity_requires_digits(chars: str) -> None:
    for convention in NumericConvention:
        with pytest.raises(FieldError):
            decode_eccentricity(chars, convention=convention)


def test_compute_checksum_matches_declared_digit() -> None:
    assert compute_checksum(LINE1) == 7
    assert compute_checksum(LINE2) == 7
    assert compute_checksum("1 25544U 98067A   20344.91719907  .00001264  00000-0  29621-4 0  9993") == 3
    assert compute_checksum("2 25544  51.6466 223.8666 0002416  90.3778  30.6140 15.48970462256430") == 0
