"""Fixed-width field decoders shared by the TLE parser."""

from __future__ import annotations

import math
import re
from typing import Optional

from ..config import NumericConvention
from .errors import Field, FieldError, LineSizeError, NonAsciiCharacterError
from .types import Line, RawLine

LINE_LENGTH = 69

_DIGITS = frozenset("0123456789")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")
_STANDARD_EXPONENT = re.compile(r"([+-]?)([0-9]+)([+-])([0-9])")


def validate_line(raw: RawLine, line: Line) -> str:
    """Check size and ASCII content, returning the line as 69 characters."""

    if isinstance(raw, str):
        raw = raw.encode("utf-8")
    data = bytes(raw)
    if len(data) != LINE_LENGTH:
        raise LineSizeError(line, len(data))
    if not data.isascii():
        raise NonAsciiCharacterError(line)
    return data.decode("ascii")


def as_digits(chars: str) -> Optional[int]:
    """Return the unsigned value of a run of ASCII digits.

    ``None`` for an empty run or any non-digit character; spaces are not
    skipped.
    """

    if not chars:
        return None
    value = 0
    for ch in chars:
        if ch not in _DIGITS:
            return None
        value = value * 10 + int(ch)
    return value


def trim_leading_space(chars: str) -> str:
    index = 0
    while index < len(chars) and chars[index] == " ":
        index += 1
    return chars[index:]


def decode_decimal(chars: str, field: Field, line: Line) -> float:
    """Decode a space-padded decimal such as ``' 51.6416'`` or ``'-.00002182'``."""

    trimmed = trim_leading_space(chars)
    if not _DECIMAL.fullmatch(trimmed):
        raise FieldError(field, line)
    return float(trimmed)


def decode_exponent(
    chars: str,
    field: Field,
    line: Line,
    convention: NumericConvention = NumericConvention.LITERAL,
) -> float:
    """Decode an assumed-decimal-point field such as ``' 12345-3'``.

    With ``LITERAL`` the field must hold exactly one ``-`` splitting the
    mantissa from the exponent, and the result is ``mantissa ** -exponent``.
    Any sign in front of the mantissa is the caller's business. With
    ``STANDARD`` the result is ``±0.mantissa * 10 ** ±exponent``.

    Results are IEEE doubles computed with ``**``; they are not rounded to
    single precision, so very large or small ``LITERAL`` values can differ
    in the last digits from a ``float32`` power.
    """

    trimmed = trim_leading_space(chars)
    if convention is NumericConvention.STANDARD:
        match = _STANDARD_EXPONENT.fullmatch(trimmed)
        if match is None:
            raise FieldError(field, line)
        sign, mantissa, exp_sign, exponent = match.groups()
        return float(f"{sign}0.{mantissa}e{exp_sign}{exponent}")

    if trimmed.count("-") != 1:
        raise FieldError(field, line)
    mantissa_chars, _, exponent_chars = trimmed.partition("-")
    mantissa = as_digits(mantissa_chars)
    exponent = as_digits(exponent_chars)
    if mantissa is None or exponent is None:
        raise FieldError(field, line)
    if mantissa == 0 and exponent > 0:
        return math.inf
    return float(mantissa) ** -exponent


def decode_eccentricity(
    chars: str,
    line: Line = Line.LINE2,
    convention: NumericConvention = NumericConvention.LITERAL,
) -> float:
    """Decode the 7-digit eccentricity field with its implied leading ``0.``.

    ``LITERAL`` computes ``d ** (floor(log10(d)) - 7)`` and rejects zero;
    ``STANDARD`` computes ``d / 10 ** 7``.
    Like :func:`decode_exponent`, the result is a double, not a ``float32``.
    """

    digits = as_digits(chars)
    if digits is None:
        raise FieldError(Field.ECCENTRICITY, line)
    if convention is NumericConvention.STANDARD:
        return digits / 10 ** len(chars)
    if digits == 0:
        raise FieldError(Field.ECCENTRICITY, line)
    magnitude = len(str(digits)) - 1
    return float(digits) ** (magnitude - len(chars))


def compute_checksum(text: str) -> int:
    """Modulo-10 checksum of the first 68 columns: digits plus one per ``-``."""

    total = 0
    for ch in text[: LINE_LENGTH - 1]:
        if ch in _DIGITS:
            total += int(ch)
        elif ch == "-":
            total += 1
    return total % 10


__all__ = [
    "LINE_LENGTH",
    "as_digits",
    "compute_checksum",
    "decode_decimal",
    "decode_eccentricity",
    "decode_exponent",
    "trim_leading_space",
    "validate_line",
]
