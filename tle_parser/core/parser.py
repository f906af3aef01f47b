"""Decode two fixed-width TLE lines into a :class:`~tle_parser.core.types.Tle`.

Each line is read left to right through :class:`_Columns`, a bounds-checked
cursor over the 69 validated characters. The first failing column or field
aborts the parse with a :class:`~tle_parser.core.errors.TleError`.
"""

from __future__ import annotations

from typing import Optional, Tuple

from ..config import DEFAULT_CONFIG, NumericConvention, ParserConfig
from .errors import (
    CatalogNumberMismatchError,
    ChecksumCharacterError,
    ChecksumMismatchError,
    ClassificationError,
    EphemerisTypeError,
    Field,
    FieldError,
    LineNumberError,
    SeparatorError,
)
from .fields import (
    as_digits,
    compute_checksum,
    decode_decimal,
    decode_eccentricity,
    decode_exponent,
    trim_leading_space,
    validate_line,
)
from .types import Classification, InternationalDesignator, Line, RawLine, Tle


class _Columns:
    """Left-to-right reader over one validated line."""

    __slots__ = ("text", "line", "position")

    def __init__(self, text: str, line: Line) -> None:
        self.text = text
        self.line = line
        self.position = 0

    def take(self, width: int, field: Field) -> str:
        end = self.position + width
        if end > len(self.text):
            raise FieldError(field, self.line)
        chunk = self.text[self.position:end]
        self.position = end
        return chunk

    def char(self) -> str:
        found = self.text[self.position:self.position + 1]
        self.position += len(found)
        return found

    def separator(self) -> None:
        found = self.char()
        if found != " ":
            raise SeparatorError(self.line, found, self.position - len(found))

    def rest(self) -> str:
        chunk = self.text[self.position:]
        self.position = len(self.text)
        return chunk


def _digits(chars: str, field: Field, line: Line) -> int:
    value = as_digits(chars)
    if value is None:
        raise FieldError(field, line)
    return value


def _checksum(chars: str, line: Line) -> int:
    value = as_digits(chars)
    if value is None:
        raise ChecksumCharacterError(line, chars[:1])
    return value


def _open_line(text: str, line: Line) -> Tuple[_Columns, int]:
    """Check the marker, first separator and catalog number of a line."""

    cols = _Columns(text, line)
    marker = cols.char()
    if marker != str(int(line)):
        raise LineNumberError(line, marker)
    cols.separator()
    catalog_number = _digits(cols.take(5, Field.CATALOG_NUMBER), Field.CATALOG_NUMBER, line)
    return cols, catalog_number


def _exponent_field(cols: _Columns, field: Field, convention: NumericConvention, signed: bool) -> float:
    chars = cols.take(8, field)
    if convention is NumericConvention.STANDARD or not signed:
        return decode_exponent(chars, field, cols.line, convention)
    sign = 1.0
    if chars[:1] == "-":
        sign = -1.0
        chars = chars[1:]
    return decode_exponent(chars, field, cols.line, convention) * sign


def parse(line1: RawLine, line2: RawLine, config: Optional[ParserConfig] = None) -> Tle:
    """Parse a pair of 69-byte TLE lines.

    Both lines are size and ASCII checked before anything else, and the
    catalog numbers of both lines are compared before the remaining fields
    are decoded.

    Raises:
        TleError: the first failure encountered, with its location.
    """

    config = config or DEFAULT_CONFIG
    convention = config.numeric_convention

    text1 = validate_line(line1, Line.LINE1)
    text2 = validate_line(line2, Line.LINE2)

    cols1, catalog_number_1 = _open_line(text1, Line.LINE1)
    cols2, catalog_number_2 = _open_line(text2, Line.LINE2)
    if catalog_number_1 != catalog_number_2:
        raise CatalogNumberMismatchError(catalog_number_1, catalog_number_2)

    # Line 1
    found = cols1.take(1, Field.CLASSIFICATION)
    classification = Classification.from_char(found)
    if classification is None:
        raise ClassificationError(found)
    cols1.separator()

    launch_year = _digits(cols1.take(2, Field.LAUNCH_YEAR), Field.LAUNCH_YEAR, Line.LINE1)
    launch_number = _digits(cols1.take(3, Field.LAUNCH_NUMBER), Field.LAUNCH_NUMBER, Line.LINE1)
    launch_piece = cols1.take(3, Field.LAUNCH_PIECE)
    cols1.separator()

    epoch_year = _digits(cols1.take(2, Field.EPOCH_YEAR), Field.EPOCH_YEAR, Line.LINE1)
    epoch_day = decode_decimal(cols1.take(12, Field.EPOCH_DAY), Field.EPOCH_DAY, Line.LINE1)
    cols1.separator()

    first_derivative = decode_decimal(
        cols1.take(10, Field.FIRST_DERIVATIVE), Field.FIRST_DERIVATIVE, Line.LINE1
    )
    cols1.separator()

    second_derivative = _exponent_field(cols1, Field.SECOND_DERIVATIVE, convention, signed=False)
    cols1.separator()

    b_star = _exponent_field(cols1, Field.B_STAR, convention, signed=True)
    cols1.separator()

    found = cols1.take(1, Field.EPHEMERIS_TYPE)
    if found != "0":
        raise EphemerisTypeError(found)
    cols1.separator()

    element_set_number = _digits(
        trim_leading_space(cols1.take(4, Field.ELEMENT_SET_NUMBER)),
        Field.ELEMENT_SET_NUMBER,
        Line.LINE1,
    )
    checksum_line1 = _checksum(cols1.rest(), Line.LINE1)

    # Line 2
    cols2.separator()
    inclination = decode_decimal(cols2.take(8, Field.INCLINATION), Field.INCLINATION, Line.LINE2)
    cols2.separator()
    right_ascension = decode_decimal(
        cols2.take(8, Field.RIGHT_ASCENSION), Field.RIGHT_ASCENSION, Line.LINE2
    )
    cols2.separator()
    eccentricity = decode_eccentricity(cols2.take(7, Field.ECCENTRICITY), Line.LINE2, convention)
    cols2.separator()
    argument_of_perigee = decode_decimal(
        cols2.take(8, Field.ARGUMENT_OF_PERIGEE), Field.ARGUMENT_OF_PERIGEE, Line.LINE2
    )
    cols2.separator()
    mean_anomaly = decode_decimal(cols2.take(8, Field.MEAN_ANOMALY), Field.MEAN_ANOMALY, Line.LINE2)
    cols2.separator()
    mean_motion = decode_decimal(cols2.take(11, Field.MEAN_MOTION), Field.MEAN_MOTION, Line.LINE2)
    revolution_number = _digits(
        trim_leading_space(cols2.take(5, Field.REVOLUTION_NUMBER)),
        Field.REVOLUTION_NUMBER,
        Line.LINE2,
    )
    checksum_line2 = _checksum(cols2.rest(), Line.LINE2)

    if config.verify_checksum:
        for line, text, declared in (
            (Line.LINE1, text1, checksum_line1),
            (Line.LINE2, text2, checksum_line2),
        ):
            computed = compute_checksum(text)
            if computed != declared:
                raise ChecksumMismatchError(line, declared, computed)

    return Tle(
        satellite_catalog_number=catalog_number_1,
        classification=classification,
        international_designator=InternationalDesignator(
            launch_year=launch_year,
            launch_number=launch_number,
            launch_piece=launch_piece,
        ),
        epoch_year=epoch_year,
        epoch_day_and_fractional_part=epoch_day,
        first_derivative_of_mean_motion=first_derivative,
        second_derivative_of_mean_motion=second_derivative,
        b_star=b_star,
        element_set_number=element_set_number,
        inclination=inclination,
        right_ascension_of_ascending_node=right_ascension,
        eccentricity=eccentricity,
        argument_of_perigee=argument_of_perigee,
        mean_anomaly=mean_anomaly,
        mean_motion=mean_motion,
        revolution_number_at_epoch=revolution_number,
        checksum_line1=checksum_line1,
        checksum_line2=checksum_line2,
    )


__all__ = ["parse"]
