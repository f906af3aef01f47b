"""Exceptions raised while decoding a two-line element set."""

from __future__ import annotations

import enum
from typing import Optional

from .types import Line


class Field(str, enum.Enum):
    """Semantic fields of a TLE, named in :class:`FieldError`."""

    CATALOG_NUMBER = "catalog_number"
    CLASSIFICATION = "classification"
    LAUNCH_YEAR = "launch_year"
    LAUNCH_NUMBER = "launch_number"
    LAUNCH_PIECE = "launch_piece"
    EPOCH_YEAR = "epoch_year"
    EPOCH_DAY = "epoch_day"
    FIRST_DERIVATIVE = "first_derivative"
    SECOND_DERIVATIVE = "second_derivative"
    B_STAR = "b_star"
    EPHEMERIS_TYPE = "ephemeris_type"
    ELEMENT_SET_NUMBER = "element_set_number"
    INCLINATION = "inclination"
    RIGHT_ASCENSION = "right_ascension"
    ECCENTRICITY = "eccentricity"
    ARGUMENT_OF_PERIGEE = "argument_of_perigee"
    MEAN_ANOMALY = "mean_anomaly"
    MEAN_MOTION = "mean_motion"
    REVOLUTION_NUMBER = "revolution_number"
    CHECKSUM = "checksum"


class TleError(ValueError):
    """Base class for every TLE decoding failure."""

    line: Optional[Line] = None


class LineSizeError(TleError):
    def __init__(self, line: Line, length: int) -> None:
        self.line = line
        self.length = length
        super().__init__(f"line {int(line)} has {length} bytes, expected 69")


class NonAsciiCharacterError(TleError):
    def __init__(self, line: Line) -> None:
        self.line = line
        super().__init__(f"line {int(line)} contains a non-ASCII byte")


class LineNumberError(TleError):
    def __init__(self, line: Line, found: str) -> None:
        self.line = line
        self.found = found
        super().__init__(f"line {int(line)} starts with {found!r}, expected '{int(line)}'")


class SeparatorError(TleError):
    """A separator column does not hold a space; ``column`` is 0-based."""

    def __init__(self, line: Line, found: str, column: int) -> None:
        self.line = line
        self.found = found
        self.column = column
        super().__init__(f"line {int(line)} column {column}: expected ' ', found {found!r}")


class FieldError(TleError):
    """A semantic field could not be decoded."""

    def __init__(self, field: Field, line: Line, message: Optional[str] = None) -> None:
        self.field = field
        self.line = line
        super().__init__(message or f"line {int(line)}: invalid {field.value.replace('_', ' ')}")


class ClassificationError(FieldError):
    def __init__(self, found: str) -> None:
        self.found = found
        super().__init__(
            Field.CLASSIFICATION,
            Line.LINE1,
            f"line 1: classification {found!r} is not one of 'U', 'C', 'S'",
        )


class EphemerisTypeError(FieldError):
    def __init__(self, found: str) -> None:
        self.found = found
        super().__init__(Field.EPHEMERIS_TYPE, Line.LINE1, f"line 1: ephemeris type {found!r}, expected '0'")


class ChecksumCharacterError(FieldError):
    def __init__(self, line: Line, found: str) -> None:
        self.found = found
        super().__init__(Field.CHECKSUM, line, f"line {int(line)}: checksum {found!r} is not a digit")


class CatalogNumberMismatchError(TleError):
    def __init__(self, line1_value: int, line2_value: int) -> None:
        self.line1_value = line1_value
        self.line2_value = line2_value
        super().__init__(f"catalog numbers differ between lines: {line1_value} != {line2_value}")


class ChecksumMismatchError(TleError):
    def __init__(self, line: Line, declared: int, computed: int) -> None:
        self.line = line
        self.declared = declared
        self.computed = computed
        super().__init__(f"line {int(line)}: checksum {declared} does not match computed {computed}")


__all__ = [
    "CatalogNumberMismatchError",
    "ChecksumCharacterError",
    "ChecksumMismatchError",
    "ClassificationError",
    "EphemerisTypeError",
    "Field",
    "FieldError",
    "LineNumberError",
    "LineSizeError",
    "NonAsciiCharacterError",
    "SeparatorError",
    "TleError",
]
