"""Public API for tle_parser core primitives."""

from .errors import (
    CatalogNumberMismatchError,
    ChecksumCharacterError,
    ChecksumMismatchError,
    ClassificationError,
    EphemerisTypeError,
    Field,
    FieldError,
    LineNumberError,
    LineSizeError,
    NonAsciiCharacterError,
    SeparatorError,
    TleError,
)
from .fields import LINE_LENGTH, as_digits, compute_checksum, trim_leading_space, validate_line
from .parser import parse
from .types import Classification, InternationalDesignator, Line, Tle

__all__ = [
    "LINE_LENGTH",
    "CatalogNumberMismatchError",
    "ChecksumCharacterError",
    "ChecksumMismatchError",
    "Classification",
    "ClassificationError",
    "EphemerisTypeError",
    "Field",
    "FieldError",
    "InternationalDesignator",
    "Line",
    "LineNumberError",
    "LineSizeError",
    "NonAsciiCharacterError",
    "SeparatorError",
    "Tle",
    "TleError",
    "as_digits",
    "compute_checksum",
    "parse",
    "trim_leading_space",
    "validate_line",
]
