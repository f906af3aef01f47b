"""
Strict decoder for NORAD Two-Line Element sets.

``parse(line1, line2)`` turns two 69-byte ASCII lines into a typed
:class:`Tle` or raises a :class:`TleError` naming the line, column or field
that failed. Reading TLE files is left to :mod:`tle_parser.reader` and the
``tle-parser`` command line tool.

References:
  - TLE column layout & checksum: CelesTrak NORAD TLE format documentation
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import NumericConvention, ParserConfig, load_config
from .core import (
    CatalogNumberMismatchError,
    ChecksumCharacterError,
    ChecksumMismatchError,
    Classification,
    ClassificationError,
    EphemerisTypeError,
    Field,
    FieldError,
    InternationalDesignator,
    Line,
    LineNumberError,
    LineSizeError,
    NonAsciiCharacterError,
    SeparatorError,
    Tle,
    TleError,
    parse,
)

__all__ = [
    "__version__",
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
    "NumericConvention",
    "ParserConfig",
    "SeparatorError",
    "Tle",
    "TleError",
    "load_config",
    "parse",
]
