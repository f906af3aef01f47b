"""Parser configuration loader for tle_parser."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Mapping, Optional

__all__ = [
    "NumericConvention",
    "ParserConfig",
    "load_config",
]


class NumericConvention(str, enum.Enum):
    """How exponent fields and eccentricity are turned into numbers.

    ``LITERAL`` keeps the historical arithmetic (``mantissa ** -exponent`` and
    ``digits ** (log10(digits) - 7)``). ``STANDARD`` applies the usual NORAD
    reading with an assumed leading decimal point.
    """

    LITERAL = "literal"
    STANDARD = "standard"

    @classmethod
    def from_string(cls, value: str) -> "NumericConvention":
        try:
            return cls(value.strip().lower())
        except ValueError as exc:
            raise ValueError(f"Unsupported numeric convention: {value}") from exc


@dataclass(frozen=True)
class ParserConfig:
    """Options applied by :func:`tle_parser.parse`."""

    verify_checksum: bool = False
    numeric_convention: NumericConvention = NumericConvention.LITERAL


DEFAULT_CONFIG = ParserConfig()

_TRUE_SET = {"1", "true", "yes", "on"}
_FALSE_SET = {"0", "false", "no", "off"}


def _to_bool(value: Optional[str], default: Optional[bool] = None) -> Optional[bool]:
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE_SET:
        return True
    if lowered in _FALSE_SET:
        return False
    return default


def load_config(env: Optional[Mapping[str, str]] = None) -> ParserConfig:
    """Load parser options from environment variables."""

    env_map: Mapping[str, str]
    if env is None:
        env_map = os.environ
    else:
        env_map = env

    verify = _to_bool(env_map.get("TLE_PARSER_VERIFY_CHECKSUM"), default=DEFAULT_CONFIG.verify_checksum)
    convention_raw = env_map.get("TLE_PARSER_NUMERIC_CONVENTION")
    convention = (
        NumericConvention.from_string(convention_raw)
        if convention_raw
        else DEFAULT_CONFIG.numeric_convention
    )

    return ParserConfig(verify_checksum=bool(verify), numeric_convention=convention)
