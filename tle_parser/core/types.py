"""Dataclasses and enums describing a decoded two-line element set."""

from __future__ import annotations

import dataclasses
import datetime as dt
import enum
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from ..config import ParserConfig

RawLine = Union[bytes, bytearray, memoryview, str]


class Line(enum.IntEnum):
    """Physical line of a TLE, used to locate errors."""

    LINE1 = 1
    LINE2 = 2


class Classification(str, enum.Enum):
    UNCLASSIFIED = "U"
    CLASSIFIED = "C"
    SECRET = "S"

    @classmethod
    def from_char(cls, value: str) -> Optional["Classification"]:
        try:
            return cls(value)
        except ValueError:
            return None


@dataclasses.dataclass(frozen=True)
class InternationalDesignator:
    """Launch year, launch number and piece of the object.

    ``launch_piece`` is kept verbatim (three characters, padding included).
    """

    launch_year: int
    launch_number: int
    launch_piece: str

    def as_text(self) -> str:
        return f"{self.launch_year:02d}{self.launch_number:03d}{self.launch_piece}"


@dataclasses.dataclass(frozen=True)
class Tle:
    """Representation of a decoded two-line element set.

    Instances are plain values: two parses of the same lines compare equal.
    The ephemeris type is validated during parsing but not stored because
    ``0`` is the only accepted value.
    """

    satellite_catalog_number: int
    classification: Classification
    international_designator: InternationalDesignator
    epoch_year: int
    epoch_day_and_fractional_part: float
    first_derivative_of_mean_motion: float
    second_derivative_of_mean_motion: float
    b_star: float
    element_set_number: int
    inclination: float
    right_ascension_of_ascending_node: float
    eccentricity: float
    argument_of_perigee: float
    mean_anomaly: float
    mean_motion: float
    revolution_number_at_epoch: int
    checksum_line1: int
    checksum_line2: int

    @classmethod
    def parse(cls, line1: RawLine, line2: RawLine, config: Optional["ParserConfig"] = None) -> "Tle":
        from .parser import parse

        return parse(line1, line2, config=config)

    @property
    def epoch(self) -> dt.datetime:
        """Epoch as a timezone-aware UTC datetime (NORAD 1957 pivot).

        Raises:
            FieldError: the epoch day falls outside the ``datetime`` range.
        """

        from .errors import Field, FieldError

        year = 2000 + self.epoch_year if self.epoch_year < 57 else 1900 + self.epoch_year
        day = int(self.epoch_day_and_fractional_part)
        frac = self.epoch_day_and_fractional_part - day
        try:
            base = dt.datetime(year, 1, 1, tzinfo=dt.timezone.utc) + dt.timedelta(days=day - 1)
            return base + dt.timedelta(seconds=frac * 86400.0)
        except OverflowError as exc:
            raise FieldError(
                Field.EPOCH_DAY,
                Line.LINE1,
                f"line 1: epoch day {self.epoch_day_and_fractional_part} is outside the datetime range",
            ) from exc

    def to_dict(self) -> Dict[str, Any]:
        payload = dataclasses.asdict(self)
        payload["classification"] = self.classification.value
        return payload


__all__ = ["Classification", "InternationalDesignator", "Line", "RawLine", "Tle"]
