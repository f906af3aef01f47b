"""Locate and decode TLE records in text payloads.

The parser itself only ever sees one pair of lines; this module walks a
whole payload (a CelesTrak download, a catalog dump, a cached file) and
tolerates both the 2-line and the 3-line (name + two lines) layouts.
"""

from __future__ import annotations

import dataclasses
from typing import Iterator, List, Optional, Tuple, Union

from .config import ParserConfig
from .core import Tle, TleError, parse
from .logging import get_logger, log_context

LOGGER = get_logger("reader")

Payload = Union[bytes, bytearray, str]


@dataclasses.dataclass(frozen=True)
class TleRecord:
    """Raw lines of one TLE as found in a payload.

    ``line_number`` is the 1-based position of line 1 in the payload.
    """

    name: Optional[str]
    line1: bytes
    line2: bytes
    line_number: int


@dataclasses.dataclass(frozen=True)
class ParseOutcome:
    record: TleRecord
    tle: Optional[Tle] = None
    error: Optional[TleError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _numbered_lines(data: Payload) -> List[Tuple[int, bytes]]:
    if isinstance(data, str):
        data = data.encode("utf-8")
    lines = []
    for number, raw in enumerate(bytes(data).splitlines(), start=1):
        stripped = raw.rstrip()
        if stripped:
            lines.append((number, stripped))
    return lines


def _is_element_line(content: bytes) -> bool:
    return content.startswith((b"1 ", b"2 "))


def _name_from(content: bytes) -> str:
    name = content.decode("utf-8", errors="replace").strip()
    if name.startswith("0 "):
        name = name[2:].strip()
    return name


def _starts_record(lines: List[Tuple[int, bytes]], index: int) -> bool:
    """True when ``lines[index]`` opens a record: a line 1 or a name before one."""

    content = lines[index][1]
    if content.startswith(b"1 "):
        return True
    return (
        not _is_element_line(content)
        and index + 1 < len(lines)
        and lines[index + 1][1].startswith(b"1 ")
    )


def iter_records(data: Payload) -> Iterator[TleRecord]:
    """Yield every 2-line or 3-line TLE found in ``data``, skipping noise.

    Element lines that do not complete a pair are still yielded, paired with
    whatever follows them (or nothing), so that parsing reports them.
    """

    lines = _numbered_lines(data)
    i = 0
    while i < len(lines):
        number, current = lines[i]
        name: Optional[str] = None
        if not _is_element_line(current):
            if not _starts_record(lines, i):
                LOGGER.debug("skipping_line", extra={"line_number": number})
                i += 1
                continue
            name = _name_from(current)
            i += 1
            number, current = lines[i]

        if current.startswith(b"2 "):
            LOGGER.debug("orphan_line2", extra={"line_number": number})
            yield TleRecord(name=name, line1=b"", line2=current, line_number=number)
            i += 1
        elif i + 1 < len(lines) and not _starts_record(lines, i + 1):
            yield TleRecord(name=name, line1=current, line2=lines[i + 1][1], line_number=number)
            i += 2
        else:
            LOGGER.debug("orphan_line1", extra={"line_number": number})
            yield TleRecord(name=name, line1=current, line2=b"", line_number=number)
            i += 1


def parse_records(data: Payload, config: Optional[ParserConfig] = None) -> Iterator[ParseOutcome]:
    """Decode every record in ``data``; failures are reported, not raised."""

    for record in iter_records(data):
        with log_context(line_number=record.line_number, name=record.name):
            try:
                tle = parse(record.line1, record.line2, config=config)
            except TleError as exc:
                LOGGER.warning(
                    "record_invalid",
                    extra={"error": str(exc), "error_type": type(exc).__name__},
                )
                outcome = ParseOutcome(record=record, error=exc)
            else:
                LOGGER.debug("record_parsed", extra={"catalog_number": tle.satellite_catalog_number})
                outcome = ParseOutcome(record=record, tle=tle)
        yield outcome


def load_tles(data: Payload, config: Optional[ParserConfig] = None) -> List[Tle]:
    """Decode every record in ``data``, raising the first :class:`TleError`."""

    tles = [parse(record.line1, record.line2, config=config) for record in iter_records(data)]
    LOGGER.debug("records_loaded", extra={"count": len(tles)})
    return tles


__all__ = ["ParseOutcome", "TleRecord", "iter_records", "load_tles", "parse_records"]
