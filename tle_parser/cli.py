"""Command line interface for the TLE parser package."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .config import NumericConvention, ParserConfig, load_config
from .core import TleError
from .logging import configure_logging, get_logger, log_context
from .reader import ParseOutcome, parse_records

LOGGER = get_logger("cli")

LOG_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tle-parser",
        description="Validate and decode Two-Line Element sets.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("paths", nargs="*", help="TLE files to decode. Use '-' (or nothing) for stdin.")
    parser.add_argument("--json", action="store_true", help="Emit one JSON object per record to stdout.")
    parser.add_argument(
        "--verify-checksum",
        action="store_const",
        const=True,
        default=None,
        help="Reject lines whose checksum digit does not match (overrides TLE_PARSER_VERIFY_CHECKSUM).",
    )
    parser.add_argument(
        "--convention",
        choices=[c.value for c in NumericConvention],
        default=None,
        help="Decoding of exponent fields and eccentricity (overrides TLE_PARSER_NUMERIC_CONVENTION).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=sorted(LOG_LEVELS),
        help="Logging verbosity.",
    )
    parser.add_argument("--quiet", "-q", action="store_true", help="Only report records that fail to decode.")
    return parser


def _resolve_config(ns: argparse.Namespace) -> ParserConfig:
    config = load_config()
    if ns.verify_checksum is not None:
        config = dataclasses.replace(config, verify_checksum=ns.verify_checksum)
    if ns.convention is not None:
        config = dataclasses.replace(config, numeric_convention=NumericConvention.from_string(ns.convention))
    return config


def _read_payload(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    return Path(path).expanduser().read_bytes()


def _outcome_payload(path: str, outcome: ParseOutcome) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "path": path,
        "line": outcome.record.line_number,
        "name": outcome.record.name,
    }
    if outcome.tle is not None:
        payload.update(outcome.tle.to_dict())
        payload["epoch"] = outcome.tle.epoch.isoformat()
    else:
        payload["error"] = str(outcome.error)
        payload["error_type"] = type(outcome.error).__name__
    return payload


def _emit(ns: argparse.Namespace, path: str, outcome: ParseOutcome) -> None:
    if ns.json:
        print(json.dumps(_outcome_payload(path, outcome), ensure_ascii=False))
        return
    where = f"{path}:{outcome.record.line_number}"
    if outcome.tle is None:
        print(f"FAIL {where}: {outcome.error}")
        return
    if ns.quiet:
        return
    tle = outcome.tle
    epoch = tle.epoch.strftime("%Y-%m-%d %H:%M:%S UTC")
    label = f" {outcome.record.name}" if outcome.record.name else ""
    print(f"OK   {where}: {tle.satellite_catalog_number:05d}{label} epoch {epoch}")


def _check_epoch(outcome: ParseOutcome) -> ParseOutcome:
    """Fail records whose epoch cannot be rendered as a datetime."""

    if outcome.tle is None:
        return outcome
    try:
        outcome.tle.epoch
    except TleError as exc:
        with log_context(line_number=outcome.record.line_number, name=outcome.record.name):
            LOGGER.warning("record_invalid", extra={"error": str(exc), "error_type": type(exc).__name__})
        return dataclasses.replace(outcome, tle=None, error=exc)
    return outcome


def _run(ns: argparse.Namespace, paths: List[str], config: ParserConfig) -> int:
    exit_code = 0
    for path in paths:
        with log_context(path=path):
            try:
                payload = _read_payload(path)
            except OSError as exc:
                LOGGER.error("read_failed", extra={"error": str(exc)})
                exit_code = 2
                continue
            total = failed = 0
            for outcome in parse_records(payload, config=config):
                outcome = _check_epoch(outcome)
                total += 1
                if not outcome.ok:
                    failed += 1
                _emit(ns, path, outcome)
            LOGGER.info("file_decoded", extra={"records": total, "failed": failed})
        if failed and exit_code == 0:
            exit_code = 1
    return exit_code


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    configure_logging(LOG_LEVELS[ns.log_level], force=True)
    try:
        config = _resolve_config(ns)
    except ValueError as exc:
        LOGGER.error("invalid_configuration", extra={"error": str(exc)})
        return 2
    return _run(ns, ns.paths or ["-"], config)


def entrypoint() -> None:
    sys.exit(main())
