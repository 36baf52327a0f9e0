"""
bootstrap/entrypoints.py - Command-line entry point

Reads a vehicle configuration as JSON, evaluates it and prints the
compliance result.

Exit codes:
    0  compliant
    1  not compliant
    2  invalid input or configuration
"""

from __future__ import annotations
from typing import Any, List, TextIO
import argparse
import json
import logging
import sys

from ..compliance.engine import ComplianceEngine
from ..compliance.limits import LIMIT_REGISTRY
from ..compliance.payloads import parse_ticket
from ..compliance.schema import ComplianceResult
from ..errors import WeighStationError, error_response
from .config import DEFAULT_LOG_FORMAT, load_config

logger = logging.getLogger("bootstrap.entrypoints")

EXIT_COMPLIANT = 0
EXIT_NON_COMPLIANT = 1
EXIT_INVALID_INPUT = 2

# Handlers installed by setup_logging, replaced on each call
_handlers: List[logging.Handler] = []


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record):
        return json.dumps({
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        })


def setup_logging(
    level: str = "INFO",
    log_file: str = None,
    json_format: bool = False,
    fmt: str = DEFAULT_LOG_FORMAT,
) -> None:
    """
    Configure application logging.

    Console output goes to stderr so that stdout carries only the report.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
        json_format: Use JSON format for logs
        fmt: Format string for plain-text logs
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(fmt)

    root_logger = logging.getLogger()
    for handler in _handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    _handlers.append(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        _handlers.append(file_handler)

    root_logger.setLevel(log_level)
    for handler in _handlers:
        root_logger.addHandler(handler)


def format_report(result: ComplianceResult) -> str:
    """Render a compliance result as plain text."""
    jurisdiction = result.jurisdiction
    lines = [
        f"Jurisdiction: {LIMIT_REGISTRY.name_for(jurisdiction)} ({jurisdiction})",
        f"Status: {result.status.value}",
        f"Max allowed weight: {result.max_allowed_weight:,.0f} lbs",
        f"Over weight: {result.over_weight:,.0f} lbs",
    ]

    if result.violations:
        lines.append("Violations:")
        for violation in result.violations:
            lines.append(f"  - {violation.description}")
            lines.append(f"    {violation.recommendation}")

    if result.advisories:
        lines.append("Advisories:")
        for advisory in result.advisories:
            lines.append(f"  - {advisory.description}")
            lines.append(f"    {advisory.recommendation}")

    return "\n".join(lines)


def _read_document(source: str, stdin: TextIO) -> Any:
    if source == "-":
        return json.load(stdin)
    with open(source) as f:
        return json.load(f)


def cli_main(args: list = None) -> int:
    """
    CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        description="Truck weight compliance checker",
        prog="weighstation",
    )

    parser.add_argument(
        "vehicle",
        help="Path to vehicle JSON document, or '-' for stdin",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
        default=None,
    )
    parser.add_argument(
        "-j", "--jurisdiction",
        help="Jurisdiction code (e.g. US, CA, NY); overrides the document",
        default=None,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level",
    )
    parser.add_argument(
        "--log-file",
        help="Log file path",
        default=None,
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )

    parsed = parser.parse_args(args)

    try:
        config = load_config(parsed.config)
    except WeighStationError as e:
        print(str(e), file=sys.stderr)
        return EXIT_INVALID_INPUT

    # Setup logging
    log_level = "DEBUG" if parsed.verbose else (parsed.log_level or config.logging.level)
    setup_logging(
        level=log_level,
        log_file=parsed.log_file or config.logging.log_file,
        json_format=config.logging.json_logs,
        fmt=config.logging.format,
    )

    try:
        document = _read_document(parsed.vehicle, sys.stdin)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read vehicle document {parsed.vehicle}: {e}")
        print(f"Could not read vehicle document: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    try:
        vehicle, document_jurisdiction = parse_ticket(document)
    except WeighStationError as e:
        logger.error(f"Rejected vehicle document: {e.message}")
        if parsed.json:
            print(json.dumps(error_response(e), indent=2, sort_keys=True, default=str))
        else:
            print(str(e), file=sys.stderr)
            for issue in e.details.get("issues", []):
                print(f"  - {issue}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    jurisdiction = (
        parsed.jurisdiction
        or document_jurisdiction
        or config.compliance.default_jurisdiction
    )
    engine = ComplianceEngine(warning_ratio=config.compliance.warning_ratio)
    result = engine.evaluate_jurisdiction(vehicle, jurisdiction)

    if parsed.json:
        print(json.dumps(result.to_dict(), indent=2, sort_keys=True))
    else:
        print(format_report(result))

    return EXIT_COMPLIANT if result.is_compliant else EXIT_NON_COMPLIANT


def main() -> None:
    """Console script wrapper."""
    sys.exit(cli_main())
