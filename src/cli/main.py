"""Radar CLI entry points.
This module exposes the build command for spreadsheet and CSV radars.
It maps argparse options onto a build request and a console presenter.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Any, Sequence

from core.config import RadarConfig, parse_http_timeout
from core.errors import RadarConfigError
from core.types import BuildRequest
from ingest.pipeline import build_radar
from present.console_presenter import ConsolePresenter


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="byor-radar", description="Build your own radar")
    parser.add_argument("--default-sheet", help="Override RADAR_DEFAULT_SHEET for this command")
    parser.add_argument(
        "--timeout",
        type=_timeout_argument,
        help="Override RADAR_HTTP_TIMEOUT seconds for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_build_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the radar CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.default_sheet, args.timeout)
    except RadarConfigError as error:
        parser.error(str(error))
    if args.command == "build":
        return _run_build_command(config, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(default_sheet: str | None, timeout: float | None) -> RadarConfig:
    """Build runtime config with optional command-line overrides.

    Args:
        default_sheet: Optional default spreadsheet reference.
        timeout: Optional HTTP timeout in seconds.

    Returns:
        Configured runtime config.
    """
    config = RadarConfig.from_env()
    if default_sheet:
        config = replace(config, default_sheet_reference=default_sheet)
    if timeout is not None:
        config = replace(config, http_timeout=timeout)
    return config


def _run_build_command(config: RadarConfig, args: argparse.Namespace) -> int:
    """Handle build command.

    Args:
        config: Runtime config.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    request = BuildRequest.from_url(args.source)
    presenter = ConsolePresenter(as_json=args.json)
    outcome = build_radar(request, config, presenter)
    return 0 if outcome.ok else 1


def _add_build_command(subparsers: Any) -> None:
    """Register build subcommand."""
    parser = subparsers.add_parser("build", help="Build a radar from a sheet or CSV URL")
    parser.add_argument(
        "source",
        nargs="?",
        default="",
        help="Page URL or query string, e.g. 'sheetId=https://host/radar.csv'",
    )
    parser.add_argument("--json", action="store_true", help="Print the radar as JSON")


def _timeout_argument(raw_value: str) -> float | None:
    """Parse ``--timeout`` with the same rules as RADAR_HTTP_TIMEOUT."""
    try:
        return parse_http_timeout(raw_value, source="--timeout")
    except RadarConfigError as error:
        raise argparse.ArgumentTypeError(str(error)) from error
