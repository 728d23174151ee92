"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path

from hourly_weather import __version__
from hourly_weather.analysis.queries import QueryEngine
from hourly_weather.config import get_settings
from hourly_weather.datasources.smhi import load_observations
from hourly_weather.exceptions import HourlyWeatherError
from hourly_weather.logging_setup import setup_logging
from hourly_weather.renderers.report import build_report_html
from hourly_weather.renderers.text import render_lines


def _add_range_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("date_from", type=date.fromisoformat, help="Start date (YYYY-MM-DD)")
    parser.add_argument("date_to", type=date.fromisoformat, help="End date (YYYY-MM-DD)")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="hourly-weather",
        description="Date-range statistics over hourly weather station observations",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=None,
        help="Observation file (default: data_file from settings)",
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Skip malformed lines instead of failing",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    average_parser = subparsers.add_parser("average", help="Average temperature per day")
    _add_range_arguments(average_parser)

    missing_parser = subparsers.add_parser("missing", help="Missing hourly readings per day")
    _add_range_arguments(missing_parser)

    approved_parser = subparsers.add_parser("approved", help="Percentage of approved readings")
    _add_range_arguments(approved_parser)

    report_parser = subparsers.add_parser("report", help="HTML report of all three queries")
    _add_range_arguments(report_parser)
    report_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the report here instead of stdout",
    )

    subparsers.add_parser("info", help="Show application info")

    return parser


def load_engine(args: argparse.Namespace) -> QueryEngine | None:
    """Load the observation file into a QueryEngine.

    Prints the problem to stderr and returns None if the file is missing,
    unreadable, malformed or out of date order.
    """
    settings = get_settings()
    path = args.data if args.data is not None else settings.data_file
    try:
        store = load_observations(path, skip_invalid=args.skip_invalid)
    except FileNotFoundError:
        print(f"Error: data file not found: {path}", file=sys.stderr)
        return None
    except HourlyWeatherError as exc:
        print(f"Error: could not load {path}: {exc}", file=sys.stderr)
        return None
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: could not read {path}: {exc}", file=sys.stderr)
        return None
    return QueryEngine(store, readings_per_day=settings.readings_per_day)


def _run_query(args: argparse.Namespace, name: str) -> int:
    engine = load_engine(args)
    if engine is None:
        return 1

    query = getattr(engine, name)
    result = query(args.date_from, args.date_to)
    if result.success:
        print(render_lines(result))
        return 0
    else:
        print(render_lines(result), file=sys.stderr)
        return 1


def cmd_average(args: argparse.Namespace) -> int:
    """Handle the 'average' command."""
    return _run_query(args, "average_per_day")


def cmd_missing(args: argparse.Namespace) -> int:
    """Handle the 'missing' command."""
    return _run_query(args, "missing_per_day")


def cmd_approved(args: argparse.Namespace) -> int:
    """Handle the 'approved' command."""
    return _run_query(args, "approved_percentage")


def cmd_report(args: argparse.Namespace) -> int:
    """Handle the 'report' command: render all three queries as HTML."""
    engine = load_engine(args)
    if engine is None:
        return 1

    average = engine.average_per_day(args.date_from, args.date_to)
    missing = engine.missing_per_day(args.date_from, args.date_to)
    approved = engine.approved_percentage(args.date_from, args.date_to)
    html = build_report_html(average, missing, approved)

    if args.output is None:
        print(html)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(html, encoding="utf-8")
        print(f"Report written to {args.output}")

    return 0 if all(r.success for r in (average, missing, approved)) else 1


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Data file: {settings.data_file}")
    print(f"Debug: {settings.debug}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    settings = get_settings()
    setup_logging("DEBUG" if args.debug or settings.debug else settings.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "average": cmd_average,
        "missing": cmd_missing,
        "approved": cmd_approved,
        "report": cmd_report,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
