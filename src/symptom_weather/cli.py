"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from symptom_weather import __version__
from symptom_weather.config import get_settings
from symptom_weather.flows.analyze import analyze_all
from symptom_weather.flows.fetch import fetch_all


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="symptom-weather",
        description="Correlate a symptom diary with local weather conditions",
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

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    subparsers.add_parser("fetch", help="Fetch recent weather history")

    analyze_parser = subparsers.add_parser("analyze", help="Correlate symptoms with weather")
    analyze_parser.add_argument(
        "--symptoms",
        type=Path,
        required=True,
        help="Path to the symptom diary JSON export",
    )
    analyze_parser.add_argument(
        "--window-days",
        type=int,
        default=None,
        help="Days to analyse, ending at the latest data (default: from settings)",
    )
    analyze_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON",
    )
    analyze_parser.add_argument(
        "--personal-thresholds",
        action="store_true",
        help="Classify effects with thresholds learned from symptom days",
    )

    return parser


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Location: ({settings.lat}, {settings.lon}) {settings.timezone}")
    print(f"Window: {settings.window_days} days")
    return 0


def cmd_fetch(_args: argparse.Namespace) -> int:
    """Handle the 'fetch' command."""
    settings = get_settings()
    print(f"Fetching weather for ({settings.lat}, {settings.lon})...")
    result = fetch_all(lat=settings.lat, lon=settings.lon, timezone=settings.timezone)
    print(f"Done. {result['weather_days']} days of weather history available.")
    return 0


def format_report(result: dict[str, Any]) -> str:
    """Render a serialized analysis result as plain text."""
    quality = result["quality"]
    lines = [
        result["summary"],
        "",
        f"Data quality: {quality['label']} "
        f"({quality['overlapping_days']}/{quality['total_days']} overlapping days, "
        f"coverage {quality['coverage']:.0%}, consistency {quality['consistency']:.0%})",
        f"  {quality['description']}",
    ]
    if quality["days_until_next_level"]:
        lines.append(f"  {quality['days_until_next_level']} more days to reach the next level")

    if result["correlations"]:
        lines += ["", f"{'Factor':<28}{'r':>8}{'p':>8}  {'Strength':<12}Effect"]
        for c in result["correlations"]:
            effect = c["effect"]["kind"]
            if c["effect"]["threshold"] is not None:
                effect = f"{effect} ({c['effect']['threshold']:g})"
            marker = "*" if c["is_significant"] else " "
            lines.append(
                f"{marker}{c['factor']:<27}{c['correlation']:>8.3f}{c['p_value']:>8.3f}"
                f"  {c['strength']:<12}{effect}"
            )

    if result["insights"]:
        lines += ["", "Insights:"]
        lines += [f"  - {insight}" for insight in result["insights"]]

    return "\n".join(lines)


def cmd_analyze(args: argparse.Namespace) -> int:
    """Handle the 'analyze' command."""
    if not args.symptoms.exists():
        print(f"Symptom file not found: {args.symptoms}", file=sys.stderr)
        return 1

    summary = analyze_all(
        args.symptoms,
        window_days=args.window_days,
        personal_thresholds=args.personal_thresholds,
    )
    if "error" in summary:
        print(f"Error: {summary['error']}. Run 'symptom-weather fetch' first.", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(summary["result"], indent=2))
    else:
        print(format_report(summary["result"]))
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug or get_settings().debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "fetch": cmd_fetch,
        "analyze": cmd_analyze,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
