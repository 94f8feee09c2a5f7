"""CLI entry point: chart-tools chart|ephemeris subcommands."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from typing import TextIO

from chart_tools.chart import compute_chart
from chart_tools.config import get_log_level
from chart_tools.constants import DEFAULT_INTERVAL
from chart_tools.ephemeris import generate_ephemeris
from chart_tools.params import (
    ChartParams,
    EphemerisParams,
    _normalize_time_unit,
    parse_body_list,
    parse_latitude,
    parse_longitude,
    parse_utc_offset,
    request_from_params,
)
from chart_tools.report import write_chart, write_ephemeris_summary, write_request_summary

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or CHART_TOOLS_LOG)."""
    level_name = get_log_level('DEBUG' if verbose else 'WARNING')
    logging.basicConfig(
        level=getattr(logging, level_name),
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def _run_to_output(output_path: str | None, func: Callable[[TextIO], None]) -> int:
    """Call func(stream) on stdout or on output_path; map errors to exit code 1."""
    try:
        if output_path is not None:
            with open(output_path, 'w', encoding='utf-8') as f:
                func(f)
        else:
            func(sys.stdout)
        return 0
    except (ValueError, RuntimeError, KeyError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1


def _chart_cmd(args: argparse.Namespace) -> int:
    """Run the chart subcommand.

    Parameters:
        args: Parsed args; date, latitude, longitude, utc_offset, timezone, etc.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    longitude = args.longitude
    if args.lon_dir == 'west':
        longitude = -longitude
    params = ChartParams(
        date_str=args.date,
        latitude_deg=args.latitude,
        longitude_deg=longitude,
        utc_offset_hours=args.utc_offset,
        timezone=args.timezone,
        name=args.name,
    )
    try:
        request = request_from_params(params)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    def _write(stream: TextIO) -> None:
        chart = compute_chart(request)
        write_request_summary(stream, request)
        write_chart(stream, chart)

    return _run_to_output(args.output, _write)


def _ephemeris_cmd(args: argparse.Namespace) -> int:
    """Run the ephemeris (longitude table) subcommand.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    bodies = parse_body_list([str(x) for x in (args.bodies or [])])
    if not bodies:
        print('Error: no valid bodies selected', file=sys.stderr)
        return 1
    params = EphemerisParams(
        start_time=args.start,
        stop_time=args.stop,
        interval=args.interval,
        time_unit=_normalize_time_unit(args.time_unit),
        bodies=bodies,
    )

    def _write(stream: TextIO) -> None:
        write_ephemeris_summary(stream, params)
        generate_ephemeris(params, stream)

    return _run_to_output(args.output, _write)


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the chart-tools command."""
    parser = argparse.ArgumentParser(
        prog='chart-tools',
        description='Natal chart and longitude tables from closed-form ephemerides.',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    chart_parser = subparsers.add_parser('chart', help='Compute a birth chart')
    chart_parser.add_argument(
        '--date', type=str, required=True, help='Local date/time, e.g. "1969-07-20 20:17:00"'
    )
    chart_parser.add_argument(
        '--utc-offset',
        type=parse_utc_offset,
        default=0.0,
        help='Hours of local time ahead of UTC (e.g. -5, +05:30)',
    )
    chart_parser.add_argument(
        '--timezone', type=str, default=None, help='IANA time zone; overrides --utc-offset'
    )
    chart_parser.add_argument(
        '--latitude',
        type=parse_latitude,
        required=True,
        help='Latitude (deg, north positive, or "D M S N|S")',
    )
    chart_parser.add_argument(
        '--longitude',
        type=parse_longitude,
        required=True,
        help='Longitude (deg, east positive, or "D M S E|W")',
    )
    chart_parser.add_argument(
        '--lon-dir', type=str, default='east', choices=['east', 'west'], help='Longitude sense'
    )
    chart_parser.add_argument('--name', type=str, default='', help='Chart label')
    chart_parser.add_argument('-o', '--output', type=str, default=None, help='Output file')
    chart_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    chart_parser.set_defaults(func=_chart_cmd)

    ephem_parser = subparsers.add_parser('ephemeris', help='Generate longitude table')
    ephem_parser.add_argument('--start', type=str, required=True, help='Start time (UTC)')
    ephem_parser.add_argument('--stop', type=str, required=True, help='Stop time (UTC)')
    ephem_parser.add_argument(
        '--interval', type=float, default=DEFAULT_INTERVAL, help='Time step'
    )
    ephem_parser.add_argument(
        '--time-unit',
        type=str,
        default='day',
        choices=['sec', 'min', 'hour', 'day'],
    )
    ephem_parser.add_argument(
        '--bodies',
        type=str,
        nargs='*',
        default=None,
        help='Body names (e.g. sun moon mars "n node"), or all',
    )
    ephem_parser.add_argument('-o', '--output', type=str, default=None, help='Output file')
    ephem_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    ephem_parser.set_defaults(func=_ephemeris_cmd)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the chart-tools CLI (chart | ephemeris).

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(getattr(args, 'verbose', False))
    return int(args.func(args))


if __name__ == '__main__':
    sys.exit(main())
