"""High-level orchestration: load tickets, analyze one route, print the report.

Usage patterns:

1. Defaults from environment / .env (ROUTE_ORIGIN, ROUTE_DESTINATION, ...):
   flightstats tickets.json

2. Explicit route matched against display names, HTML output:
   flightstats tickets.json --origin Владивосток --destination Тель-Авив --match-on name --format html
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from flightstats.config import settings
from flightstats.errors import FlightStatsError, InputArgumentError
from flightstats.loader import load_tickets
from flightstats.logging_config import LOG_LEVELS, setup_logging
from flightstats.models import RouteKey
from flightstats.processing.analyzer import TicketAnalyzer
from flightstats.report import ReportFormat, render_report

ROUTE_FIELD_SETS = ("code", "name")
REPORT_FORMATS = ("text", "html")


def run_pipeline(
        path: str | Path,
        route: RouteKey,
        strict_prices: bool = False,
        fmt: ReportFormat = "text",
        out: TextIO | None = None,
) -> int:
    out = out if out is not None else sys.stdout
    if route.match_on not in ROUTE_FIELD_SETS:
        raise InputArgumentError(f"match-on must be one of {ROUTE_FIELD_SETS}, got {route.match_on!r}")
    if fmt not in REPORT_FORMATS:
        raise InputArgumentError(f"format must be one of {REPORT_FORMATS}, got {fmt!r}")

    tickets = load_tickets(path)
    if not tickets:
        print("No tickets found.", file=out)
        return 0

    analyzer = TicketAnalyzer(route, strict_prices=strict_prices)
    report = analyzer.analyze(tickets)
    if report is None:
        print(f"No flights found from {route.origin} to {route.destination}.", file=out)
        return 0

    print(render_report(report, fmt), file=out)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="flightstats", description="Flight ticket route statistics")
    p.add_argument("path", help="Path to the tickets JSON file")
    p.add_argument("--origin", default=settings.origin, help="Origin filter value")
    p.add_argument("--destination", default=settings.destination, help="Destination filter value")
    p.add_argument("--match-on", choices=ROUTE_FIELD_SETS, default=settings.match_on,
                   help="Compare route against IATA codes or display names")
    p.add_argument("--format", dest="fmt", choices=REPORT_FORMATS, default=settings.report_format)
    p.add_argument("--strict-prices", action="store_true", default=settings.strict_prices,
                   help="Only use prices of tickets with a known flight duration")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=settings.log_level)
    return p


def main_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    # LOG_LEVEL from the environment bypasses argparse choices
    try:
        setup_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    route = RouteKey(origin=args.origin, destination=args.destination, match_on=args.match_on)
    try:
        return run_pipeline(args.path, route, strict_prices=args.strict_prices, fmt=args.fmt)
    except InputArgumentError as exc:
        parser.error(str(exc))
    except FlightStatsError:
        logging.exception("Ticket analysis failed")
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main_cli())
