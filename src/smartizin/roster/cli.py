"""CLI for parsing roster OCR text into the upcoming travel period."""

import argparse
import logging
import sys
from datetime import date

from smartizin.config import RosterSettings
from smartizin.logging_config import setup_logging
from smartizin.roster.service import RosterService
from smartizin.roster.summary import render_route_lines, summarize
from smartizin.roster.text import merge_ocr_texts


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Reconstruct the upcoming flight period from roster OCR text"
    )
    parser.add_argument(
        "files",
        nargs="+",
        help="OCR text files, one per roster photo ('-' reads stdin)",
    )
    parser.add_argument(
        "--now",
        help="Current date (YYYY-MM-DD). Default: today",
    )
    parser.add_argument(
        "--home-base",
        help="Home-base station code closing a duty cycle (default: CGK)",
    )
    parser.add_argument(
        "--year",
        type=int,
        help="Year the roster dates belong to (default: 2025)",
    )
    parser.add_argument(
        "--days",
        action="store_true",
        help="Also print every parsed roster day",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Write period flights to CSV file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Trace every parsing decision",
    )
    return parser.parse_args(argv)


def _read_texts(paths):
    texts = []
    for path in paths:
        if path == "-":
            texts.append(sys.stdin.read())
            continue
        with open(path, encoding="utf-8") as f:
            texts.append(f.read())
    return texts


def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.now:
        try:
            now = date.fromisoformat(args.now)
        except ValueError:
            print(f"Error: Invalid date format: {args.now}", file=sys.stderr)
            sys.exit(1)
    else:
        now = date.today()

    try:
        settings = RosterSettings.from_env(home_base=args.home_base, reference_year=args.year)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        texts = _read_texts(args.files)
    except OSError as e:
        print(f"Error: Cannot read roster text: {e}", file=sys.stderr)
        sys.exit(1)

    service = RosterService(settings)
    analysis = service.analyze(merge_ocr_texts(texts), now)

    if args.days:
        df = analysis.to_dataframe()
        if df.empty:
            print("No roster days found.", file=sys.stderr)
        else:
            print(df.to_string(index=False))
            print()

    period = analysis.period
    if period is None:
        print("Error: No upcoming flight period found in roster text.", file=sys.stderr)
        sys.exit(1)

    summary = summarize(period)
    print(f"Start: {summary.start_label} ({summary.start_date})")
    print(f"Days: {summary.day_count}")
    print(f"Tomorrow: duty day {summary.ordinal_label} ({summary.tomorrow_ordinal})")
    print()
    print(render_route_lines(period))

    if args.output:
        df = period.to_dataframe()
        df.to_csv(args.output, index=False)
        print(f"\nWrote {len(df)} rows to {args.output}", file=sys.stderr)


if __name__ == "__main__":
    main()
