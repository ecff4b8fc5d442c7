#!/usr/bin/env python3
"""
Parse a directory of roster OCR dumps and write every upcoming period to one CSV.

Each *.txt file is one roster (the recognized text of all its photos).
Output columns: file, date, label, flight, origin, destination, etd, eta,
ordinal. Files with no derivable period are listed on stderr.

Usage:
    uv run python scripts/parse_rosters.py rosters/
    uv run python scripts/parse_rosters.py rosters/ --now 2025-07-29 -o periods.csv
    uv run python scripts/parse_rosters.py rosters/ --home-base SUB --year 2026
"""

import argparse
import sys
from datetime import date
from pathlib import Path

import pandas as pd
from tqdm import tqdm

from smartizin.config import RosterSettings
from smartizin.logging_config import setup_logging
from smartizin.roster.service import RosterService

COLUMNS = [
    "file", "date", "label", "flight", "origin", "destination", "etd", "eta", "ordinal",
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Parse roster OCR dumps to CSV")
    parser.add_argument("directory", type=str, help="Directory of *.txt OCR dumps")
    parser.add_argument(
        "--now",
        type=str,
        default=None,
        help="Current date (YYYY-MM-DD). Default: today",
    )
    parser.add_argument("--home-base", type=str, default=None, help="Home-base station code")
    parser.add_argument("--year", type=int, default=None, help="Year the rosters belong to")
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output CSV file. Default: stdout",
    )
    args = parser.parse_args()
    setup_logging()

    directory = Path(args.directory)
    if not directory.is_dir():
        print(f"Error: Not a directory: {directory}", file=sys.stderr)
        sys.exit(1)

    if args.now:
        try:
            now = date.fromisoformat(args.now)
        except ValueError:
            print(f"Error: Invalid date {args.now}", file=sys.stderr)
            sys.exit(1)
    else:
        now = date.today()

    service = RosterService(RosterSettings.from_env(home_base=args.home_base, reference_year=args.year))
    paths = sorted(directory.glob("*.txt"))

    frames = []
    empty = []
    for path in tqdm(paths, desc="Parsing rosters", unit="file"):
        period = service.parse(path.read_text(encoding="utf-8"), now)
        if period is None:
            empty.append(path.name)
            continue
        df = period.to_dataframe()
        df.insert(0, "file", path.name)
        df["ordinal"] = period.ordinal_label
        frames.append(df)

    for name in empty:
        tqdm.write(f"No upcoming period in {name}", file=sys.stderr)

    df = pd.concat(frames, ignore_index=True) if frames else pd.DataFrame(columns=COLUMNS)
    if args.output:
        df.to_csv(args.output, index=False)
        print(f"Wrote {len(df)} flights ({len(frames)} rosters) to {args.output}", file=sys.stderr)
    else:
        print(df.to_csv(index=False))


if __name__ == "__main__":
    main()
