#!/usr/bin/env python3
"""quickleague schedule builder.

Generate mode (default):
    quickleague [setup.yaml] [-o DIR]

    Fills in the setup record, generates a round-robin schedule and writes:
      {DIR}/schedule.txt   - Week-by-week + per-team schedule
      {DIR}/schedule.csv   - Editable CSV, one row per game
      {DIR}/schedule.json  - Teams and games as structured data

Standings mode:
    quickleague [setup.yaml] --standings results.csv

    Reads schedule.csv with HomeScore/AwayScore columns filled in and
    prints the league table.

Examples:
    quickleague                                # setup.yaml, output/
    quickleague fall.yaml -o fall2026
    quickleague fall.yaml --standings fall2026/results.csv
"""

import argparse
import logging
import sys
from pathlib import Path

from quickleague.config import SetupError, load_setup, validate_setup
from quickleague.constraints import format_validation_report, validate_schedule
from quickleague.output import parse_results_csv, write_schedule
from quickleague.scheduler import generate_schedule
from quickleague.standings import compute_standings, format_standings_report


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Round-robin league schedule builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Exit codes:
  0  Schedule generated (or standings printed)
  1  Missing or invalid setup, or no games could be scheduled
""",
    )
    parser.add_argument(
        "config", nargs="?", default="setup.yaml",
        help="Path to setup YAML file (default: setup.yaml)"
    )
    parser.add_argument(
        "--output-prefix", "-o", default="output",
        help="Output directory for generated files (default: output/)"
    )
    parser.add_argument(
        "--standings", metavar="CSV",
        help="Print standings from a results CSV instead of generating"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show debug logging"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config_path = args.config
    if not Path(config_path).exists():
        print(f"Error: setup file {config_path} not found")
        sys.exit(1)

    print(f"Loading setup from {config_path}...")
    try:
        setup = load_setup(config_path)
    except SetupError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.standings:
        print(f"Reading results from {args.standings}...")
        try:
            results = parse_results_csv(args.standings)
        except ValueError as e:
            print(f"Error: {e}")
            sys.exit(1)
        standings = compute_standings(setup.teams.names, results)
        print(format_standings_report(standings))
        return

    errors = validate_setup(setup)
    if errors:
        print("Setup validation errors:")
        for e in errors:
            print(f"  {e}")
        sys.exit(1)

    request = setup.to_request()
    print(f"Generating {request.format.value} schedule for "
          f"{len(request.teams)} teams...")
    schedule = generate_schedule(request)

    if not schedule.games:
        print("Error: no games were scheduled!")
        sys.exit(1)

    print("\nValidating...")
    result = validate_schedule(schedule, request)
    print(format_validation_report(result))

    print("\nWriting output files...")
    write_schedule(
        schedule,
        output_prefix=args.output_prefix,
        season_start=request.season_start,
        title=setup.league.name,
    )

    print(f"\n{len(schedule.games)} games scheduled.")
    if schedule.unscheduled_pairings:
        print(f"{schedule.unscheduled_pairings} pairings did not fit between "
              f"{request.season_start} and {request.season_end}; extend the "
              f"season or add time slots.")


if __name__ == "__main__":
    main()
