"""Rank a lap log read from a file, optionally with custom scoring weights."""

import argparse
import logging
import sys
from pathlib import Path

from race_elo import RaceEloError, make_weights, rank_race


def analyze_race(path: Path, blt: float, consistency: float, finish: float) -> int:
    """Print the ranked table for the lap log at *path*; return an exit code."""
    try:
        weights = make_weights(blt, consistency, finish)
        stats = rank_race(path.read_text(encoding="utf-8"), weights)
    except RaceEloError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"{'Rank':<5}{'Pos':<5}{'Driver':<20}{'Best':>9}{'Laps':>6}{'Cons.':>8}{'ELO':>8}")
    for s in stats:
        print(
            f"{s.rank:<5}{s.position:<5}{s.name:<20}{s.best_lap_time:>9.3f}"
            f"{s.laps_completed:>6}{s.consistency_score:>8.1%}{s.elo_score:>8.1%}"
        )
    for s in stats:
        hist = s.laps_within_range
        print(
            f"  {s.name}: ±0.1 {hist.within_01}, ±0.2 {hist.within_02}, "
            f"±0.3 {hist.within_03}, ±0.4 {hist.within_04} "
            f"of {s.laps_completed} laps"
        )
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("log_file", type=Path)
    parser.add_argument("--blt", type=float, default=0.3)
    parser.add_argument("--consistency", type=float, default=0.5)
    parser.add_argument("--finish", type=float, default=0.2)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    sys.exit(analyze_race(args.log_file, args.blt, args.consistency, args.finish))


if __name__ == "__main__":
    main()
