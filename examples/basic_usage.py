"""Basic usage example: rank the drivers of a pasted lap log."""

from race_elo import RaceEloError, parse_race_data, score_race

RACE_LOG = """\
Alice
(Penalties: 0)
1\t46.331 [1]
2\t46.445 [1]
3\t46.390 [1]
Bob
(Penalties: 1)
1\t47.000 [2]
2\t46.900 [2]
3\t46.950 [2]
"""


def main() -> None:
    try:
        drivers = parse_race_data(RACE_LOG)
        stats = score_race(drivers)
    except RaceEloError as exc:
        print(f"Could not rank race: {exc}")
        return

    print("=== Parsed drivers ===")
    for d in drivers:
        print(f"  {d.driver_name}: {len(d.laps)} laps, {d.penalties} penalties")

    print("\n=== Rankings ===")
    for s in stats:
        print(
            f"  #{s.rank} {s.name:<10} best {s.best_lap_time:.3f}s  "
            f"consistency {s.consistency_score:.1%}  ELO {s.elo_score:.1%}"
        )


if __name__ == "__main__":
    main()
