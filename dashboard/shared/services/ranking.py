"""Race ranking service — runs the parser and scorer for the dashboard."""

from __future__ import annotations

from dataclasses import dataclass

from race_elo import DEFAULT_WEIGHTS, DriverRecord, DriverStats, ScoringWeights
from race_elo.parser import parse_race_data
from race_elo.scoring import score_race

from ..constants import FIELD_COLOR, PODIUM_COLORS
from ..service_logging import log_service_call


@dataclass(frozen=True)
class RankingResult:
    drivers: list[DriverRecord]
    stats: list[DriverStats]


@dataclass(frozen=True)
class RaceSummary:
    field_size: int
    total_laps: int
    winner: str
    fastest_driver: str
    fastest_lap: float
    most_consistent: str


@dataclass(frozen=True)
class EloChartData:
    names: list[str]
    elo_percents: list[float]
    colors: list[str]


@dataclass(frozen=True)
class ConsistencyBreakdownData:
    names: list[str]
    # band label -> lap counts parallel to names
    bands: dict[str, list[int]]
    outside: list[int]


class RaceRankingService:
    """Encapsulates the text -> ranked table pipeline for the dashboard."""

    def __init__(self, weights: ScoringWeights = DEFAULT_WEIGHTS) -> None:
        self._weights = weights

    @property
    def weights(self) -> ScoringWeights:
        return self._weights

    @log_service_call
    def calculate(self, raw_text: str) -> RankingResult:
        """Parse the raw lap log and rank its drivers.

        Errors from either step propagate; callers must not show stale results.
        """
        drivers = parse_race_data(raw_text)
        stats = score_race(drivers, self._weights)
        return RankingResult(drivers=drivers, stats=stats)

    @log_service_call
    def summarise(self, stats: list[DriverStats]) -> RaceSummary:
        """Headline figures for the metric row above the table."""
        fastest = min(stats, key=lambda s: s.best_lap_time)
        most_consistent = max(stats, key=lambda s: s.consistency_score)
        return RaceSummary(
            field_size=len(stats),
            total_laps=sum(s.laps_completed for s in stats),
            winner=stats[0].name,
            fastest_driver=fastest.name,
            fastest_lap=fastest.best_lap_time,
            most_consistent=most_consistent.name,
        )

    @log_service_call
    def prepare_elo_chart(self, stats: list[DriverStats]) -> EloChartData:
        """Bar chart data in rank order; podium ranks get medal colours."""
        colors = [
            PODIUM_COLORS[s.rank - 1] if s.rank <= len(PODIUM_COLORS) else FIELD_COLOR
            for s in stats
        ]
        return EloChartData(
            names=[s.name for s in stats],
            elo_percents=[s.elo_score * 100 for s in stats],
            colors=colors,
        )

    @log_service_call
    def prepare_consistency_breakdown(
        self,
        stats: list[DriverStats],
    ) -> ConsistencyBreakdownData:
        """Stacked bar data: laps per delta-to-BLT band for each driver."""
        return ConsistencyBreakdownData(
            names=[s.name for s in stats],
            bands={
                "±0.1s": [s.laps_within_range.within_01 for s in stats],
                "±0.2s": [s.laps_within_range.within_02 for s in stats],
                "±0.3s": [s.laps_within_range.within_03 for s in stats],
                "±0.4s": [s.laps_within_range.within_04 for s in stats],
            },
            outside=[s.laps_completed - s.laps_within_range.total for s in stats],
        )
