"""Service layer — business logic for the race ranking dashboard."""

from .ranking import (
    ConsistencyBreakdownData,
    EloChartData,
    RaceRankingService,
    RaceSummary,
    RankingResult,
)

__all__ = [
    "ConsistencyBreakdownData",
    "EloChartData",
    "RaceRankingService",
    "RaceSummary",
    "RankingResult",
]
