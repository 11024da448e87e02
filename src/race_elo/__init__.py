"""Race ELO — lap-time log parser and driver ranking."""

from race_elo.config import DEFAULT_WEIGHTS, ScoringWeights, make_weights
from race_elo.exceptions import (
    RaceDataError,
    RaceEloError,
    RaceFormatError,
    ScoringWeightsError,
)
from race_elo.models import DriverRecord, DriverStats, LapRecord, LapsWithinRange
from race_elo.parser import parse_race_data
from race_elo.scoring import rank_race, score_race

__all__ = [
    "DEFAULT_WEIGHTS",
    "DriverRecord",
    "DriverStats",
    "LapRecord",
    "LapsWithinRange",
    "RaceDataError",
    "RaceEloError",
    "RaceFormatError",
    "ScoringWeights",
    "ScoringWeightsError",
    "make_weights",
    "parse_race_data",
    "rank_race",
    "score_race",
]

__version__ = "0.1.0"
