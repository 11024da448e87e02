"""Race data models."""

from race_elo.models.driver import DriverRecord
from race_elo.models.lap import LapRecord
from race_elo.models.stats import DriverStats, LapsWithinRange

__all__ = [
    "DriverRecord",
    "DriverStats",
    "LapRecord",
    "LapsWithinRange",
]
