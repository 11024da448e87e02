"""Computed per-driver statistics."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt


class LapsWithinRange(BaseModel):
    """Count of valid laps per delta-to-BLT band."""

    model_config = ConfigDict(frozen=True)

    within_01: NonNegativeInt = 0
    within_02: NonNegativeInt = 0
    within_03: NonNegativeInt = 0
    within_04: NonNegativeInt = 0

    @property
    def total(self) -> int:
        """Laps that landed in any band (laps beyond 0.4s are not counted)."""
        return self.within_01 + self.within_02 + self.within_03 + self.within_04


class DriverStats(BaseModel):
    """Scored result for one driver within one race."""

    model_config = ConfigDict(frozen=True)

    id: str
    rank: int = Field(ge=1)
    name: str
    penalties: NonNegativeInt = 0
    best_lap_time: float
    laps_completed: NonNegativeInt
    position: int
    laps_within_range: LapsWithinRange
    consistency_points: NonNegativeInt
    consistency_score: float = Field(ge=0.0, le=1.0)
    blt_score: float = Field(ge=0.0, le=1.0)
    fp_score: float = Field(ge=0.0, le=1.0)
    elo_score: float
