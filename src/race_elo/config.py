"""Scoring configuration: composite weights and consistency bands."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, NonNegativeFloat, ValidationError, model_validator

from race_elo.exceptions import ScoringWeightsError

# (max delta to BLT in seconds, points), checked in ascending order, first match wins
CONSISTENCY_BANDS: tuple[tuple[float, int], ...] = (
    (0.1, 4),
    (0.2, 3),
    (0.3, 2),
    (0.4, 1),
)
MAX_LAP_POINTS = CONSISTENCY_BANDS[0][1]

_WEIGHT_SUM_TOLERANCE = 1e-9


class ScoringWeights(BaseModel):
    """Weights of the three components of the ELO score.

    Usage:
        ScoringWeights()  # 0.3 BLT, 0.5 consistency, 0.2 finish position
        ScoringWeights(blt=0.4, consistency=0.4, finish_position=0.2)
    """

    model_config = ConfigDict(frozen=True)

    blt: NonNegativeFloat = 0.3
    consistency: NonNegativeFloat = 0.5
    finish_position: NonNegativeFloat = 0.2

    @model_validator(mode="after")
    def _check_sum(self) -> ScoringWeights:
        total = self.blt + self.consistency + self.finish_position
        if not math.isclose(total, 1.0, abs_tol=_WEIGHT_SUM_TOLERANCE):
            raise ValueError(f"weights must sum to 1.0, got {total:.6f}")
        return self


DEFAULT_WEIGHTS = ScoringWeights()


def make_weights(blt: float, consistency: float, finish_position: float) -> ScoringWeights:
    """Build a ScoringWeights, converting validation failures to ScoringWeightsError."""
    try:
        return ScoringWeights(blt=blt, consistency=consistency, finish_position=finish_position)
    except ValidationError as exc:
        raise ScoringWeightsError(f"Invalid scoring weights: {exc}") from exc
