"""Single timed lap model."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict


class LapRecord(BaseModel):
    """One timed lap with the driver's running race position.

    ``position`` is stored as read; scoring clamps out-of-range values.
    """

    model_config = ConfigDict(frozen=True)

    number: int | None = None
    time: float
    position: int

    @property
    def is_valid(self) -> bool:
        """True if the lap time is a positive finite number."""
        return math.isfinite(self.time) and self.time > 0
