"""Driver session model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from race_elo.models.lap import LapRecord


class DriverRecord(BaseModel):
    """One driver's full session as read from a single log section.

    ``penalties`` is carried for display only; scoring never consults it.
    """

    model_config = ConfigDict(frozen=True)

    driver_name: str = Field(min_length=1)
    penalties: NonNegativeInt = 0
    laps: tuple[LapRecord, ...] = ()

    @property
    def valid_laps(self) -> list[LapRecord]:
        """Laps with a positive time, in chronological order."""
        return [lap for lap in self.laps if lap.is_valid]
