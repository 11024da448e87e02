"""Race scoring: per-driver consistency, BLT and finish-position scores.

All functions here are pure. ``score_race`` needs every driver of the race at
once because the BLT and finish-position scores are normalised across the
whole field.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from race_elo.config import CONSISTENCY_BANDS, DEFAULT_WEIGHTS, MAX_LAP_POINTS, ScoringWeights
from race_elo.exceptions import RaceDataError
from race_elo.models.driver import DriverRecord
from race_elo.models.lap import LapRecord
from race_elo.models.stats import DriverStats, LapsWithinRange
from race_elo.parser import parse_race_data

logger = logging.getLogger(__name__)

_BAND_FIELDS = ("within_01", "within_02", "within_03", "within_04")


def best_lap_time(laps: Sequence[LapRecord]) -> float:
    """Return the fastest valid lap time.

    Raises:
        RaceDataError: If there is no valid lap.
    """
    times = [lap.time for lap in laps if lap.is_valid]
    if not times:
        raise RaceDataError("cannot compute a best lap time without valid laps")
    return min(times)


def classify_delta(delta: float) -> int | None:
    """Return the 0-based band index for a delta to BLT, or None if outside all bands."""
    for index, (limit, _points) in enumerate(CONSISTENCY_BANDS):
        if delta <= limit:
            return index
    return None


def lap_histogram(laps: Sequence[LapRecord], blt: float) -> LapsWithinRange:
    """Count valid laps per band of ``|time - blt|``."""
    counts = [0] * len(CONSISTENCY_BANDS)
    for lap in laps:
        if not lap.is_valid:
            continue
        band = classify_delta(abs(lap.time - blt))
        if band is not None:
            counts[band] += 1
    return LapsWithinRange(**dict(zip(_BAND_FIELDS, counts)))


def consistency_points(histogram: LapsWithinRange) -> int:
    """Weighted sum of the histogram: 4/3/2/1 points per band."""
    return sum(
        getattr(histogram, field) * points
        for field, (_limit, points) in zip(_BAND_FIELDS, CONSISTENCY_BANDS)
    )


def consistency_score(points: int, valid_lap_count: int) -> float:
    """Points as a fraction of the maximum possible for ``valid_lap_count`` laps."""
    if valid_lap_count <= 0:
        raise RaceDataError("cannot compute consistency without valid laps")
    return points / (valid_lap_count * MAX_LAP_POINTS)


def blt_score(blt: float, fastest_blt: float, slowest_blt: float) -> float:
    """1.0 for the fastest BLT in the race, 0.0 for the slowest.

    When every driver shares the same BLT (including a one-driver race) the
    range is zero and every driver scores 1.0.
    """
    blt_range = slowest_blt - fastest_blt
    if blt_range <= 0:
        return 1.0
    return (slowest_blt - blt) / blt_range


def fp_score(position: int, total_drivers: int) -> float:
    """Finish-position score ``(n - position + 1) / n``, clamped to [0, 1]."""
    if total_drivers <= 0:
        raise RaceDataError("cannot compute finish position score without drivers")
    raw = (total_drivers - position + 1) / total_drivers
    if raw < 0.0 or raw > 1.0:
        logger.warning(
            "Finish position %d is outside 1..%d; clamping score", position, total_drivers,
        )
    return min(max(raw, 0.0), 1.0)


def elo_score(
    blt: float,
    consistency: float,
    finish_position: float,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> float:
    """Weighted composite of the three component scores."""
    return (
        weights.blt * blt
        + weights.consistency * consistency
        + weights.finish_position * finish_position
    )


def score_race(
    drivers: Sequence[DriverRecord],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> list[DriverStats]:
    """Score every driver of one race and return them ranked by ELO score.

    Ties keep input order. ``rank`` is the 1-based position in the result.

    Raises:
        RaceDataError: If there are no drivers, or any driver has no valid lap.
    """
    if not drivers:
        raise RaceDataError("No drivers to score")

    valid_laps_by_driver: list[list[LapRecord]] = []
    for driver in drivers:
        valid = driver.valid_laps
        if not valid:
            raise RaceDataError(f"Driver {driver.driver_name!r} has no valid laps")
        valid_laps_by_driver.append(valid)

    blts = [best_lap_time(laps) for laps in valid_laps_by_driver]
    fastest_blt = min(blts)
    slowest_blt = max(blts)
    total_drivers = len(drivers)

    unranked: list[dict] = []
    for index, (driver, valid, blt) in enumerate(zip(drivers, valid_laps_by_driver, blts)):
        histogram = lap_histogram(valid, blt)
        points = consistency_points(histogram)
        consistency = consistency_score(points, len(valid))
        blt_component = blt_score(blt, fastest_blt, slowest_blt)
        finish_position = valid[-1].position
        fp_component = fp_score(finish_position, total_drivers)

        unranked.append({
            "id": f"driver-{index}",
            "name": driver.driver_name,
            "penalties": driver.penalties,
            "best_lap_time": blt,
            "laps_completed": len(valid),
            "position": finish_position,
            "laps_within_range": histogram,
            "consistency_points": points,
            "consistency_score": consistency,
            "blt_score": blt_component,
            "fp_score": fp_component,
            "elo_score": elo_score(blt_component, consistency, fp_component, weights),
        })

    ranked = sorted(unranked, key=lambda row: row["elo_score"], reverse=True)
    return [DriverStats(rank=rank, **row) for rank, row in enumerate(ranked, start=1)]


def rank_race(text: str, weights: ScoringWeights = DEFAULT_WEIGHTS) -> list[DriverStats]:
    """Parse a raw lap log and score it in one call."""
    return score_race(parse_race_data(text), weights)
