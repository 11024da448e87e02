"""Shared test fixtures and sample lap logs."""

from __future__ import annotations

import pytest

from race_elo.models import DriverRecord, LapRecord

SAMPLE_RACE = """\
Alice
(Penalties: 0)
1\t46.331 [1]
2\t46.445 [1]
Bob
(Penalties: 1)
1\t47.000 [2]
2\t46.900 [2]
"""

THREE_DRIVER_RACE = """\
Carol
(Penalties: 0)
1\t50.000 [1]
2\t50.050 [1]
3\t50.150 [1]
4\t50.900 [1]

Dan
(Penalties: 2)
1\t49.500 [2]
2\t49.750 [2]
3\t50.500 [2]

Eve
(Penalties: 0)
1\t51.000 [3]
2\t51.000 [3]
"""


def make_driver(
    name: str,
    times: list[float],
    positions: list[int] | None = None,
    penalties: int = 0,
) -> DriverRecord:
    """Build a DriverRecord from lap times; positions default to 1."""
    positions = positions if positions is not None else [1] * len(times)
    laps = tuple(
        LapRecord(number=i, time=t, position=p)
        for i, (t, p) in enumerate(zip(times, positions), start=1)
    )
    return DriverRecord(driver_name=name, penalties=penalties, laps=laps)


@pytest.fixture
def driver_factory():
    """Factory fixture for creating DriverRecord instances."""
    return make_driver
