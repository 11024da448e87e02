"""Line-oriented parser for raw lap-time logs.

Expected input shape, one section per driver:

    Alice
    (Penalties: 0)
    1	46.331 [1]
    2	46.445 [1]

The line before a ``(Penalties: N)`` header is the driver's name. Lap lines are
``<lap number><tab><time> [<position>]``.
"""

from __future__ import annotations

import logging
import re

from race_elo.exceptions import RaceFormatError
from race_elo.models.driver import DriverRecord
from race_elo.models.lap import LapRecord

logger = logging.getLogger(__name__)

HEADER_MARKER = "(Penalties:"

_PENALTIES_RE = re.compile(r"\(Penalties:\s*(\d+)\)")
_LAP_LINE_RE = re.compile(
    r"^(?P<number>\d+)\s+(?P<time>[^\s\[]+)\s*\[(?P<position>[^\]]*)\]"
)


def parse_penalties(line: str) -> int:
    """Return the penalty count of a header line, 0 if absent or malformed."""
    match = _PENALTIES_RE.search(line)
    return int(match.group(1)) if match else 0


def parse_lap_line(line: str) -> LapRecord | None:
    """Parse one lap line, or return None if it is not a usable lap.

    Time and position must both be numbers. Out-of-range positions are kept.
    """
    match = _LAP_LINE_RE.match(line)
    if match is None:
        return None
    try:
        time = float(match.group("time"))
        position = int(match.group("position").strip())
    except ValueError:
        return None
    return LapRecord(number=int(match.group("number")), time=time, position=position)


class _DriverBuilder:
    """Accumulates one driver section until the next header or end of input."""

    def __init__(self, driver_name: str, penalties: int) -> None:
        self.driver_name = driver_name
        self.penalties = penalties
        self.laps: list[LapRecord] = []

    def build(self) -> DriverRecord:
        return DriverRecord(
            driver_name=self.driver_name,
            penalties=self.penalties,
            laps=tuple(self.laps),
        )


def parse_race_data(text: str) -> list[DriverRecord]:
    """Parse a raw lap log into driver records, in first-seen order.

    Single forward pass over the lines. Lines that are neither a driver
    header nor a lap line are ignored, as are malformed lap lines. Line
    numbers in errors count from the first non-blank line of ``text``.

    Raises:
        RaceFormatError: If a header has no name line before it, or if no
            driver section is found at all.
    """
    lines = text.strip().splitlines()
    drivers: list[DriverRecord] = []
    current: _DriverBuilder | None = None

    for index, raw_line in enumerate(lines):
        line = raw_line.strip()
        if not line:
            continue

        if HEADER_MARKER in line:
            if current is not None:
                drivers.append(current.build())

            driver_name = lines[index - 1].strip() if index > 0 else ""
            if not driver_name:
                raise RaceFormatError(
                    f"Invalid data format: Missing driver name at line {index + 1}",
                    line_number=index + 1,
                )
            current = _DriverBuilder(driver_name, parse_penalties(line))
            continue

        if current is None:
            continue

        lap = parse_lap_line(line)
        if lap is not None:
            current.laps.append(lap)
        elif line[0].isdigit():
            logger.debug("Skipping malformed lap line %d: %r", index + 1, line)

    if current is not None:
        drivers.append(current.build())

    if not drivers:
        raise RaceFormatError("No valid driver data found")

    logger.info("Parsed %d driver(s) from %d line(s)", len(drivers), len(lines))
    return drivers
