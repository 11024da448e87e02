"""Results table: view-level sort state and row building.

Table sorting is independent of the race rank; it only reorders rows.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

from race_elo import DriverStats

from .constants import DEFAULT_SORT_FIELD, TABLE_COLUMNS
from .formatters import format_lap_time, format_percent

SortDirection = Literal["asc", "desc"]

SORTABLE_FIELDS = frozenset(field for field, _ in TABLE_COLUMNS)


@dataclass(frozen=True)
class TableSortState:
    """Selected sort column and direction for the results table."""

    field: str = DEFAULT_SORT_FIELD
    direction: SortDirection = "desc"

    def toggle(self, field: str) -> TableSortState:
        """Same field flips direction; a new field starts descending."""
        if field not in SORTABLE_FIELDS:
            raise ValueError(f"Unknown sort field: {field!r}")
        if field == self.field:
            return replace(self, direction="asc" if self.direction == "desc" else "desc")
        return TableSortState(field=field, direction="desc")


def sort_stats(stats: list[DriverStats], state: TableSortState) -> list[DriverStats]:
    """Return a new list ordered by the state's field and direction."""
    return sorted(
        stats,
        key=lambda s: getattr(s, state.field),
        reverse=state.direction == "desc",
    )


def build_table_rows(stats: list[DriverStats]) -> list[dict[str, str | int]]:
    """Display rows keyed by column label, in the given order."""
    rows: list[dict[str, str | int]] = []
    for s in stats:
        rows.append({
            "Position": s.position,
            "Driver": s.name,
            "Best Lap": format_lap_time(s.best_lap_time),
            "Laps": s.laps_completed,
            "Consistency": format_percent(s.consistency_score),
            "ELO Score": format_percent(s.elo_score),
        })
    return rows


def build_table_frame(stats: list[DriverStats], state: TableSortState):
    """Sorted pandas DataFrame for ``st.dataframe``, indexed by driver id."""
    import pandas as pd

    ordered = sort_stats(stats, state)
    return pd.DataFrame(
        build_table_rows(ordered),
        index=pd.Index([s.id for s in ordered], name="id"),
    )
