"""Shared constants for the race ranking dashboard."""

from __future__ import annotations

ACCENT_RED = "#E10600"

PLOTLY_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font_color="#F0F0F0",
    margin=dict(l=40, r=20, t=40, b=40),
)

# Bar colours for the ELO chart, by race rank
PODIUM_COLORS: list[str] = [
    "#FFD700",  # gold
    "#C0C0C0",  # silver
    "#CD7F32",  # bronze
]
FIELD_COLOR = "#3671C6"

# (DriverStats field, column label), in display order
TABLE_COLUMNS: list[tuple[str, str]] = [
    ("position", "Position"),
    ("name", "Driver"),
    ("best_lap_time", "Best Lap"),
    ("laps_completed", "Laps"),
    ("consistency_score", "Consistency"),
    ("elo_score", "ELO Score"),
]
DEFAULT_SORT_FIELD = "elo_score"

CONSISTENCY_HELP = (
    "Consistency Score is based on lap time variation from Best Lap Time (BLT): "
    "within ±0.1s: 4 points, within ±0.2s: 3 points, within ±0.3s: 2 points, "
    "within ±0.4s: 1 point. "
    "Final score = total points / maximum possible points × 100."
)

ELO_HELP = (
    "ELO Score combines three factors: Best Lap Time {blt:.0%}, "
    "Consistency {consistency:.0%}, Finish Position {finish_position:.0%}. "
    "Each factor is normalized to a percentage before weighting."
)

INPUT_PLACEHOLDER = (
    "Driver Name\n(Penalties: 0)\n1\t46.331 [1]\n2\t46.445 [1]\n..."
)
