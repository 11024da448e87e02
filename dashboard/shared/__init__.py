"""Shared dashboard utilities."""

# --- Constants & formatting ---
from .constants import (
    ACCENT_RED,
    CONSISTENCY_HELP,
    ELO_HELP,
    INPUT_PLACEHOLDER,
    PLOTLY_LAYOUT_DEFAULTS,
    TABLE_COLUMNS,
)
from .formatters import format_gap, format_lap_time, format_percent

# --- Service layer ---
from .services import RaceRankingService

# --- Table view state ---
from .table import TableSortState, build_table_frame, sort_stats

# --- UI components ---
from .sidebar import render_weights_sidebar

__all__ = [
    "ACCENT_RED",
    "CONSISTENCY_HELP",
    "ELO_HELP",
    "INPUT_PLACEHOLDER",
    "PLOTLY_LAYOUT_DEFAULTS",
    "RaceRankingService",
    "TABLE_COLUMNS",
    "TableSortState",
    "build_table_frame",
    "format_gap",
    "format_lap_time",
    "format_percent",
    "render_weights_sidebar",
    "sort_stats",
]
