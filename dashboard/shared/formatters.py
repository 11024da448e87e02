"""Formatting helpers for the race ranking dashboard."""

from __future__ import annotations


def format_lap_time(seconds: float | None) -> str:
    """Format seconds as ss.fff, or m:ss.fff from one minute up, '\u2014' if None."""
    if seconds is None:
        return "\u2014"
    if seconds < 60:
        return f"{seconds:.3f}"
    mins, secs = divmod(seconds, 60)
    return f"{int(mins)}:{secs:06.3f}"


def format_percent(fraction: float | None, decimals: int = 1) -> str:
    """Format a [0, 1] fraction as a percentage string."""
    if fraction is None:
        return "\u2014"
    return f"{fraction * 100:.{decimals}f}%"


def format_gap(driver_best: float | None, fastest: float | None) -> str | None:
    """Format gap to the race's fastest lap as +s.fff, or None."""
    if driver_best is None or fastest is None:
        return None
    gap = driver_best - fastest
    if abs(gap) < 0.0005:
        return "(fastest lap)"
    return f"(+{gap:.3f})"
