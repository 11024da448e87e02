"""Custom exceptions for race parsing and scoring."""

from __future__ import annotations


class RaceEloError(Exception):
    """Base exception for all race-elo errors."""


class RaceFormatError(RaceEloError):
    """Raised when the raw lap log cannot be parsed into driver sections."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        self.message = message
        super().__init__(message)


class RaceDataError(RaceEloError):
    """Raised when parsed race data cannot be scored (no drivers, no valid laps)."""


class ScoringWeightsError(RaceEloError):
    """Raised when scoring weights are negative or do not sum to 1.0."""
