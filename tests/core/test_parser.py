"""Tests for the raw lap log parser."""

from __future__ import annotations

import logging

import pytest

from race_elo.exceptions import RaceFormatError
from race_elo.parser import parse_lap_line, parse_penalties, parse_race_data
from tests.conftest import SAMPLE_RACE, THREE_DRIVER_RACE


class TestParsePenalties:
    def test_extracts_count(self) -> None:
        assert parse_penalties("(Penalties: 3)") == 3

    def test_no_space(self) -> None:
        assert parse_penalties("(Penalties:12)") == 12

    def test_malformed_defaults_to_zero(self) -> None:
        assert parse_penalties("(Penalties: two)") == 0

    def test_missing_close_paren_defaults_to_zero(self) -> None:
        assert parse_penalties("(Penalties: 2") == 0


class TestParseLapLine:
    def test_tab_separated(self) -> None:
        lap = parse_lap_line("12\t46.331 [3]")
        assert lap is not None
        assert lap.number == 12
        assert lap.time == 46.331
        assert lap.position == 3

    def test_space_separated(self) -> None:
        lap = parse_lap_line("1 46.331 [1]")
        assert lap is not None
        assert lap.time == 46.331

    def test_non_numeric_time(self) -> None:
        assert parse_lap_line("1\tDNF [4]") is None

    def test_non_numeric_position(self) -> None:
        assert parse_lap_line("1\t46.331 [x]") is None

    def test_missing_position(self) -> None:
        assert parse_lap_line("1\t46.331") is None

    def test_missing_separator(self) -> None:
        assert parse_lap_line("146.331 [1]") is None

    @pytest.mark.parametrize("position", [0, -1])
    def test_out_of_range_position_kept(self, position: int) -> None:
        lap = parse_lap_line(f"1\t46.331 [{position}]")
        assert lap is not None
        assert lap.position == position
        assert lap.time == 46.331

    def test_non_positive_time_kept_for_scorer(self) -> None:
        lap = parse_lap_line("1\t0.000 [1]")
        assert lap is not None
        assert lap.is_valid is False


class TestParseRaceData:
    def test_sample_race(self) -> None:
        drivers = parse_race_data(SAMPLE_RACE)
        assert [d.driver_name for d in drivers] == ["Alice", "Bob"]
        assert drivers[0].penalties == 0
        assert drivers[1].penalties == 1
        assert [lap.time for lap in drivers[0].laps] == [46.331, 46.445]
        assert [lap.position for lap in drivers[1].laps] == [2, 2]
        assert [lap.number for lap in drivers[1].laps] == [1, 2]

    def test_blank_lines_between_sections(self) -> None:
        drivers = parse_race_data(THREE_DRIVER_RACE)
        assert [d.driver_name for d in drivers] == ["Carol", "Dan", "Eve"]
        assert len(drivers[0].laps) == 4
        assert drivers[1].penalties == 2

    def test_name_is_stripped(self) -> None:
        drivers = parse_race_data("   Alice  \n(Penalties: 0)\n1\t46.0 [1]\n")
        assert drivers[0].driver_name == "Alice"

    def test_crlf_line_endings(self) -> None:
        drivers = parse_race_data(SAMPLE_RACE.replace("\n", "\r\n"))
        assert len(drivers) == 2
        assert len(drivers[1].laps) == 2

    def test_header_without_laps(self) -> None:
        drivers = parse_race_data("Alice\n(Penalties: 0)\n")
        assert len(drivers) == 1
        assert drivers[0].laps == ()

    def test_consecutive_headers(self) -> None:
        text = "Alice\n(Penalties: 0)\n(Penalties: 1)\n1\t46.0 [1]\n"
        drivers = parse_race_data(text)
        assert len(drivers) == 2
        assert drivers[0].laps == ()
        # the second header takes the first header line as its name
        assert drivers[1].driver_name == "(Penalties: 0)"
        assert drivers[1].penalties == 1
        assert len(drivers[1].laps) == 1

    def test_malformed_lap_line_skipped(self) -> None:
        text = "Alice\n(Penalties: 0)\n1\t46.0 [1]\n2\tabc [1]\n3\t46.2 [1]\n"
        drivers = parse_race_data(text)
        assert [lap.number for lap in drivers[0].laps] == [1, 3]

    def test_malformed_lap_line_logged(self, caplog) -> None:
        text = "Alice\n(Penalties: 0)\n2\tabc [1]\n"
        with caplog.at_level(logging.DEBUG, logger="race_elo.parser"):
            parse_race_data(text)
        assert "Skipping malformed lap line 3" in caplog.text

    def test_unrecognised_lines_ignored(self) -> None:
        text = "Results export\nAlice\n(Penalties: 0)\nLap\tTime\n1\t46.0 [1]\nend\n"
        drivers = parse_race_data(text)
        assert len(drivers) == 1
        assert len(drivers[0].laps) == 1

    def test_laps_before_first_header_ignored(self) -> None:
        text = "1\t45.0 [1]\nAlice\n(Penalties: 0)\n1\t46.0 [1]\n"
        drivers = parse_race_data(text)
        assert [lap.time for lap in drivers[0].laps] == [46.0]

    def test_header_on_first_line(self) -> None:
        with pytest.raises(RaceFormatError, match="line 1") as exc_info:
            parse_race_data("(Penalties: 0)\n1\t46.0 [1]\n")
        assert exc_info.value.line_number == 1

    def test_header_after_blank_line(self) -> None:
        with pytest.raises(RaceFormatError, match="Missing driver name at line 4") as exc_info:
            parse_race_data("Alice\n(Penalties: 0)\n\n(Penalties: 1)\n")
        assert exc_info.value.line_number == 4

    def test_line_numbers_skip_leading_blank_lines(self) -> None:
        with pytest.raises(RaceFormatError, match="Missing driver name at line 1") as exc_info:
            parse_race_data("\n\n   \n(Penalties: 0)\n1\t46.0 [1]\n")
        assert exc_info.value.line_number == 1

    def test_zero_position_lap_counts_toward_best_lap(self) -> None:
        drivers = parse_race_data("Alice\n(Penalties: 0)\n1\t46.000 [0]\n2\t46.500 [1]\n")
        assert [lap.position for lap in drivers[0].laps] == [0, 1]
        assert min(lap.time for lap in drivers[0].valid_laps) == 46.0

    def test_only_blank_lines(self) -> None:
        with pytest.raises(RaceFormatError, match="No valid driver data found") as exc_info:
            parse_race_data("\n\n   \n")
        assert exc_info.value.line_number is None

    def test_empty_string(self) -> None:
        with pytest.raises(RaceFormatError):
            parse_race_data("")

    def test_no_header_marker(self) -> None:
        with pytest.raises(RaceFormatError, match="No valid driver data found"):
            parse_race_data("Alice\n1\t46.0 [1]\n2\t46.1 [1]\n")

    def test_deterministic(self) -> None:
        assert parse_race_data(SAMPLE_RACE) == parse_race_data(SAMPLE_RACE)
