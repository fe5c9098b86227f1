# ABOUTME: Tests for the scoring threshold tables
# ABOUTME: Validates band boundaries, rounding and fallback selection

import pytest

from dawn_patrol.scoring.bands import (
    CYCLE_TEMP_BANDS,
    CYCLE_WEATHER_BANDS,
    CYCLE_WIND_BANDS,
    SURF_HEIGHT_BANDS,
    SURF_PERIOD_BANDS,
    Band,
    BandTable,
    first_present,
    round_half_up,
    value_at,
)


def test_band_table_picks_first_matching_band():
    table = BandTable(bands=(Band(1, 1), Band(2, 2)), above=3)
    assert table.lookup(0.5) == 1
    assert table.lookup(1) == 2
    assert table.lookup(2) == 3


def test_inclusive_band_contains_its_bound():
    assert Band(15, 5, inclusive=True).contains(15)
    assert not Band(15, 5).contains(15)


@pytest.mark.parametrize("height,expected", [
    (0.5, 1), (1.0, 3), (2.5, 5), (3.2, 7), (4.5, 9),
    (5.0, 10), (5.99, 10), (6.0, 8), (7.99, 8), (8.0, 6), (12.0, 6),
])
def test_surf_height_table(height, expected):
    assert SURF_HEIGHT_BANDS.lookup(height) == expected


def test_surf_height_peaks_then_penalizes_big_surf():
    """Score climbs up to the 5-6ft band and drops for anything bigger"""
    scores = [SURF_HEIGHT_BANDS.lookup(h / 10) for h in range(0, 120)]
    peak = scores.index(10)
    assert scores[:peak] == sorted(scores[:peak])
    assert scores[peak:] == sorted(scores[peak:], reverse=True)
    assert SURF_HEIGHT_BANDS.lookup(6) < SURF_HEIGHT_BANDS.lookup(5.9)
    assert SURF_HEIGHT_BANDS.lookup(8) < SURF_HEIGHT_BANDS.lookup(7.9)


@pytest.mark.parametrize("period,expected", [
    (0, 2), (4.9, 2), (5, 4), (7, 6), (9, 8), (10.9, 8), (11, 10), (16, 10),
])
def test_surf_period_table(period, expected):
    assert SURF_PERIOD_BANDS.lookup(period) == expected


@pytest.mark.parametrize("speed,expected", [
    (0, 10), (7.9, 10), (8, 8), (11.9, 8), (12, 5), (15, 5), (15.1, 1), (30, 1),
])
def test_cycle_wind_table(speed, expected):
    assert CYCLE_WIND_BANDS.lookup(speed) == expected


@pytest.mark.parametrize("code,expected", [
    (0, 10), (3, 10), (4, 7), (45, 7), (49, 7), (50, 3), (59, 3), (61, 0), (95, 0),
])
def test_cycle_weather_code_table(code, expected):
    assert CYCLE_WEATHER_BANDS.lookup(code) == expected


@pytest.mark.parametrize("temp,expected", [
    (30, 3), (44.9, 3), (45, 7), (54.9, 7), (55, 10), (75, 10), (75.1, 7), (85, 7), (85.1, 3),
])
def test_cycle_temperature_table(temp, expected):
    assert CYCLE_TEMP_BANDS.lookup(temp) == expected


def test_round_half_up():
    assert round_half_up(6.5) == 7
    assert round_half_up(7.4) == 7
    assert round_half_up(1.5) == 2
    assert round_half_up(2.0) == 2


def test_first_present_skips_none_and_zero():
    assert first_present([None, 0, 3.2]) == 3.2
    assert first_present([2.1, 3.2]) == 2.1
    assert first_present([None, None]) == 0
    assert first_present([], default=50) == 50


def test_value_at_handles_short_series():
    assert value_at((1, 2, 3), 1) == 2
    assert value_at((1, 2, 3), 5) is None
    assert value_at((), 0) is None
    assert value_at((1,), -1) is None
