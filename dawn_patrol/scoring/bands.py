# ABOUTME: Ordered threshold tables used by every activity scorer
# ABOUTME: Band lookup, JS-style rounding, and first-present fallback selection

import math
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class Band:
    """Score awarded to values below (or up to, when inclusive) an upper bound"""
    upper: float
    score: int
    inclusive: bool = False

    def contains(self, value: float) -> bool:
        return value <= self.upper if self.inclusive else value < self.upper


@dataclass(frozen=True)
class BandTable:
    """Bands checked in order; the first one containing the value wins"""
    bands: tuple
    above: int  # score when no band contains the value

    def lookup(self, value: float) -> int:
        for band in self.bands:
            if band.contains(value):
                return band.score
        return self.above


# Surf: wave height in feet. Peaks at 5-6ft, big surf is penalized.
SURF_HEIGHT_BANDS = BandTable(
    bands=(
        Band(1, 1),
        Band(2, 3),
        Band(3, 5),
        Band(4, 7),
        Band(5, 9),
        Band(6, 10),
        Band(8, 8),
    ),
    above=6,
)

# Surf: swell period in seconds
SURF_PERIOD_BANDS = BandTable(
    bands=(
        Band(5, 2),
        Band(7, 4),
        Band(9, 6),
        Band(11, 8),
    ),
    above=10,
)

# Cycling: wind speed in mph. Over 15 is a hard penalty.
CYCLE_WIND_BANDS = BandTable(
    bands=(
        Band(8, 10),
        Band(12, 8),
        Band(15, 5, inclusive=True),
    ),
    above=1,
)

# Cycling: WMO weather code (clear, fog/drizzle, rain, then heavy precip/snow)
CYCLE_WEATHER_BANDS = BandTable(
    bands=(
        Band(3, 10, inclusive=True),
        Band(49, 7, inclusive=True),
        Band(59, 3, inclusive=True),
    ),
    above=0,
)

# Cycling: temperature in F. 55-75 is ideal, 10 degrees either side is OK.
CYCLE_TEMP_BANDS = BandTable(
    bands=(
        Band(45, 3),
        Band(55, 7),
        Band(75, 10, inclusive=True),
        Band(85, 7, inclusive=True),
    ),
    above=3,
)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (Python's round() is banker's)"""
    return int(math.floor(value + 0.5))


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def first_present(candidates: Sequence[Optional[float]], default: float = 0) -> float:
    """
    Pick the first usable candidate.

    None and zero both count as missing, so a zero swell height
    falls through to the total wave height.
    """
    for candidate in candidates:
        if candidate:
            return candidate
    return default


def value_at(series: Sequence, index: int) -> Optional[float]:
    """Read series[index], or None when the series is short or missing"""
    if series is None or index < 0 or index >= len(series):
        return None
    return series[index]
