# ABOUTME: Core scoring calculation logic for surf, sunrise photos and cycling
# ABOUTME: Converts tomorrow-morning forecast data into 0-10 ratings using Ventnor-specific rules

import logging
from datetime import date
from typing import Optional

from dawn_patrol.config import Config
from dawn_patrol.scoring.bands import (
    CYCLE_TEMP_BANDS,
    CYCLE_WEATHER_BANDS,
    CYCLE_WIND_BANDS,
    SURF_HEIGHT_BANDS,
    SURF_PERIOD_BANDS,
    clamp,
    first_present,
    round_half_up,
    value_at,
)
from dawn_patrol.scoring.models import CycleScore, LoopDirection, PhotoScore, SurfScore
from dawn_patrol.scoring.timewindow import NOT_FOUND, morning_index
from dawn_patrol.weather.models import HourlySeries, MarineSeries

log = logging.getLogger(__name__)

CARDINALS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]

LIGHT_WIND_MPH = 8
MODERATE_WIND_MPH = 15
DEFAULT_HUMIDITY = 50

LOOP_TEXT = {
    LoopDirection.NORTH: f"Go to {Config.NORTH_DESTINATION} first, wind at your back coming home",
    LoopDirection.SOUTH: f"Go to {Config.SOUTH_DESTINATION} first, wind at your back coming home",
    LoopDirection.EITHER: "Wind is cross-shore, either direction works",
}


def degrees_to_cardinal(degrees: float) -> str:
    """Map a bearing to one of the 16 compass points, e.g. 359 -> "N" """
    return CARDINALS[round_half_up((degrees % 360) / 22.5) % 16]


def loop_direction(wind_direction_deg: float) -> LoopDirection:
    """
    Pick the loop direction from where the wind blows FROM.

    North wind (315-45): ride north first, return with the wind at your back.
    South wind (135-225): ride south first.
    Anything else is cross-shore.
    """
    normalized = wind_direction_deg % 360
    if normalized >= 315 or normalized <= 45:
        return LoopDirection.NORTH
    if 135 <= normalized <= 225:
        return LoopDirection.SOUTH
    return LoopDirection.EITHER


class ScoreCalculator:
    """Calculates 0-10 ratings for tomorrow morning's activities"""

    def __init__(self, tz: Optional[str] = None):
        self.tz = tz or Config.TIMEZONE

    def calculate_surf_score(
        self,
        marine: Optional[MarineSeries],
        weather: Optional[HourlySeries],
        target: date,
    ) -> SurfScore:
        """
        Calculate surf score (1-10) from the marine forecast.

        Wave height counts most (40%), then period and wind (30% each).
        Swell fields are preferred over total sea state when present.

        Args:
            marine: Hourly wave forecast, None if the marine fetch failed
            weather: Hourly weather forecast, only used for wind
            target: Local date of the morning to score

        Returns:
            SurfScore from 1-10, or 0 when there is no forecast data
        """
        if marine is None or not marine.times:
            return SurfScore(score=0, details="No data available")

        index = morning_index(marine.times, target, tz=self.tz)
        if index == NOT_FOUND:
            return SurfScore(score=0, details="No forecast data")

        height = first_present([
            value_at(marine.swell_height_ft, index),
            value_at(marine.wave_height_ft, index),
        ])
        period = first_present([
            value_at(marine.swell_period_s, index),
            value_at(marine.wave_period_s, index),
        ])
        direction = first_present([
            value_at(marine.swell_direction_deg, index),
            value_at(marine.wave_direction_deg, index),
        ])

        height_score = SURF_HEIGHT_BANDS.lookup(height)
        period_score = SURF_PERIOD_BANDS.lookup(period)
        wind_score = self._surf_wind_score(weather, target)

        final = round_half_up(height_score * 0.4 + period_score * 0.3 + wind_score * 0.3)

        parts = [f"{height:.1f}ft @"]
        if period > 0:
            parts.append(f"{round_half_up(period)}s")
        parts.append(degrees_to_cardinal(direction))

        return SurfScore(
            score=clamp(final, 1, 10),
            details=" ".join(parts),
            wave_height_ft=height,
            period_s=period,
            direction_deg=direction,
            height_score=height_score,
            period_score=period_score,
            wind_score=wind_score,
        )

    def _surf_wind_score(self, weather: Optional[HourlySeries], target: date) -> int:
        """Offshore (W-NW) and light wind grooms the faces; 5 when wind is unknown"""
        if weather is None:
            return 5

        index = morning_index(weather.times, target, tz=self.tz)
        if index == NOT_FOUND:
            return 5

        speed = value_at(weather.wind_speed_mph, index) or 0
        direction = value_at(weather.wind_direction_deg, index) or 0

        offshore = Config.OFFSHORE_MIN_DEG <= direction <= Config.OFFSHORE_MAX_DEG
        light = speed < LIGHT_WIND_MPH

        if offshore and light:
            return 10
        if offshore:
            return 8
        if light:
            return 7
        if speed < MODERATE_WIND_MPH:
            return 4
        return 2

    def calculate_photo_score(self, weather: HourlySeries, target: date) -> PhotoScore:
        """
        Calculate sunrise photo score (0-10) from cloud cover.

        Best: 20-60% clouds (something to catch the color, not overcast).
        Good: 10-20% or 60-80%. Poor: clear sky or overcast.
        Humidity is reported but not scored.

        Args:
            weather: Hourly weather forecast
            target: Local date of the morning to score

        Returns:
            PhotoScore, 0 when there is no forecast data
        """
        index = morning_index(weather.times, target, tz=self.tz)
        if index == NOT_FOUND:
            return PhotoScore(score=0, verdict="No data available")

        clouds = value_at(weather.cloud_cover_pct, index) or 0
        humidity = value_at(weather.humidity_pct, index) or DEFAULT_HUMIDITY

        if 20 <= clouds <= 60:
            score = 8 + round_half_up((40 - abs(clouds - 40)) / 20)
            verdict = "Good cloud cover for colorful sunrise"
        elif 10 <= clouds < 20:
            score = 6
            verdict = "Light clouds - some color potential"
        elif 60 < clouds <= 80:
            score = 5
            verdict = "Heavy clouds - may get some color"
        elif clouds < 10:
            score = 4
            verdict = "Clear sky - pretty but no cloud color"
        else:
            score = 2
            verdict = "Overcast - unlikely to see color"

        return PhotoScore(
            score=score,
            verdict=verdict,
            cloud_cover_pct=clouds,
            humidity_pct=humidity,
        )

    def calculate_cycle_score(self, weather: HourlySeries, target: date) -> CycleScore:
        """
        Calculate cycling score (1-10) and the loop direction.

        Wind counts most (40%); over 15 mph is a hard penalty but not a block.
        Sky condition (WMO code) and temperature make up the rest.

        Args:
            weather: Hourly weather forecast
            target: Local date of the morning to score

        Returns:
            CycleScore from 1-10, or 0 with no direction when there is no data
        """
        index = morning_index(weather.times, target, tz=self.tz)
        if index == NOT_FOUND:
            return CycleScore(score=0)

        wind_speed = value_at(weather.wind_speed_mph, index) or 0
        wind_direction = (value_at(weather.wind_direction_deg, index) or 0) % 360
        code = value_at(weather.weather_code, index) or 0
        temp = value_at(weather.temperature_f, index)

        wind_score = CYCLE_WIND_BANDS.lookup(wind_speed)
        weather_score = CYCLE_WEATHER_BANDS.lookup(code)
        temp_score = CYCLE_TEMP_BANDS.lookup(temp if temp is not None else 0)

        final = round_half_up(wind_score * 0.4 + weather_score * 0.3 + temp_score * 0.3)

        direction = loop_direction(wind_direction)
        if wind_speed > MODERATE_WIND_MPH:
            log.info(f"Cycling wind {wind_speed} mph is over the {MODERATE_WIND_MPH} mph limit")

        return CycleScore(
            score=clamp(final, 1, 10),
            direction=direction,
            direction_text=LOOP_TEXT[direction],
            wind_speed_mph=round_half_up(wind_speed),
            wind_direction_deg=wind_direction,
            wind_cardinal=degrees_to_cardinal(wind_direction),
            temp_f=round_half_up(temp) if temp is not None else None,
        )
