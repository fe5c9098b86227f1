# ABOUTME: Data models for the raw forecast payloads the advisor consumes
# ABOUTME: Hourly weather, marine waves, tide events, sunrise and water temperature

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


def _column(hourly: dict, key: str) -> tuple:
    """Provider arrays may be missing or null; normalize to a tuple"""
    values = hourly.get(key)
    return tuple(values) if values else ()


@dataclass(frozen=True)
class HourlySeries:
    """Hourly weather forecast, every column aligned by position to times"""
    times: tuple
    temperature_f: tuple = ()
    humidity_pct: tuple = ()
    cloud_cover_pct: tuple = ()
    wind_speed_mph: tuple = ()
    wind_direction_deg: tuple = ()
    weather_code: tuple = ()

    @classmethod
    def from_open_meteo(cls, payload: dict) -> "HourlySeries":
        """
        Build from an Open-Meteo forecast response.

        Raises:
            ValueError: if the payload has no hourly time axis
        """
        if not isinstance(payload, dict):
            raise ValueError(f"Open-Meteo payload is not an object: {payload!r}")
        hourly = payload.get("hourly") or {}
        times = _column(hourly, "time")
        if not times:
            raise ValueError("Open-Meteo payload has no hourly time axis")

        return cls(
            times=times,
            temperature_f=_column(hourly, "temperature_2m"),
            humidity_pct=_column(hourly, "relative_humidity_2m"),
            cloud_cover_pct=_column(hourly, "cloud_cover"),
            wind_speed_mph=_column(hourly, "wind_speed_10m"),
            wind_direction_deg=_column(hourly, "wind_direction_10m"),
            weather_code=_column(hourly, "weather_code"),
        )

    def __len__(self) -> int:
        return len(self.times)


@dataclass(frozen=True)
class MarineSeries:
    """Hourly marine forecast, every column aligned by position to times"""
    times: tuple
    wave_height_ft: tuple = ()
    wave_period_s: tuple = ()
    wave_direction_deg: tuple = ()
    swell_height_ft: tuple = ()
    swell_period_s: tuple = ()
    swell_direction_deg: tuple = ()

    @classmethod
    def from_open_meteo(cls, payload: dict) -> Optional["MarineSeries"]:
        """Build from an Open-Meteo marine response, None when it has no hourly data"""
        if not isinstance(payload, dict):
            return None
        hourly = payload.get("hourly") or {}
        times = _column(hourly, "time")
        if not times:
            return None

        return cls(
            times=times,
            wave_height_ft=_column(hourly, "wave_height"),
            wave_period_s=_column(hourly, "wave_period"),
            wave_direction_deg=_column(hourly, "wave_direction"),
            swell_height_ft=_column(hourly, "swell_wave_height"),
            swell_period_s=_column(hourly, "swell_wave_period"),
            swell_direction_deg=_column(hourly, "swell_wave_direction"),
        )

    def __len__(self) -> int:
        return len(self.times)


class TideType(Enum):
    HIGH = "H"
    LOW = "L"
    OTHER = "?"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "TideType":
        """Accepts NOAA's "H"/"L" as well as "HIGH"/"LOW"; anything else is OTHER"""
        code = (raw or "").strip().upper()
        if code in ("H", "HIGH"):
            return cls.HIGH
        if code in ("L", "LOW"):
            return cls.LOW
        return cls.OTHER


@dataclass(frozen=True)
class TideEvent:
    """A single tide prediction; time is local wall-clock time"""
    time: datetime
    kind: TideType
    height_ft: Optional[float] = None

    @classmethod
    def from_noaa(cls, prediction: dict) -> "TideEvent":
        """
        Parse a NOAA hi/lo prediction like {"t": "2026-10-17 05:45", "v": "4.123", "type": "H"}.

        Raises:
            KeyError, ValueError: if the timestamp is missing or malformed
        """
        height = prediction.get("v")
        return cls(
            time=datetime.strptime(prediction["t"], "%Y-%m-%d %H:%M"),
            kind=TideType.parse(prediction.get("type")),
            height_ft=float(height) if height not in (None, "") else None,
        )


@dataclass(frozen=True)
class SunriseInfo:
    """Sunrise for the target date"""
    time: datetime

    @classmethod
    def from_sunrise_sunset(cls, payload: dict) -> Optional["SunriseInfo"]:
        """Parse a sunrise-sunset.org response requested with formatted=0"""
        if not isinstance(payload, dict):
            return None
        raw = (payload.get("results") or {}).get("sunrise")
        if not raw:
            return None
        return cls(time=datetime.fromisoformat(raw))


@dataclass(frozen=True)
class WaterTemperature:
    """Latest water temperature reading, informational only"""
    temp_f: float
    time: Optional[datetime] = None

    @classmethod
    def from_noaa(cls, payload: dict) -> Optional["WaterTemperature"]:
        """Parse NOAA's {"data": [{"t": "...", "v": "61.2"}]}; None when there is no reading"""
        if not isinstance(payload, dict):
            return None
        readings = payload.get("data") or []
        if not readings or readings[0].get("v") in (None, ""):
            return None

        latest = readings[0]
        stamp = latest.get("t")
        return cls(
            temp_f=float(latest["v"]),
            time=datetime.strptime(stamp, "%Y-%m-%d %H:%M") if stamp else None,
        )

    def __str__(self) -> str:
        return f"{round(self.temp_f)}°F"
