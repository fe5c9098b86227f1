# ABOUTME: API client implementations for the forecast data sources
# ABOUTME: Open-Meteo weather/marine, sunrise-sunset.org, and NOAA tides & water temperature

import logging
from datetime import date
from typing import Optional

import requests

from dawn_patrol.config import Config
from dawn_patrol.weather.models import (
    HourlySeries,
    MarineSeries,
    SunriseInfo,
    TideEvent,
    WaterTemperature,
)

log = logging.getLogger(__name__)


class ForecastUnavailableError(Exception):
    """The general weather forecast could not be fetched; the run cannot continue"""


class OpenMeteoClient:
    """Client for the Open-Meteo hourly forecast (ECMWF model)"""

    BASE_URL = "https://api.open-meteo.com/v1/ecmwf"
    HOURLY_FIELDS = [
        "temperature_2m",
        "relative_humidity_2m",
        "cloud_cover",
        "wind_speed_10m",
        "wind_direction_10m",
        "weather_code",
    ]

    def __init__(self, lat: float = Config.LOCATION_LAT, lon: float = Config.LOCATION_LON):
        self.lat = lat
        self.lon = lon

    def fetch_hourly(self) -> HourlySeries:
        """
        Fetch the two-day hourly forecast.

        This is the one critical source: every scorer needs it.

        Returns:
            HourlySeries with parsed data

        Raises:
            ForecastUnavailableError: on any HTTP, network or payload failure
        """
        params = {
            "latitude": self.lat,
            "longitude": self.lon,
            "hourly": ",".join(self.HOURLY_FIELDS),
            "temperature_unit": "fahrenheit",
            "wind_speed_unit": "mph",
            "timezone": Config.TIMEZONE,
            "forecast_days": 2,
        }

        try:
            response = requests.get(self.BASE_URL, params=params, timeout=Config.HTTP_TIMEOUT_SECONDS)
            response.raise_for_status()
            return HourlySeries.from_open_meteo(response.json())
        except (requests.RequestException, ValueError, AttributeError, TypeError) as e:
            log.error(f"Open-Meteo forecast request failed: {e}")
            raise ForecastUnavailableError("Weather API failed") from e


class MarineClient:
    """Client for the Open-Meteo marine API (wave and swell data)"""

    BASE_URL = "https://marine-api.open-meteo.com/v1/marine"
    HOURLY_FIELDS = [
        "wave_height",
        "wave_direction",
        "wave_period",
        "swell_wave_height",
        "swell_wave_direction",
        "swell_wave_period",
    ]

    def __init__(self, lat: float = Config.LOCATION_LAT, lon: float = Config.LOCATION_LON):
        self.lat = lat
        self.lon = lon

    def fetch_marine(self) -> Optional[MarineSeries]:
        """
        Fetch the two-day hourly wave forecast in imperial units.

        Returns:
            MarineSeries on success, None on any error.
        """
        params = {
            "latitude": self.lat,
            "longitude": self.lon,
            "hourly": ",".join(self.HOURLY_FIELDS),
            "timezone": Config.TIMEZONE,
            "forecast_days": 2,
            "length_unit": "imperial",
        }

        try:
            response = requests.get(self.BASE_URL, params=params, timeout=Config.HTTP_TIMEOUT_SECONDS)
            if response.status_code != 200:
                log.error(f"Marine API HTTP error: {response.status_code}")
                return None
            return MarineSeries.from_open_meteo(response.json())
        except (requests.RequestException, ValueError, AttributeError, TypeError) as e:
            log.error(f"Marine API request failed: {e}")
            return None


class SunriseClient:
    """Client for sunrise-sunset.org"""

    BASE_URL = "https://api.sunrise-sunset.org/json"

    def __init__(self, lat: float = Config.LOCATION_LAT, lon: float = Config.LOCATION_LON):
        self.lat = lat
        self.lon = lon

    def fetch_sunrise(self, day: date) -> Optional[SunriseInfo]:
        """
        Fetch sunrise for the given date.

        Returns:
            SunriseInfo (UTC-aware) on success, None on any error.
        """
        params = {
            "lat": self.lat,
            "lng": self.lon,
            "date": day.isoformat(),
            "formatted": 0,
        }

        try:
            response = requests.get(self.BASE_URL, params=params, timeout=Config.HTTP_TIMEOUT_SECONDS)
            if response.status_code != 200:
                log.error(f"Sunrise API HTTP error: {response.status_code}")
                return None
            return SunriseInfo.from_sunrise_sunset(response.json())
        except (requests.RequestException, ValueError, AttributeError, TypeError) as e:
            log.error(f"Sunrise API request failed: {e}")
            return None


class NOAAClient:
    """Client for NOAA Tides & Currents"""

    BASE_URL = "https://api.tidesandcurrents.noaa.gov/api/prod/datagetter"

    def __init__(
        self,
        tide_station: str = Config.NOAA_TIDE_STATION,
        water_temp_station: str = Config.NOAA_WATER_TEMP_STATION,
    ):
        self.tide_station = tide_station
        self.water_temp_station = water_temp_station

    def fetch_tides(self, begin: date, end: date) -> Optional[list[TideEvent]]:
        """
        Fetch high/low tide predictions in local standard/daylight time.

        Args:
            begin: First day to include
            end: Last day to include

        Returns:
            TideEvents in provider order, or None on any error.
        """
        params = {
            "begin_date": begin.strftime("%Y%m%d"),
            "end_date": end.strftime("%Y%m%d"),
            "station": self.tide_station,
            "product": "predictions",
            "datum": "MLLW",
            "time_zone": "lst_ldt",
            "interval": "hilo",
            "units": "english",
            "format": "json",
        }

        data = self._get(params, "tides")
        if data is None:
            return None

        try:
            return [TideEvent.from_noaa(p) for p in data.get("predictions") or []]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            log.error(f"NOAA tide parsing failed: {e} - Response: {data}")
            return None

    def fetch_water_temp(self) -> Optional[WaterTemperature]:
        """
        Fetch the latest water temperature reading.

        Returns:
            WaterTemperature on success, None on any error.
        """
        params = {
            "date": "latest",
            "station": self.water_temp_station,
            "product": "water_temperature",
            "units": "english",
            "time_zone": "lst_ldt",
            "format": "json",
        }

        data = self._get(params, "water temperature")
        if data is None:
            return None

        try:
            return WaterTemperature.from_noaa(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            log.error(f"NOAA water temperature parsing failed: {e} - Response: {data}")
            return None

    def _get(self, params: dict, product: str) -> Optional[dict]:
        try:
            response = requests.get(self.BASE_URL, params=params, timeout=Config.HTTP_TIMEOUT_SECONDS)
            if response.status_code != 200:
                log.error(f"NOAA {product} HTTP error: {response.status_code} - {response.text}")
                return None

            data = response.json()
            if not isinstance(data, dict):
                log.error(f"NOAA {product} response is not an object: {data!r}")
                return None
            if "error" in data:
                log.error(f"NOAA {product} API error: {data['error']}")
                return None
            return data

        except (requests.RequestException, ValueError) as e:
            log.error(f"NOAA {product} request failed: {e}")
            return None
