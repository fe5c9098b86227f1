# ABOUTME: Tests for forecast payload models
# ABOUTME: Validates parsing of Open-Meteo, NOAA and sunrise-sunset.org responses

from datetime import datetime, timezone

import pytest

from dawn_patrol.weather.models import (
    HourlySeries,
    MarineSeries,
    SunriseInfo,
    TideEvent,
    TideType,
    WaterTemperature,
)


class TestHourlySeries:
    """Tests for HourlySeries.from_open_meteo"""

    def test_parses_all_columns(self):
        payload = {
            "hourly": {
                "time": ["2026-10-17T06:00", "2026-10-17T07:00"],
                "temperature_2m": [58.1, 60.3],
                "relative_humidity_2m": [80, 75],
                "cloud_cover": [35, 40],
                "wind_speed_10m": [5.2, 6.0],
                "wind_direction_10m": [290, 300],
                "weather_code": [1, 2],
            }
        }

        series = HourlySeries.from_open_meteo(payload)

        assert len(series) == 2
        assert series.times == ("2026-10-17T06:00", "2026-10-17T07:00")
        assert series.temperature_f == (58.1, 60.3)
        assert series.cloud_cover_pct == (35, 40)
        assert series.weather_code == (1, 2)

    def test_missing_columns_become_empty(self):
        series = HourlySeries.from_open_meteo({"hourly": {"time": ["2026-10-17T06:00"], "weather_code": None}})

        assert series.weather_code == ()
        assert series.humidity_pct == ()

    def test_missing_time_axis_raises(self):
        with pytest.raises(ValueError):
            HourlySeries.from_open_meteo({"error": True, "reason": "bad request"})

    @pytest.mark.parametrize("payload", [None, [], "Service Unavailable"])
    def test_non_object_payload_raises(self, payload):
        with pytest.raises(ValueError):
            HourlySeries.from_open_meteo(payload)


class TestMarineSeries:
    """Tests for MarineSeries.from_open_meteo"""

    def test_parses_swell_and_wave_columns(self):
        payload = {
            "hourly": {
                "time": ["2026-10-17T06:00"],
                "wave_height": [3.6],
                "wave_period": [6.1],
                "wave_direction": [100],
                "swell_wave_height": [3.2],
                "swell_wave_period": [9.0],
                "swell_wave_direction": [45],
            }
        }

        series = MarineSeries.from_open_meteo(payload)

        assert series.swell_height_ft == (3.2,)
        assert series.wave_period_s == (6.1,)
        assert series.swell_direction_deg == (45,)

    def test_no_hourly_data_returns_none(self):
        assert MarineSeries.from_open_meteo({}) is None
        assert MarineSeries.from_open_meteo(None) is None
        assert MarineSeries.from_open_meteo(["2026-10-17T06:00"]) is None


class TestTides:
    """Tests for TideEvent and TideType"""

    def test_parses_noaa_prediction(self):
        event = TideEvent.from_noaa({"t": "2026-10-17 05:45", "v": "4.123", "type": "H"})

        assert event.time == datetime(2026, 10, 17, 5, 45)
        assert event.kind is TideType.HIGH
        assert event.height_ft == pytest.approx(4.123)

    def test_missing_height_is_none(self):
        event = TideEvent.from_noaa({"t": "2026-10-17 11:50", "type": "L"})
        assert event.height_ft is None

    def test_malformed_time_raises(self):
        with pytest.raises(ValueError):
            TideEvent.from_noaa({"t": "tomorrow", "type": "H"})

    @pytest.mark.parametrize("raw,expected", [
        ("H", TideType.HIGH),
        ("HIGH", TideType.HIGH),
        ("l", TideType.LOW),
        ("LOW", TideType.LOW),
        ("NORMAL", TideType.OTHER),
        (None, TideType.OTHER),
    ])
    def test_tide_type_parse(self, raw, expected):
        assert TideType.parse(raw) is expected


class TestSunriseAndWaterTemp:
    """Tests for SunriseInfo and WaterTemperature"""

    def test_sunrise_is_utc_aware(self):
        info = SunriseInfo.from_sunrise_sunset(
            {"results": {"sunrise": "2026-10-17T11:10:42+00:00"}, "status": "OK"}
        )
        assert info.time == datetime(2026, 10, 17, 11, 10, 42, tzinfo=timezone.utc)

    def test_sunrise_missing(self):
        assert SunriseInfo.from_sunrise_sunset({"status": "INVALID_DATE"}) is None
        assert SunriseInfo.from_sunrise_sunset(None) is None

    def test_water_temp_latest_reading(self):
        reading = WaterTemperature.from_noaa({"data": [{"t": "2026-10-16 19:54", "v": "61.5", "f": "0,0,0"}]})

        assert reading.temp_f == 61.5
        assert reading.time == datetime(2026, 10, 16, 19, 54)
        assert str(reading) == "62°F"

    def test_water_temp_empty(self):
        assert WaterTemperature.from_noaa({"data": []}) is None
        assert WaterTemperature.from_noaa("Service Unavailable") is None
        assert WaterTemperature.from_noaa({"data": [{"t": "2026-10-16 19:54", "v": ""}]}) is None
