# ABOUTME: Application configuration including location coordinates and API settings
# ABOUTME: Fixed home-base geography plus the tunable morning window and scoring ranges

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration"""

    # Location: Ventnor, NJ (home base)
    LOCATION_NAME = "Ventnor, NJ"
    LOCATION_LAT = 39.3404
    LOCATION_LON = -74.4774
    SURF_AREA_NAME = "Ventnor Area"

    # All forecast timestamps are interpreted in this zone
    TIMEZONE = os.getenv("TIMEZONE", "America/New_York")

    # Morning window (local hours, inclusive)
    MORNING_START_HOUR = 6
    MORNING_END_HOUR = 9

    # Tides shown for the morning (local hours, inclusive)
    TIDE_START_HOUR = 4
    TIDE_END_HOUR = 12

    # NJ coast faces ESE, so offshore wind blows from W-NW
    OFFSHORE_MIN_DEG = 250
    OFFSHORE_MAX_DEG = 320

    # Cycling loop endpoints along the island
    NORTH_DESTINATION = "Atlantic City"
    SOUTH_DESTINATION = "Longport"

    # Any activity scoring below this means sleep in
    MIN_RECOMMEND_SCORE = 4

    # NOAA stations: Atlantic City tides, Cape May water temperature
    NOAA_TIDE_STATION = os.getenv("NOAA_TIDE_STATION", "8534720")
    NOAA_WATER_TEMP_STATION = os.getenv("NOAA_WATER_TEMP_STATION", "8536110")

    # Per-request HTTP timeout; no retries
    HTTP_TIMEOUT_SECONDS = int(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

    # Web server
    PORT = int(os.getenv("PORT", "8080"))

    # Debug mode
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"
