# ABOUTME: Main application orchestrator coordinating all components
# ABOUTME: Fetches every source concurrently, scores the three activities and picks one

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from dawn_patrol.config import Config
from dawn_patrol.debug import debug_log
from dawn_patrol.scoring.bands import round_half_up
from dawn_patrol.scoring.calculator import ScoreCalculator
from dawn_patrol.scoring.models import CycleScore, PhotoScore, Recommendation, SurfScore
from dawn_patrol.scoring.recommender import ActivityRecommender
from dawn_patrol.scoring.tides import format_tides
from dawn_patrol.scoring.timewindow import format_clock, format_timestamp, local_zone, target_date, to_local
from dawn_patrol.weather.models import HourlySeries, MarineSeries, SunriseInfo, TideEvent, WaterTemperature
from dawn_patrol.weather.sources import MarineClient, NOAAClient, OpenMeteoClient, SunriseClient

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForecastBundle:
    """Everything fetched for one run; only weather is guaranteed"""
    weather: HourlySeries
    marine: Optional[MarineSeries] = None
    sunrise: Optional[SunriseInfo] = None
    tides: Optional[list[TideEvent]] = None
    water_temp: Optional[WaterTemperature] = None


@dataclass(frozen=True)
class RunResult:
    """Outcome of one advisory run, handed to the UI"""
    target: date
    generated_at: datetime
    surf: SurfScore
    photo: PhotoScore
    cycle: CycleScore
    recommendation: Recommendation
    sunrise_text: Optional[str]
    tide_summary: str
    tide_detail: str
    water_temp_f: Optional[int]
    air_temp_f: Optional[int]
    last_updated: str


class AppOrchestrator:
    """Orchestrates all app components to generate tomorrow's recommendation"""

    def __init__(self):
        self.weather_client = OpenMeteoClient()
        self.marine_client = MarineClient()
        self.sunrise_client = SunriseClient()
        self.noaa_client = NOAAClient()
        self.score_calculator = ScoreCalculator()
        self.recommender = ActivityRecommender()
        self.latest: Optional[RunResult] = None

    def fetch_all(self, target: date, today: date) -> ForecastBundle:
        """
        Fetch all sources in parallel, one attempt each.

        Raises:
            ForecastUnavailableError: if the general weather forecast fails
        """
        with ThreadPoolExecutor(max_workers=5) as pool:
            weather = pool.submit(self.weather_client.fetch_hourly)
            marine = pool.submit(self.marine_client.fetch_marine)
            sunrise = pool.submit(self.sunrise_client.fetch_sunrise, target)
            tides = pool.submit(self.noaa_client.fetch_tides, today, target)
            water_temp = pool.submit(self.noaa_client.fetch_water_temp)

            bundle = ForecastBundle(
                weather=weather.result(),
                marine=marine.result(),
                sunrise=sunrise.result(),
                tides=tides.result(),
                water_temp=water_temp.result(),
            )

        debug_log(
            f"Fetched: weather={len(bundle.weather)}h "
            f"marine={'yes' if bundle.marine else 'no'} "
            f"sunrise={'yes' if bundle.sunrise else 'no'} "
            f"tides={len(bundle.tides) if bundle.tides is not None else 'no'} "
            f"water={'yes' if bundle.water_temp else 'no'}",
            "ORCHESTRATOR",
        )
        return bundle

    def evaluate(self, bundle: ForecastBundle, target: date, now: datetime) -> RunResult:
        """Score the fetched data and pick an activity; pure apart from logging"""
        surf = self.score_calculator.calculate_surf_score(bundle.marine, bundle.weather, target)
        photo = self.score_calculator.calculate_photo_score(bundle.weather, target)
        cycle = self.score_calculator.calculate_cycle_score(bundle.weather, target)
        recommendation = self.recommender.recommend(surf, photo, cycle)

        log.info(
            f"Scores for {target}: surf={surf.score} photo={photo.score} cycle={cycle.score} "
            f"-> {recommendation}"
        )

        sunrise_text = None
        if bundle.sunrise is not None:
            sunrise_text = format_clock(to_local(bundle.sunrise.time))

        water_temp_f = None
        if bundle.water_temp is not None:
            water_temp_f = round_half_up(bundle.water_temp.temp_f)

        return RunResult(
            target=target,
            generated_at=now,
            surf=surf,
            photo=photo,
            cycle=cycle,
            recommendation=recommendation,
            sunrise_text=sunrise_text,
            tide_summary=format_tides(bundle.tides, target, style="short"),
            tide_detail=format_tides(bundle.tides, target, style="long"),
            water_temp_f=water_temp_f,
            air_temp_f=cycle.temp_f,
            last_updated=format_timestamp(now),
        )

    def run(self, now: Optional[datetime] = None) -> RunResult:
        """
        One full advisory run for tomorrow morning.

        Args:
            now: Moment the run starts (defaults to the current local time)

        Returns:
            RunResult, also kept as self.latest

        Raises:
            ForecastUnavailableError: if the general weather forecast fails
        """
        zone = local_zone()
        now = to_local(now, zone) if now is not None else datetime.now(zone)
        target = target_date(now)
        today = target - timedelta(days=1)

        debug_log(f"Starting run for {target} ({Config.LOCATION_NAME})", "ORCHESTRATOR")
        bundle = self.fetch_all(target, today)
        result = self.evaluate(bundle, target, now)

        self.latest = result
        return result
