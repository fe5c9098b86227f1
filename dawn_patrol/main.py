# ABOUTME: Main NiceGUI web application entry point
# ABOUTME: One page showing tomorrow's recommendation and the three activity cards

import asyncio
import logging

from nicegui import ui, Client

from dawn_patrol.config import Config
from dawn_patrol.orchestrator import AppOrchestrator, RunResult
from dawn_patrol.weather.sources import ForecastUnavailableError

log = logging.getLogger(__name__)

ERROR_MESSAGE = "Failed to load forecast data. Please try again."

ARROWS = {
    "north": "&#8593;",
    "south": "&#8595;",
    "either": "&#8596;",
}

# Initialize orchestrator
orchestrator = AppOrchestrator()


def score_class(score: int) -> str:
    """Card color band for a score"""
    if score >= 7:
        return "score-high"
    if score >= 5:
        return "score-medium"
    return "score-low"


@ui.page('/')
async def index(client: Client):
    """Main page"""

    ui.add_head_html("""
    <style>
        body {
            background-color: #0f1b2d;
            color: #f4f1ea;
            font-family: Arial, sans-serif;
        }
        .title {
            font-size: clamp(22px, 5vw, 40px);
            font-weight: bold;
            text-align: center;
        }
        .rec-activity {
            font-size: clamp(32px, 10vw, 64px);
            font-weight: bold;
            text-align: center;
        }
        .rec-detail, .summary, .timestamp {
            text-align: center;
        }
        .timestamp {
            font-size: 12px;
            color: #9aa5b1;
        }
        .card-score {
            font-size: 48px;
            font-weight: bold;
        }
        .score-high { border-left: 6px solid #3fb950; }
        .score-medium { border-left: 6px solid #d29922; }
        .score-low { border-left: 6px solid #f85149; }

        #loading-text {
            font-family: monospace;
            font-size: 24px;
            animation: pulse 1.5s ease-in-out infinite;
        }

        @keyframes pulse {
            0%, 100% { opacity: 0.3; }
            50% { opacity: 1; }
        }
    </style>
    """)

    with ui.column().classes('w-full items-center'):
        ui.html('<div class="title">DAWN PATROL</div>', sanitize=False)
        sunrise_label = ui.label('Sunrise: --')

        loading = ui.html('<span id="loading-text">LOADING</span>', sanitize=False)
        error_label = ui.label(ERROR_MESSAGE).style('color: #f85149;')
        error_label.set_visibility(False)

        content = ui.column().classes('w-full items-center')
        content.set_visibility(False)

        with content:
            rec_activity = ui.html('<div class="rec-activity">--</div>', sanitize=False)
            rec_detail = ui.label('').classes('rec-detail')
            summary = ui.label('').classes('summary')

            with ui.row().classes('justify-center'):
                with ui.card() as surf_card:
                    ui.label('SURF')
                    surf_score = ui.label('--').classes('card-score')
                    ui.label(Config.SURF_AREA_NAME)
                    surf_conditions = ui.label('')
                    surf_tide = ui.label('')
                    surf_temps = ui.label('')
                    surf_breakdown = ui.label('')

                with ui.card() as photo_card:
                    ui.label('SUNRISE PHOTOS')
                    photo_score = ui.label('--').classes('card-score')
                    photo_clouds = ui.label('')
                    ui.label('Model: ECMWF')
                    photo_verdict = ui.label('')

                with ui.card() as cycle_card:
                    ui.label('CYCLING')
                    cycle_score = ui.label('--').classes('card-score')
                    cycle_wind = ui.label('')
                    cycle_temp = ui.label('')
                    cycle_arrow = ui.html('', sanitize=False)
                    cycle_direction = ui.label('')

        timestamp_label = ui.html('<div class="timestamp">Last updated: --</div>', sanitize=False)
        refresh_button = ui.button('REFRESH')

    def set_card(card, label, score: int) -> None:
        for name in ("score-high", "score-medium", "score-low"):
            card.classes(remove=name)
        card.classes(add=score_class(score))
        label.text = str(score)

    def render(result: RunResult) -> None:
        rec = result.recommendation
        rec_activity.content = f'<div class="rec-activity">{rec.icon} {rec.label}</div>'
        rec_detail.text = rec.detail

        if result.sunrise_text:
            sunrise_label.text = f"Sunrise: {result.sunrise_text}"

        air = f"{result.air_temp_f}°F" if result.air_temp_f is not None else "--"
        water = f"{result.water_temp_f}°F" if result.water_temp_f is not None else "--"
        summary.text = f"Air: {air} | Water: {water} | Tides: {result.tide_summary}"

        set_card(surf_card, surf_score, result.surf.score)
        surf_conditions.text = result.surf.details
        surf_tide.text = result.tide_detail
        surf_temps.text = f"Water: {water} | Air: {air}"
        surf_breakdown.text = result.surf.breakdown if result.surf.height_score is not None else ""

        set_card(photo_card, photo_score, result.photo.score)
        photo_clouds.text = f"Cloud cover: {result.photo.cloud_cover_pct:.0f}%"
        photo_verdict.text = result.photo.verdict

        cycle = result.cycle
        set_card(cycle_card, cycle_score, cycle.score)
        if cycle.direction is not None:
            cycle_wind.text = f"Wind: {cycle.wind_speed_mph} mph {cycle.wind_cardinal}"
            cycle_temp.text = f"Temperature: {air}"
            cycle_arrow.content = ARROWS[cycle.direction.value]
            cycle_direction.text = cycle.direction_text
        else:
            cycle_wind.text = "No data"
            cycle_temp.text = ""
            cycle_arrow.content = ""
            cycle_direction.text = ""

        timestamp_label.content = f'<div class="timestamp">Last updated: {result.last_updated}</div>'

    async def load():
        """Run the advisor off the event loop and show the result"""
        loading.set_visibility(True)
        error_label.set_visibility(False)
        content.set_visibility(False)
        refresh_button.disable()

        try:
            loop = asyncio.get_event_loop()
            result = await loop.run_in_executor(None, orchestrator.run)
            render(result)
            content.set_visibility(True)
        except ForecastUnavailableError as e:
            log.error(f"Run failed: {e}")
            error_label.set_visibility(True)
        except Exception as e:
            log.exception(f"Unexpected error during run: {e}")
            error_label.set_visibility(True)
        finally:
            loading.set_visibility(False)
            refresh_button.enable()

    refresh_button.on_click(load)
    ui.timer(0.1, load, once=True)


if __name__ in {"__main__", "__mp_main__"}:
    logging.basicConfig(level=logging.DEBUG if Config.DEBUG else logging.INFO)
    ui.run(
        title='Dawn Patrol',
        host='0.0.0.0',
        port=Config.PORT,
        reload=False
    )
