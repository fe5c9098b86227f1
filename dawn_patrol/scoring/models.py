# ABOUTME: Data models for activity scores and the final recommendation
# ABOUTME: Each score carries the breakdown the UI cards display

from dataclasses import dataclass
from enum import Enum
from typing import Optional


def _check_score(score: int) -> None:
    if not 0 <= score <= 10:
        raise ValueError(f"Score must be 0-10, got {score}")


@dataclass(frozen=True)
class SurfScore:
    """Surf rating; 0 means no forecast data"""
    score: int
    details: str
    wave_height_ft: float = 0.0
    period_s: float = 0.0
    direction_deg: float = 0.0
    height_score: Optional[int] = None
    period_score: Optional[int] = None
    wind_score: Optional[int] = None

    def __post_init__(self):
        _check_score(self.score)

    @property
    def breakdown(self) -> str:
        return (
            f"Height: {self.height_score}/10 | "
            f"Period: {self.period_score}/10 | "
            f"Wind: {self.wind_score}/10"
        )


@dataclass(frozen=True)
class PhotoScore:
    """Sunrise photo rating based on cloud cover"""
    score: int
    verdict: str
    cloud_cover_pct: float = 0.0
    humidity_pct: float = 50.0

    def __post_init__(self):
        _check_score(self.score)


class LoopDirection(Enum):
    """Which way to ride first so the wind is at your back coming home"""
    NORTH = "north"
    SOUTH = "south"
    EITHER = "either"


@dataclass(frozen=True)
class CycleScore:
    """Cycling rating plus the recommended loop direction"""
    score: int
    direction: Optional[LoopDirection] = None
    direction_text: Optional[str] = None
    wind_speed_mph: Optional[int] = None
    wind_direction_deg: Optional[float] = None
    wind_cardinal: Optional[str] = None
    temp_f: Optional[int] = None

    def __post_init__(self):
        _check_score(self.score)


class Activity(Enum):
    SURF = "surf"
    PHOTO = "photo"
    CYCLE = "cycle"
    SLEEP = "sleep"


@dataclass(frozen=True)
class Recommendation:
    """What to do tomorrow morning"""
    activity: Activity
    label: str
    detail: str
    icon: str
    score: int

    def __str__(self) -> str:
        return f"{self.icon} {self.label}: {self.detail}"
