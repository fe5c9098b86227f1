# ABOUTME: Formats tomorrow morning's high and low tides for display
# ABOUTME: One formatter with a compact summary style and a longer card style

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from dawn_patrol.config import Config
from dawn_patrol.scoring.timewindow import format_clock, to_local
from dawn_patrol.weather.models import TideEvent, TideType


@dataclass(frozen=True)
class TideStyle:
    """How each tide is labeled, how they are joined, and what to show when there are none"""
    high_label: str
    low_label: str
    label_separator: str
    joiner: str
    empty: str


TIDE_STYLES = {
    "short": TideStyle(high_label="H", low_label="L", label_separator=" ", joiner=", ", empty="--"),
    "long": TideStyle(high_label="High", low_label="Low", label_separator=": ", joiner=" | ", empty="Check tide times"),
}


def morning_tides(
    events: Iterable[TideEvent],
    target: date,
    start_hour: int = Config.TIDE_START_HOUR,
    end_hour: int = Config.TIDE_END_HOUR,
    tz: Optional[str] = None,
) -> list[TideEvent]:
    """High and low tides on the target date between start_hour and end_hour, in source order"""
    selected = []
    for event in events:
        if event.kind not in (TideType.HIGH, TideType.LOW):
            continue
        moment = to_local(event.time, tz)
        if moment.date() == target and start_hour <= moment.hour <= end_hour:
            selected.append(event)
    return selected


def format_tides(
    events: Optional[Iterable[TideEvent]],
    target: date,
    style: str = "short",
    tz: Optional[str] = None,
) -> str:
    """
    Render the morning tides, e.g. "H 5:45AM, L 11:50AM".

    Args:
        events: Tide predictions, None when the tide fetch failed
        target: Local date of the morning
        style: "short" for the conditions summary, "long" for the surf card

    Returns:
        Formatted tides, or the style's empty marker
    """
    fmt = TIDE_STYLES[style]
    if not events:
        return fmt.empty

    rendered = []
    for event in morning_tides(events, target, tz=tz):
        label = fmt.high_label if event.kind is TideType.HIGH else fmt.low_label
        clock = format_clock(to_local(event.time, tz), separator="")
        rendered.append(f"{label}{fmt.label_separator}{clock}")

    if not rendered:
        return fmt.empty
    return fmt.joiner.join(rendered)
