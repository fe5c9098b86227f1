# ABOUTME: Resolves "tomorrow morning" against hourly forecast timestamps
# ABOUTME: Local-calendar date math plus the 12-hour clock formatting shared by the UI

from datetime import date, datetime, timedelta, timezone
from typing import Optional, Sequence, Union
from zoneinfo import ZoneInfo

from dawn_patrol.config import Config

Timestamp = Union[str, int, float, datetime]

NOT_FOUND = -1


def local_zone(tz: Optional[Union[str, ZoneInfo]] = None) -> ZoneInfo:
    if isinstance(tz, ZoneInfo):
        return tz
    return ZoneInfo(tz or Config.TIMEZONE)


def to_local(value: Timestamp, tz: Optional[Union[str, ZoneInfo]] = None) -> datetime:
    """
    Convert a provider timestamp into an aware local datetime.

    Accepts ISO strings ("2026-10-17T06:00", "2026-10-17 06:00",
    "2026-10-17T10:05:12+00:00"), epoch seconds and datetimes.
    Naive values are wall-clock time in the local zone; aware values
    are converted into it.

    Raises:
        ValueError: if a string is not a recognizable timestamp
        TypeError: for any other kind of value
    """
    zone = local_zone(tz)

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)):
        parsed = datetime.fromtimestamp(value, tz=timezone.utc)
    elif isinstance(value, str):
        parsed = datetime.fromisoformat(value.strip())
    else:
        raise TypeError(f"Unsupported timestamp: {value!r}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=zone)
    return parsed.astimezone(zone)


def target_date(now: Optional[datetime] = None, tz: Optional[Union[str, ZoneInfo]] = None) -> date:
    """Local calendar date of tomorrow relative to now"""
    zone = local_zone(tz)
    current = to_local(now, zone) if now is not None else datetime.now(zone)
    return current.date() + timedelta(days=1)


def morning_index(
    times: Sequence[Timestamp],
    target: date,
    start_hour: int = Config.MORNING_START_HOUR,
    end_hour: int = Config.MORNING_END_HOUR,
    tz: Optional[Union[str, ZoneInfo]] = None,
) -> int:
    """
    Find the first timestamp inside the morning window of the target date.

    Args:
        times: Hourly timestamps, in series order
        target: Local calendar date to look for
        start_hour: First local hour of the window (inclusive)
        end_hour: Last local hour of the window (inclusive)

    Returns:
        Index into times, or NOT_FOUND (-1)
    """
    zone = local_zone(tz)
    for i, value in enumerate(times):
        try:
            moment = to_local(value, zone)
        except (TypeError, ValueError):
            continue
        if moment.date() == target and start_hour <= moment.hour <= end_hour:
            return i
    return NOT_FOUND


def format_clock(moment: datetime, separator: str = " ") -> str:
    """12-hour clock text, e.g. "5:45 AM" (or "5:45AM" with an empty separator)"""
    hour12 = moment.hour % 12 or 12
    meridiem = "PM" if moment.hour >= 12 else "AM"
    return f"{hour12}:{moment.minute:02d}{separator}{meridiem}"


def format_timestamp(moment: datetime) -> str:
    """Short date and time for the "last updated" line, e.g. "Oct 17, 6:05 AM" """
    return f"{moment.strftime('%b')} {moment.day}, {format_clock(moment)}"
