import datetime
import logging
from typing import Any, Dict, Mapping, Optional

from ...models import PrayerSchedule, PrayerWindowResult
from ...utils.errors import InvalidTimeFormat
from ..helpers.constants import DEFAULT_SCHEDULE_TIMES, SAMPLE_SCHEDULE_TIMES

logger = logging.getLogger(__name__)

TWELVE_HOUR_FORMATS = ("%I:%M %p", "%I:%M%p", "%I:%M:%S %p")
TWENTY_FOUR_HOUR_FORMATS = ("%H:%M", "%H:%M:%S")

SUNRISE_OFFSET_MINUTES = 90

def parse_time_of_day(time_str: str) -> datetime.time:
    """
    Parses a TimeOfDay string in either 12-hour ("5:45 AM") or 24-hour
    ("13:15", "05:46:00") notation.

    Raises:
        InvalidTimeFormat: if the string matches none of the known formats.
    """
    if not isinstance(time_str, str) or not time_str.strip():
        raise InvalidTimeFormat(time_str)

    normalized = time_str.strip().upper()
    has_meridiem = normalized.endswith("AM") or normalized.endswith("PM")
    formats = TWELVE_HOUR_FORMATS if has_meridiem else TWENTY_FOUR_HOUR_FORMATS

    for fmt in formats:
        try:
            return datetime.datetime.strptime(normalized, fmt).time()
        except ValueError:
            continue

    logger.warning(f"Invalid or unrecognized time string format for parsing: {time_str}")
    raise InvalidTimeFormat(time_str)

def format_time_12h(time_obj: datetime.time) -> str:
    period = "PM" if time_obj.hour >= 12 else "AM"
    display_hour = time_obj.hour % 12 or 12
    return f"{display_hour}:{time_obj.minute:02d} {period}"

def format_time_24h(time_obj: datetime.time) -> str:
    return time_obj.strftime("%H:%M")

def format_time(time_obj: Optional[datetime.time], time_format: str = "12h") -> str:
    if not time_obj: return "N/A"
    if time_format == "24h":
        return format_time_24h(time_obj)
    return format_time_12h(time_obj)

def add_minutes(time_obj: datetime.time, minutes_to_add: int) -> datetime.time:
    """Adds minutes to a time of day, wrapping past midnight."""
    dummy_date = datetime.date(2000, 1, 1)
    full_datetime = datetime.datetime.combine(dummy_date, time_obj)
    return (full_datetime + datetime.timedelta(minutes=int(minutes_to_add))).time()

def estimate_sunrise(fajr: datetime.time) -> datetime.time:
    """Sunrise is typically about an hour and a half after Fajr."""
    return add_minutes(fajr, SUNRISE_OFFSET_MINUTES)

def build_schedule(raw_times: Mapping[str, Any]) -> PrayerSchedule:
    """
    Builds a PrayerSchedule from a mapping of prayer name to time string.
    Keys may be lowercase ("fajr") or capitalized ("Fajr"); "sunrise" is optional.

    Raises:
        InvalidTimeFormat: if a prayer is missing or its time cannot be parsed.
    """
    lookup = {str(key).lower(): value for key, value in raw_times.items()}

    parsed = {}
    for key in ("fajr", "dhuhr", "asr", "maghrib", "isha"):
        parsed[key] = parse_time_of_day(lookup.get(key))

    sunrise_str = lookup.get("sunrise")
    parsed["sunrise"] = parse_time_of_day(sunrise_str) if sunrise_str else None

    return PrayerSchedule(**parsed)

def _resolve(time_obj: datetime.time, day: datetime.date, tzinfo) -> datetime.datetime:
    return datetime.datetime.combine(day, time_obj, tzinfo=tzinfo)

def next_prayer(schedule: PrayerSchedule, now: datetime.datetime) -> PrayerWindowResult:
    """
    Returns the next prayer strictly after `now`.

    Each prayer time is resolved against `now`'s calendar date; a prayer whose
    instant equals `now` has already started and is skipped. Once Isha has
    passed, Fajr of the following day is returned with `is_tomorrow` set.
    """
    today = now.date()
    for name, time_obj in schedule.prayers():
        prayer_at = _resolve(time_obj, today, now.tzinfo)
        if prayer_at > now:
            return PrayerWindowResult(name=name, time=time_obj, is_tomorrow=False, at=prayer_at)

    tomorrow = today + datetime.timedelta(days=1)
    return PrayerWindowResult(
        name="Fajr",
        time=schedule.fajr,
        is_tomorrow=True,
        at=_resolve(schedule.fajr, tomorrow, now.tzinfo),
    )

def current_prayer(schedule: PrayerSchedule, now: datetime.datetime) -> Optional[str]:
    """
    Returns the name of the prayer whose active window contains `now`, or
    None outside every window (before Fajr, or between sunrise and Dhuhr).
    """
    today = now.date()
    sunrise = schedule.sunrise or estimate_sunrise(schedule.fajr)

    windows = [
        ("Fajr", schedule.fajr, sunrise),
        ("Dhuhr", schedule.dhuhr, schedule.asr),
        ("Asr", schedule.asr, schedule.maghrib),
        ("Maghrib", schedule.maghrib, schedule.isha),
    ]
    for name, start, end in windows:
        if _resolve(start, today, now.tzinfo) <= now < _resolve(end, today, now.tzinfo):
            return name

    # Isha runs until midnight.
    if now >= _resolve(schedule.isha, today, now.tzinfo):
        return "Isha"
    return None

def prayer_window_to_dict(result: PrayerWindowResult, time_format: str = "12h") -> Dict[str, Any]:
    return {
        "name": result.name,
        "time": format_time(result.time, time_format),
        "isTomorrow": result.is_tomorrow,
        "at": result.at.isoformat(),
    }

DEFAULT_SCHEDULE = build_schedule(DEFAULT_SCHEDULE_TIMES)
SAMPLE_SCHEDULE = build_schedule(SAMPLE_SCHEDULE_TIMES)
