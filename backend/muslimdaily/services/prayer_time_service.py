from typing import Dict, Any, Optional, Tuple
import datetime
from flask import current_app
from ..metrics import SCHEDULE_FALLBACKS_TOTAL
from ..models import PrayerSchedule
from ..utils.errors import InvalidTimeFormat, PrayerTimeSourceError
from .prayer_time.api_adapter import get_daily_prayer_times_from_api
from .prayer_time.timing_calculator import (
    DEFAULT_SCHEDULE,
    build_schedule,
    current_prayer,
    format_time,
    next_prayer,
    prayer_window_to_dict,
)
from .prayer_time.zone_resolver import resolve_zone_for_coords

def get_daily_prayer_times(zone_code: str, date_obj: datetime.date) -> Optional[Dict[str, Any]]:
    """Fetches one day of prayer times for a JAKIM zone from the configured source."""
    daily_data = get_daily_prayer_times_from_api(zone_code, date_obj)
    if not daily_data:
        current_app.logger.error(f"Could not fetch prayer times for zone '{zone_code}' on {date_obj}.")
    return daily_data

def get_prayer_times_for_coords(latitude: float, longitude: float, date_obj: datetime.date) -> Tuple[str, Optional[Dict[str, Any]]]:
    """Resolves the zone for a coordinate and fetches that zone's prayer times."""
    zone_code = resolve_zone_for_coords(latitude, longitude)
    current_app.logger.info(f"Coordinates {latitude}, {longitude} -> Zone {zone_code}")
    return zone_code, get_daily_prayer_times(zone_code, date_obj)

def schedule_from_daily(daily_data: Optional[Dict[str, Any]]) -> Tuple[PrayerSchedule, str]:
    """
    Converts standardized daily data into a PrayerSchedule.

    When the data is missing or unparsable, the default schedule is used
    instead (if PRAYER_TIMES_FALLBACK_ENABLED), so a broken upstream never
    reaches the user as a crash.

    Returns:
        A (schedule, source) tuple, where source is "jakim-official" or "default".

    Raises:
        PrayerTimeSourceError: if no schedule is available and fallback is disabled.
    """
    reason = None
    if not daily_data or not daily_data.get('timings'):
        reason = 'unavailable'
    else:
        try:
            return build_schedule(daily_data['timings']), "jakim-official"
        except InvalidTimeFormat as e:
            current_app.logger.warning(f"Prayer time source returned unparsable data: {e}")
            reason = 'invalid_format'

    if not current_app.config.get('PRAYER_TIMES_FALLBACK_ENABLED', True):
        raise PrayerTimeSourceError(f"No usable prayer schedule ({reason}).")

    SCHEDULE_FALLBACKS_TOTAL.labels(reason=reason).inc()
    current_app.logger.warning(f"Using default prayer schedule (reason: {reason}).")
    return DEFAULT_SCHEDULE, "default"

def serialize_schedule(schedule: PrayerSchedule, time_format: str = "12h") -> Dict[str, str]:
    times = {name.lower(): format_time(time_obj, time_format) for name, time_obj in schedule.prayers()}
    times["sunrise"] = format_time(schedule.sunrise, time_format)
    return times

def describe_prayer_windows(schedule: PrayerSchedule, now: datetime.datetime, time_format: str = "12h") -> Dict[str, Any]:
    """Builds the next/current prayer part of a prayer times response."""
    return {
        "nextPrayer": prayer_window_to_dict(next_prayer(schedule, now), time_format),
        "currentPrayer": current_prayer(schedule, now),
    }
