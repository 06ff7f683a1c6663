# muslimdaily/routes/prayer_time_routes.py

from flask import current_app
from flask_smorest import Blueprint, abort
from typing import Any, Dict, Optional

from ..schemas import (
    LegacyPrayerTimesSchema,
    MessageSchema,
    NextPrayerArgsSchema,
    NextPrayerSchema,
    PrayerTimesResponseSchema,
    TimeFormatArgsSchema,
    ZoneSchema,
)
from ..services.helpers.constants import JAKIM_ZONES, JAKIM_ZONES_BY_CODE
from ..services.prayer_time.timing_calculator import (
    SAMPLE_SCHEDULE,
    build_schedule,
    estimate_sunrise,
    format_time,
    next_prayer,
    prayer_window_to_dict,
)
from ..services.prayer_time.zone_resolver import is_within_service_area
from ..services.prayer_time_service import (
    describe_prayer_windows,
    get_daily_prayer_times,
    get_prayer_times_for_coords,
    schedule_from_daily,
    serialize_schedule,
)
from ..utils.errors import InvalidTimeFormat, PrayerTimeSourceError
from ..utils.time_utils import now_in_app_timezone, to_app_timezone

prayer_time_bp = Blueprint(
    'PrayerTimes',
    __name__,
    url_prefix='/api/prayertimes',
    description="JAKIM prayer times by zone or by coordinates."
)

legacy_prayer_time_bp = Blueprint(
    'LegacyPrayerTimes',
    __name__,
    description="Legacy sample prayer times endpoint kept for older clients."
)

def _time_format(args: Dict[str, Any]) -> str:
    return args.get('format') or current_app.config.get('DEFAULT_TIME_FORMAT', '12h')

def _build_prayer_times_response(zone_code: str, daily_data: Optional[Dict[str, Any]], time_format: str,
                                 coordinates: Optional[Dict[str, float]] = None) -> Dict[str, Any]:
    """Turns upstream daily data into the prayer times response, falling back to the default schedule."""
    try:
        schedule, source = schedule_from_daily(daily_data)
    except PrayerTimeSourceError as e:
        current_app.logger.error(f"No prayer schedule for zone '{zone_code}': {e}")
        abort(503, message="Could not fetch prayer times from the prayer time service.")

    now = now_in_app_timezone()
    data = serialize_schedule(schedule, time_format)
    if schedule.sunrise is None:
        data["sunrise"] = format_time(estimate_sunrise(schedule.fajr), time_format)

    data["date"] = daily_data.get("date") if daily_data and source != "default" else now.date().isoformat()
    data["zone"] = zone_code
    if coordinates:
        data["coordinates"] = coordinates
    data.update(describe_prayer_windows(schedule, now, time_format))

    return {"success": True, "data": data, "source": source}

@prayer_time_bp.route('/coordinates/<lat>/<lng>')
@prayer_time_bp.arguments(TimeFormatArgsSchema, location='query')
@prayer_time_bp.response(200, PrayerTimesResponseSchema, description="Prayer times for the zone containing the coordinates.")
@prayer_time_bp.alt_response(400, schema=MessageSchema, description="Invalid coordinates or outside the service area.")
@prayer_time_bp.alt_response(503, schema=MessageSchema, description="Prayer time service unavailable.")
def prayer_times_by_coordinates(args, lat, lng):
    """
    Get today's prayer times from precise coordinates.

    The coordinates are mapped to a JAKIM zone (bounding box first, nearest
    zone otherwise) and that zone's times are fetched from e-solat.
    """
    try:
        latitude = float(lat)
        longitude = float(lng)
    except ValueError:
        abort(400, message="Invalid coordinates. Latitude and longitude must be numbers.")

    if not is_within_service_area(latitude, longitude, current_app.config['SERVICE_AREA_BOUNDS']):
        abort(400, message="Invalid coordinates. Must be within Malaysia boundaries.")

    today = now_in_app_timezone().date()
    zone_code, daily_data = get_prayer_times_for_coords(latitude, longitude, today)

    return _build_prayer_times_response(
        zone_code,
        daily_data,
        _time_format(args),
        coordinates={"latitude": latitude, "longitude": longitude},
    )

@prayer_time_bp.route('/zones')
@prayer_time_bp.response(200, ZoneSchema(many=True), description="All known JAKIM zones.")
def list_zones():
    """List the JAKIM zones, in lookup order."""
    return [zone.to_dict() for zone in JAKIM_ZONES]

@prayer_time_bp.route('/next')
@prayer_time_bp.arguments(NextPrayerArgsSchema, location='query')
@prayer_time_bp.response(200, NextPrayerSchema, description="The next prayer for the supplied schedule.")
@prayer_time_bp.alt_response(400, schema=MessageSchema, description="A prayer time could not be parsed.")
def next_prayer_for_schedule(args):
    """
    Resolve the next prayer for a caller-supplied schedule.

    Times may be given in 12-hour ("1:15 PM") or 24-hour ("13:15") notation.
    `now` defaults to the current time in the app timezone.
    """
    try:
        schedule = build_schedule({key: args[key] for key in ("fajr", "dhuhr", "asr", "maghrib", "isha")})
    except InvalidTimeFormat as e:
        abort(400, message=str(e))

    now = to_app_timezone(args['now']) if args.get('now') else now_in_app_timezone()
    return prayer_window_to_dict(next_prayer(schedule, now), _time_format(args))

@prayer_time_bp.route('/<zone_code>')
@prayer_time_bp.arguments(TimeFormatArgsSchema, location='query')
@prayer_time_bp.response(200, PrayerTimesResponseSchema, description="Prayer times for the zone.")
@prayer_time_bp.alt_response(404, schema=MessageSchema, description="Unknown zone code.")
@prayer_time_bp.alt_response(503, schema=MessageSchema, description="Prayer time service unavailable.")
def prayer_times_by_zone(args, zone_code):
    """Get today's prayer times for a JAKIM zone code (e.g. WLY01)."""
    zone_code = zone_code.upper()
    if zone_code not in JAKIM_ZONES_BY_CODE:
        abort(404, message=f"Unknown zone code '{zone_code}'.")

    today = now_in_app_timezone().date()
    daily_data = get_daily_prayer_times(zone_code, today)
    return _build_prayer_times_response(zone_code, daily_data, _time_format(args))

def _legacy_prayer_times(zone_code):
    times = serialize_schedule(SAMPLE_SCHEDULE, "12h")
    return {
        "fajr": times["fajr"],
        "dhuhr": times["dhuhr"],
        "asr": times["asr"],
        "maghrib": times["maghrib"],
        "isha": times["isha"],
        "source": "JAKIM e-Solat",
        "zone": zone_code,
        "date": now_in_app_timezone().date().isoformat(),
    }

@legacy_prayer_time_bp.route('/api/prayer-times')
@legacy_prayer_time_bp.response(200, LegacyPrayerTimesSchema)
def legacy_prayer_times_default_zone():
    """Sample prayer times for the default zone (legacy)."""
    return _legacy_prayer_times(current_app.config.get('DEFAULT_ZONE', 'WLY01'))

@legacy_prayer_time_bp.route('/api/prayer-times/<zone_code>')
@legacy_prayer_time_bp.response(200, LegacyPrayerTimesSchema)
def legacy_prayer_times(zone_code):
    """Sample prayer times for a zone (legacy)."""
    return _legacy_prayer_times(zone_code)
