import datetime
import zoneinfo

from flask import current_app

def get_app_timezone():
    """
    Returns the ZoneInfo configured for the app (Asia/Kuala_Lumpur by default).
    Falls back to UTC if the configured name is unknown.
    """
    tz_name = current_app.config.get('TIMEZONE', 'Asia/Kuala_Lumpur')
    try:
        return zoneinfo.ZoneInfo(tz_name)
    except zoneinfo.ZoneInfoNotFoundError:
        current_app.logger.warning(f"Unknown timezone '{tz_name}' configured. Using UTC.")
        return zoneinfo.ZoneInfo('UTC')

def now_in_app_timezone():
    """The current instant, expressed in the app's timezone."""
    return datetime.datetime.now(get_app_timezone())

def to_app_timezone(dt):
    """
    Converts a datetime into the app's timezone.
    Naive datetimes are taken to already be in app-local time.
    """
    tz = get_app_timezone()
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)

def yesterday_of(date_obj):
    return date_obj - datetime.timedelta(days=1)

def last_n_days(today_date, n=7):
    """
    Returns the last `n` dates ending with `today_date`, oldest first.
    """
    return [today_date - datetime.timedelta(days=offset) for offset in range(n - 1, -1, -1)]

def utc_timestamp():
    """ISO-8601 timestamp of the current instant in UTC, for health and status responses."""
    return datetime.datetime.now(datetime.timezone.utc).isoformat()
