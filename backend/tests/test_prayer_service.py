# backend/tests/test_prayer_service.py

import datetime
import zoneinfo

import pytest

from muslimdaily.services.prayer_time.timing_calculator import DEFAULT_SCHEDULE, SAMPLE_SCHEDULE
from muslimdaily.services.prayer_time_service import (
    describe_prayer_windows,
    get_daily_prayer_times,
    get_prayer_times_for_coords,
    schedule_from_daily,
    serialize_schedule,
)
from muslimdaily.utils.errors import PrayerTimeSourceError

KL = zoneinfo.ZoneInfo("Asia/Kuala_Lumpur")


def test_get_prayer_times_for_coords_resolves_zone(mocker, app, esolat_daily_data):
    """Coordinates are mapped to a zone before the source is queried."""
    mock_fetch = mocker.patch(
        'muslimdaily.services.prayer_time_service.get_daily_prayer_times_from_api',
        return_value=esolat_daily_data
    )
    today = datetime.date(2025, 8, 14)

    with app.app_context():
        zone_code, daily = get_prayer_times_for_coords(2.2, 102.25, today)

    assert zone_code == "MLK01"
    assert daily == esolat_daily_data
    mock_fetch.assert_called_once_with("MLK01", today)


def test_get_daily_prayer_times_returns_none_on_failure(mocker, app):
    mocker.patch('muslimdaily.services.prayer_time_service.get_daily_prayer_times_from_api', return_value=None)
    with app.app_context():
        assert get_daily_prayer_times("WLY01", datetime.date(2025, 8, 14)) is None


def test_schedule_from_daily_uses_upstream_times(app, esolat_daily_data):
    with app.app_context():
        schedule, source = schedule_from_daily(esolat_daily_data)

    assert source == "jakim-official"
    assert schedule.fajr == datetime.time(5, 56)
    assert schedule.sunrise == datetime.time(7, 7)
    assert schedule.maghrib == datetime.time(19, 23)


@pytest.mark.parametrize("daily_data", [
    None,
    {},
    {"date": "14-Aug-2025", "zone": "WLY01", "timings": {}},
    {"date": "14-Aug-2025", "zone": "WLY01", "timings": {"Fajr": "not a time", "Dhuhr": "13:17:00"}},
])
def test_schedule_from_daily_falls_back_to_default(app, daily_data):
    with app.app_context():
        schedule, source = schedule_from_daily(daily_data)

    assert source == "default"
    assert schedule == DEFAULT_SCHEDULE


def test_schedule_from_daily_without_fallback_raises(app):
    app.config['PRAYER_TIMES_FALLBACK_ENABLED'] = False
    with app.app_context():
        with pytest.raises(PrayerTimeSourceError):
            schedule_from_daily(None)


def test_serialize_schedule_formats():
    assert serialize_schedule(SAMPLE_SCHEDULE) == {
        "fajr": "5:45 AM",
        "dhuhr": "1:15 PM",
        "asr": "4:30 PM",
        "maghrib": "7:05 PM",
        "isha": "8:20 PM",
        "sunrise": "N/A",
    }
    times_24h = serialize_schedule(DEFAULT_SCHEDULE, "24h")
    assert times_24h["fajr"] == "05:45"
    assert times_24h["sunrise"] == "07:05"


def test_describe_prayer_windows_after_isha():
    now = datetime.datetime(2025, 8, 14, 21, 0, tzinfo=KL)
    windows = describe_prayer_windows(SAMPLE_SCHEDULE, now)

    assert windows["currentPrayer"] == "Isha"
    assert windows["nextPrayer"] == {
        "name": "Fajr",
        "time": "5:45 AM",
        "isTomorrow": True,
        "at": "2025-08-15T05:45:00+08:00",
    }
