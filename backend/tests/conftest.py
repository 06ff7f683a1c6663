# backend/tests/conftest.py

import pytest
from muslimdaily import create_app
from muslimdaily.extensions import practice_store

@pytest.fixture(scope='session')
def app():
    """Session-wide application for testing."""
    app = create_app('testing')
    return app

@pytest.fixture(scope='function')
def test_client(app):
    """A test client for the app with an empty practice store."""
    practice_store.clear()
    yield app.test_client()
    practice_store.clear()

@pytest.fixture(autouse=True)
def restore_fallback_setting(app):
    """Tests may toggle the fallback flag; put it back afterwards."""
    original = app.config['PRAYER_TIMES_FALLBACK_ENABLED']
    yield
    app.config['PRAYER_TIMES_FALLBACK_ENABLED'] = original

@pytest.fixture
def esolat_daily_data():
    """Standardized adapter output for one day in WLY01."""
    return {
        "date": "14-Aug-2025",
        "zone": "WLY01",
        "timings": {
            "Imsak": "05:46:00",
            "Fajr": "05:56:00",
            "Sunrise": "07:07:00",
            "Dhuhr": "13:17:00",
            "Asr": "16:40:00",
            "Maghrib": "19:23:00",
            "Isha": "20:34:00",
        },
    }
