import datetime

import pytest
import requests

from muslimdaily.services.api_adapters.esolat_adapter import ESolatAdapter
from muslimdaily.services.prayer_time.api_adapter import (
    get_daily_prayer_times_from_api,
    get_selected_api_adapter,
)

TEST_DATE = datetime.date(2025, 8, 14)

ESOLAT_RESPONSE = {
    "prayerTime": [{
        "hijri": "1447-02-20",
        "date": "14-Aug-2025",
        "day": "Thursday",
        "imsak": "05:46:00",
        "fajr": "05:56:00",
        "syuruk": "07:07:00",
        "dhuhr": "13:17:00",
        "asr": "16:40:00",
        "maghrib": "19:23:00",
        "isha": "20:34:00",
    }],
    "status": "OK!",
    "serverTime": "2025-08-14 09:00:00",
    "periodType": "date",
    "lang": "ms_my",
    "zone": "WLY01",
}


@pytest.fixture
def adapter():
    return ESolatAdapter(base_url="https://esolat.test", timeout=5)


def _mock_response(mocker, payload=None, json_error=None):
    response = mocker.MagicMock()
    response.raise_for_status.return_value = None
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


def test_fetch_daily_timings_success(mocker, app, adapter):
    mock_get = mocker.patch('requests.get', return_value=_mock_response(mocker, ESOLAT_RESPONSE))

    with app.app_context():
        result = adapter.fetch_daily_timings("WLY01", TEST_DATE)

    mock_get.assert_called_once_with(
        "https://esolat.test/index.php",
        params={"r": "esolatApi/takwimsolat", "period": "date", "zone": "WLY01", "date": "2025-08-14"},
        timeout=5,
    )
    assert result["date"] == "14-Aug-2025"
    assert result["zone"] == "WLY01"
    assert result["timings"] == {
        "Imsak": "05:46:00",
        "Fajr": "05:56:00",
        "Sunrise": "07:07:00",
        "Dhuhr": "13:17:00",
        "Asr": "16:40:00",
        "Maghrib": "19:23:00",
        "Isha": "20:34:00",
    }


@pytest.mark.parametrize("error", [
    requests.exceptions.Timeout("timed out"),
    requests.exceptions.ConnectionError("no route to host"),
])
def test_fetch_daily_timings_network_errors(mocker, app, adapter, error):
    mocker.patch('requests.get', side_effect=error)
    with app.app_context():
        assert adapter.fetch_daily_timings("WLY01", TEST_DATE) is None


def test_fetch_daily_timings_http_error(mocker, app, adapter):
    response = _mock_response(mocker, {})
    response.raise_for_status.side_effect = requests.exceptions.HTTPError("500 Server Error")
    mocker.patch('requests.get', return_value=response)
    with app.app_context():
        assert adapter.fetch_daily_timings("WLY01", TEST_DATE) is None


def test_fetch_daily_timings_invalid_json(mocker, app, adapter):
    mocker.patch('requests.get', return_value=_mock_response(mocker, json_error=ValueError("Expecting value")))
    with app.app_context():
        assert adapter.fetch_daily_timings("WLY01", TEST_DATE) is None


def test_fetch_daily_timings_empty_prayer_time(mocker, app, adapter):
    payload = {"prayerTime": [], "status": "NO_RECORD!", "zone": "XXX99"}
    mocker.patch('requests.get', return_value=_mock_response(mocker, payload))
    with app.app_context():
        assert adapter.fetch_daily_timings("XXX99", TEST_DATE) is None


def test_selected_adapter_follows_config(app):
    with app.app_context():
        adapter = get_selected_api_adapter()
        assert isinstance(adapter, ESolatAdapter)
        assert adapter.base_url == "https://esolat.test"

        original = app.config['PRAYER_API_ADAPTER']
        app.config['PRAYER_API_ADAPTER'] = "NoSuchAdapter"
        try:
            assert get_selected_api_adapter() is None
            assert get_daily_prayer_times_from_api("WLY01", TEST_DATE) is None
        finally:
            app.config['PRAYER_API_ADAPTER'] = original
