import pytest
from freezegun import freeze_time

from muslimdaily.extensions import practice_store

def track(client, user_id, practice_type, data=None):
    payload = {"userId": user_id, "practiceType": practice_type}
    if data is not None:
        payload["practiceData"] = data
    return client.post('/api/practices/track', json=payload)

def test_track_practice_creates_user(test_client):
    with freeze_time("2025-08-14 02:00:00"):  # 10:00 AM in Kuala Lumpur
        response = track(test_client, "42", "fajr")

    assert response.status_code == 200
    json_data = response.get_json()
    assert json_data['success'] is True
    assert json_data['message'] == "fajr tracked successfully!"
    assert json_data['streak'] == 1
    assert json_data['practice']['type'] == "fajr"
    assert json_data['practice']['timestamp'] == "2025-08-14T10:00:00+08:00"

    user = practice_store.users["42"]
    assert user.name == "User42"
    assert user.zone == "WLY01"
    assert practice_store.practice_count == 1

def test_track_practice_keeps_practice_data(test_client):
    with freeze_time("2025-08-14 02:00:00"):
        response = track(test_client, "7", "quran", {"pages": 4, "surah": "Al-Kahf"})

    assert response.get_json()['practice']['data'] == {"pages": 4, "surah": "Al-Kahf"}

def test_streak_grows_on_consecutive_days_and_resets_after_gap(test_client):
    with freeze_time("2025-08-14 02:00:00") as frozen:
        assert track(test_client, "1", "fajr").get_json()['streak'] == 1
        # More practices on the same day do not change the streak
        assert track(test_client, "1", "dhuhr").get_json()['streak'] == 1

        frozen.move_to("2025-08-15 02:00:00")
        assert track(test_client, "1", "fajr").get_json()['streak'] == 2

        frozen.move_to("2025-08-16 02:00:00")
        assert track(test_client, "1", "dhikr").get_json()['streak'] == 3

        # Skipping the 17th breaks the streak
        frozen.move_to("2025-08-18 02:00:00")
        assert track(test_client, "1", "fajr").get_json()['streak'] == 1

def test_streak_follows_local_calendar_day(test_client):
    # 23:30 UTC on the 14th is already 7:30 AM on the 15th in Kuala Lumpur
    with freeze_time("2025-08-14 02:00:00") as frozen:
        track(test_client, "1", "fajr")
        frozen.move_to("2025-08-14 23:30:00")
        assert track(test_client, "1", "fajr").get_json()['streak'] == 2

@pytest.mark.parametrize("payload", [
    {"practiceType": "fajr"},
    {"userId": "1"},
    {"userId": "", "practiceType": "fajr"},
    {"userId": "1", "practiceType": "fajr", "extra": True},
])
def test_track_practice_validation(test_client, payload):
    response = test_client.post('/api/practices/track', json=payload)
    assert response.status_code == 422

def test_untrack_practice(test_client):
    with freeze_time("2025-08-14 02:00:00"):
        track(test_client, "1", "fajr")
        track(test_client, "1", "dhuhr")

        response = test_client.post('/api/practices/untrack', json={"userId": "1", "practiceType": "fajr"})
        assert response.status_code == 200
        assert response.get_json()['message'] == "fajr unmarked successfully"
        assert [p.type for p in practice_store.users["1"].practices] == ["dhuhr"]

        response = test_client.post('/api/practices/untrack', json={"userId": "1", "practiceType": "fajr"})
        assert response.status_code == 404

def test_untrack_only_touches_today(test_client):
    with freeze_time("2025-08-14 02:00:00") as frozen:
        track(test_client, "1", "fajr")
        frozen.move_to("2025-08-15 02:00:00")
        response = test_client.post('/api/practices/untrack', json={"userId": "1", "practiceType": "fajr"})

    assert response.status_code == 404
    assert practice_store.practice_count == 1

def test_untrack_unknown_user(test_client):
    response = test_client.post('/api/practices/untrack', json={"userId": "ghost", "practiceType": "fajr"})
    assert response.status_code == 404

def test_user_progress(test_client):
    with freeze_time("2025-08-14 02:00:00") as frozen:
        track(test_client, "1", "isha")
        frozen.move_to("2025-08-15 02:00:00")
        track(test_client, "1", "fajr")
        track(test_client, "1", "fajr")
        track(test_client, "1", "dhuhr")
        track(test_client, "1", "quran")

        response = test_client.get('/api/users/1/progress')

    assert response.status_code == 200
    json_data = response.get_json()
    assert json_data['streak'] == 2
    assert json_data['user'] == {"id": "1", "streak": 2, "totalPractices": 5}

    today = json_data['today']
    assert today['date'] == "2025-08-15"
    assert len(today['practices']) == 4
    assert today['counts'] == {"fajr": 2, "dhuhr": 1, "quran": 1}
    # Prayers are counted once each; other practices do not count
    assert today['prayersCompleted'] == 2

def test_user_progress_for_new_user(test_client):
    with freeze_time("2025-08-14 02:00:00"):
        response = test_client.get('/api/users/new-user/progress')

    json_data = response.get_json()
    assert json_data['streak'] == 0
    assert json_data['today']['practices'] == []
    assert json_data['today']['prayersCompleted'] == 0
    assert "new-user" in practice_store.users

def test_weekly_progress(test_client):
    with freeze_time("2025-08-12 02:00:00") as frozen:
        track(test_client, "1", "fajr")
        track(test_client, "1", "asr")
        frozen.move_to("2025-08-14 02:00:00")
        for prayer in ("fajr", "dhuhr", "asr", "maghrib", "isha", "dhikr"):
            track(test_client, "1", prayer)

        response = test_client.get('/api/users/1/weekly')

    assert response.status_code == 200
    week = response.get_json()
    assert [day['date'] for day in week] == [
        "2025-08-08", "2025-08-09", "2025-08-10", "2025-08-11", "2025-08-12", "2025-08-13", "2025-08-14",
    ]
    assert week[-1] == {"date": "2025-08-14", "day": "Thu", "completed": 5, "total": 5}
    assert week[4]['completed'] == 2
    assert all(day['completed'] == 0 for day in week[:4])
    assert week[5]['completed'] == 0
