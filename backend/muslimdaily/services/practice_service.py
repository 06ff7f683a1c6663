# This module handles in-memory practice tracking: recording practices,
# maintaining day streaks and summarizing progress.
import datetime
import uuid
from collections import Counter
from typing import Any, Dict, List, Optional, Tuple

from flask import current_app

from ..extensions import practice_store
from ..metrics import PRACTICES_TRACKED_TOTAL
from ..models import PracticeRecord, PracticeUser
from ..utils.time_utils import last_n_days, to_app_timezone, yesterday_of
from .helpers.constants import PRAYER_TYPES

def get_or_create_user(user_id: str, now: datetime.datetime) -> PracticeUser:
    """Returns the practice user, creating one with default settings on first use."""
    with practice_store.lock:
        user = practice_store.users.get(user_id)
        if user is None:
            user = PracticeUser(
                id=user_id,
                name=f"User{user_id}",
                location=current_app.config.get('DEFAULT_LOCATION_NAME', 'Kuala Lumpur'),
                zone=current_app.config.get('DEFAULT_ZONE', 'WLY01'),
                created_at=now,
            )
            practice_store.users[user_id] = user
            current_app.logger.info(f"Created practice user '{user_id}'.")
        return user

def _update_streak(user: PracticeUser, today: datetime.date) -> None:
    """A practice on a new day extends the streak if yesterday was active, otherwise restarts it."""
    if user.last_practice_date == today:
        return
    if user.last_practice_date == yesterday_of(today):
        user.streak += 1
    else:
        user.streak = 1
    user.last_practice_date = today

def track_practice(user_id: str, practice_type: str, practice_data: Optional[Dict[str, Any]], now: datetime.datetime) -> Tuple[PracticeUser, PracticeRecord]:
    """Records a practice (a prayer, Quran reading, dhikr, ...) for the user."""
    now = to_app_timezone(now)
    user = get_or_create_user(user_id, now)

    practice = PracticeRecord(id=uuid.uuid4().hex, type=practice_type, timestamp=now, data=practice_data)
    with practice_store.lock:
        user.practices.append(practice)
        _update_streak(user, now.date())

    PRACTICES_TRACKED_TOTAL.labels(practice_type=practice_type).inc()
    current_app.logger.info(f"Tracked '{practice_type}' for user '{user_id}'. Streak: {user.streak}")
    return user, practice

def untrack_practice(user_id: str, practice_type: str, now: datetime.datetime) -> Optional[PracticeRecord]:
    """
    Removes the most recent practice of `practice_type` recorded today.
    Returns the removed record, or None if there was nothing to remove.
    """
    now = to_app_timezone(now)
    today = now.date()
    with practice_store.lock:
        user = practice_store.users.get(user_id)
        if user is None:
            return None
        for index in range(len(user.practices) - 1, -1, -1):
            practice = user.practices[index]
            if practice.type == practice_type and to_app_timezone(practice.timestamp).date() == today:
                del user.practices[index]
                current_app.logger.info(f"Removed '{practice_type}' for user '{user_id}'.")
                return practice
    return None

def _practices_on(user: PracticeUser, day: datetime.date) -> List[PracticeRecord]:
    return [p for p in user.practices if to_app_timezone(p.timestamp).date() == day]

def _prayers_completed(practices: List[PracticeRecord]) -> int:
    return len({p.type for p in practices if p.type in PRAYER_TYPES})

def get_user_progress(user_id: str, now: datetime.datetime) -> Dict[str, Any]:
    """Summarizes today's practices and the overall streak for a user."""
    now = to_app_timezone(now)
    today = now.date()
    user = get_or_create_user(user_id, now)

    with practice_store.lock:
        today_practices = _practices_on(user, today)
        total = len(user.practices)

    return {
        "user": {
            "id": user.id,
            "streak": user.streak,
            "totalPractices": total,
        },
        "today": {
            "date": today.isoformat(),
            "practices": [p.to_dict() for p in today_practices],
            "counts": dict(Counter(p.type for p in today_practices)),
            "prayersCompleted": _prayers_completed(today_practices),
        },
        "streak": user.streak,
    }

def get_weekly_progress(user_id: str, now: datetime.datetime) -> List[Dict[str, Any]]:
    """Completed prayers per day for the last seven days, oldest first."""
    now = to_app_timezone(now)
    user = get_or_create_user(user_id, now)

    week = []
    with practice_store.lock:
        for day in last_n_days(now.date(), 7):
            week.append({
                "date": day.isoformat(),
                "day": day.strftime("%a"),
                "completed": _prayers_completed(_practices_on(user, day)),
                "total": len(PRAYER_TYPES),
            })
    return week
