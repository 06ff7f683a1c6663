# muslimdaily/routes/practice_routes.py

from flask_smorest import Blueprint, abort

from ..schemas import (
    MessageSchema,
    ProgressSchema,
    TrackPracticeResponseSchema,
    TrackPracticeSchema,
    UntrackPracticeSchema,
    WeeklyProgressDaySchema,
)
from ..services import practice_service
from ..utils.time_utils import now_in_app_timezone

practice_bp = Blueprint(
    'Practices',
    __name__,
    url_prefix='/api',
    description="In-memory tracking of prayers and other daily practices."
)

@practice_bp.route('/practices/track', methods=['POST'])
@practice_bp.arguments(TrackPracticeSchema)
@practice_bp.response(200, TrackPracticeResponseSchema)
def track_practice(payload):
    """
    Track a completed practice.

    `practiceType` is a prayer ('fajr', 'dhuhr', ...) or any other practice
    such as 'quran' or 'dhikr'. The user is created on first use.
    """
    user, practice = practice_service.track_practice(
        payload['userId'],
        payload['practiceType'],
        payload.get('practiceData'),
        now_in_app_timezone(),
    )
    return {
        "success": True,
        "message": f"{practice.type} tracked successfully!",
        "streak": user.streak,
        "practice": practice.to_dict(),
    }

@practice_bp.route('/practices/untrack', methods=['POST'])
@practice_bp.arguments(UntrackPracticeSchema)
@practice_bp.response(200, MessageSchema)
@practice_bp.alt_response(404, schema=MessageSchema, description="Nothing of this type was tracked today.")
def untrack_practice(payload):
    """Unmark the most recent practice of a type tracked today."""
    removed = practice_service.untrack_practice(payload['userId'], payload['practiceType'], now_in_app_timezone())
    if removed is None:
        abort(404, message=f"No '{payload['practiceType']}' practice tracked today.")
    return {"message": f"{removed.type} unmarked successfully"}

@practice_bp.route('/users/<user_id>/progress')
@practice_bp.response(200, ProgressSchema)
def user_progress(user_id):
    """Get today's progress and the current streak for a user."""
    return practice_service.get_user_progress(user_id, now_in_app_timezone())

@practice_bp.route('/users/<user_id>/weekly')
@practice_bp.response(200, WeeklyProgressDaySchema(many=True))
def user_weekly_progress(user_id):
    """Get completed prayers per day for the last seven days."""
    return practice_service.get_weekly_progress(user_id, now_in_app_timezone())
