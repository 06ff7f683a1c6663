# muslimdaily/routes/main_routes.py

from flask import current_app
from flask_smorest import Blueprint

from ..extensions import practice_store
from ..utils.time_utils import utc_timestamp

main_bp = Blueprint('Main', __name__, description="Service banner and basic health check.")

@main_bp.route('/')
def index():
    """
    Main endpoint for the API.
    """
    return {
        "message": "MuslimDaily API - Free Muslim Practice Companion",
        "version": current_app.config['SERVICE_VERSION'],
        "features": [
            "Prayer time tracking",
            "Qibla direction",
            "Quran reading tracker",
            "Dhikr counter",
            "Progress analytics",
        ],
        "stats": {
            "totalUsers": practice_store.user_count,
            "totalPractices": practice_store.practice_count,
            "serverTime": utc_timestamp(),
        },
        "healthEndpoints": [
            "/api/health1",
            "/api/health2",
            "/api/health3",
            "/api/warmup",
            "/api/ping",
        ],
    }

@main_bp.route('/health')
def health():
    """Basic health check."""
    return {
        "success": True,
        "message": f"{current_app.config['SERVICE_NAME']} is running!",
        "timestamp": utc_timestamp(),
        "usersCount": practice_store.user_count,
        "practicesCount": practice_store.practice_count,
    }
