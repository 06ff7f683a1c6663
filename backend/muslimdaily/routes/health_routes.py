# muslimdaily/routes/health_routes.py

from flask import current_app
from flask_smorest import Blueprint
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from ..extensions import practice_store
from ..utils.time_utils import utc_timestamp

health_bp = Blueprint(
    'Health',
    __name__,
    url_prefix='/api',
    description="Health monitoring endpoints for uptime checks."
)

@health_bp.route('/metrics')
def metrics():
    return generate_latest(), 200, {'Content-Type': CONTENT_TYPE_LATEST}

@health_bp.route('/health1')
def health_basic():
    """Basic liveness check."""
    return {
        "status": "healthy",
        "service": current_app.config['SERVICE_NAME'],
        "timestamp": utc_timestamp(),
        "version": current_app.config['SERVICE_VERSION'],
        "environment": current_app.config.get('FLASK_ENV', 'development'),
        "storage": "in-memory",
    }

@health_bp.route('/health2')
def health_runtime():
    """Runtime check with uptime and store size."""
    return {
        "status": "healthy",
        "uptime": f"{practice_store.uptime_seconds} seconds",
        "timestamp": utc_timestamp(),
        "users": practice_store.user_count,
        "practices": practice_store.practice_count,
    }

@health_bp.route('/health3')
def health_detailed():
    """Detailed stats."""
    return {
        "status": "healthy",
        "stats": {
            "totalUsers": practice_store.user_count,
            "totalPractices": practice_store.practice_count,
            "serverUptime": f"{practice_store.uptime_seconds} seconds",
        },
        "timestamp": utc_timestamp(),
        "service": f"{current_app.config['SERVICE_NAME']} - In Memory Edition",
    }

@health_bp.route('/warmup')
def warmup():
    """Touches the store the way a real request would, so cold starts happen here."""
    return {
        "status": "warmed up",
        "users": practice_store.user_count,
        "practices": practice_store.practice_count,
        "timestamp": utc_timestamp(),
        "message": "Muslim Daily backend is ready to handle requests",
    }

@health_bp.route('/ping')
def ping():
    return {
        "pong": True,
        "timestamp": utc_timestamp(),
        "service": current_app.config['SERVICE_NAME'],
        "version": current_app.config['SERVICE_VERSION'],
        "message": "Alhamdulillah! Serving the Muslim community for free!",
    }
