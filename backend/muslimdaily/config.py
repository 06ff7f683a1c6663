import os
from dotenv import load_dotenv

# Load .env file
dotenv_path = os.path.join(os.path.dirname(os.path.dirname(__file__)), '.env')
if os.path.exists(dotenv_path):
    load_dotenv(dotenv_path)
else:
    print("Warning: .env file not found. Using defaults or environment variables.")

def _env_bool(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')

class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'a_default_fallback_secret_key_for_development_only'
    LOG_LEVEL = "INFO"

    SERVICE_NAME = "Muslim Daily API"
    SERVICE_VERSION = "1.0.0"

    # Sentry Configuration
    SENTRY_DSN = os.environ.get('SENTRY_DSN')

    # CORS Configuration
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')

    # Prayer Time API Configuration
    PRAYER_API_ADAPTER = os.environ.get('PRAYER_API_ADAPTER') or "ESolatAdapter"
    PRAYER_API_BASE_URL = os.environ.get('PRAYER_API_BASE_URL') or "https://www.e-solat.gov.my"
    PRAYER_API_TIMEOUT = int(os.environ.get('PRAYER_API_TIMEOUT', 10))

    # When the prayer time API fails, serve the built-in default schedule instead of an error.
    PRAYER_TIMES_FALLBACK_ENABLED = _env_bool('PRAYER_TIMES_FALLBACK_ENABLED', True)

    # Coordinates outside this box are rejected by the coordinate lookup (Malaysia).
    SERVICE_AREA_BOUNDS = {
        'lat_min': float(os.environ.get('SERVICE_AREA_LAT_MIN', 0.5)),
        'lat_max': float(os.environ.get('SERVICE_AREA_LAT_MAX', 7.5)),
        'lon_min': float(os.environ.get('SERVICE_AREA_LON_MIN', 99.0)),
        'lon_max': float(os.environ.get('SERVICE_AREA_LON_MAX', 120.0)),
    }

    # Default Location, Zone and Display
    DEFAULT_ZONE = os.environ.get('DEFAULT_ZONE', "WLY01")
    DEFAULT_LOCATION_NAME = os.environ.get('DEFAULT_LOCATION_NAME', "Kuala Lumpur")
    DEFAULT_LATITUDE = os.environ.get('DEFAULT_LATITUDE', "3.1390")
    DEFAULT_LONGITUDE = os.environ.get('DEFAULT_LONGITUDE', "101.6869")
    DEFAULT_TIME_FORMAT = os.environ.get('DEFAULT_TIME_FORMAT', "12h")
    TIMEZONE = os.environ.get('TIMEZONE', "Asia/Kuala_Lumpur")

    # Compass smoothing factor applied to device heading readings.
    COMPASS_SMOOTHING = float(os.environ.get('COMPASS_SMOOTHING', 0.2))

class DevelopmentConfig(Config):
    FLASK_ENV = 'development'
    DEBUG = True
    LOG_LEVEL = "DEBUG"

class ProductionConfig(Config):
    FLASK_ENV = 'production'
    DEBUG = False

class TestingConfig(Config):
    FLASK_ENV = 'testing'
    TESTING = True
    RATELIMIT_ENABLED = False # Disable rate limiting for tests
    SECRET_KEY = 'test-secret-key'
    PRAYER_API_BASE_URL = "https://esolat.test"
    PRAYER_TIMES_FALLBACK_ENABLED = True

config_by_name = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
