import sentry_sdk
from sentry_sdk.integrations.flask import FlaskIntegration

# Import extensions from the central extensions file
from .extensions import limiter, practice_store
import logging
from flask import Flask
from flask_cors import CORS
from flask_smorest import Api

# Declare extensions that are not in the extensions file
cors = CORS()
api = Api() # Initialize Flask-Smorest API

def create_app(config_name):
    """
    Flask Application Factory function.
    """
    app = Flask(__name__,
                instance_relative_config=False)

    # 1. Load Config
    from .config import config_by_name
    config_obj = config_by_name.get(config_name, config_by_name['default'])
    app.config.from_object(config_obj)
    app.logger.info(f"App configured with: {config_obj.__name__}")

    # Flask-Smorest API documentation configuration
    app.config["API_TITLE"] = "Muslim Daily API"
    app.config["API_VERSION"] = "v1"
    app.config["OPENAPI_VERSION"] = "3.0.2"
    app.config["OPENAPI_URL_PREFIX"] = "/api/docs"
    app.config["OPENAPI_SWAGGER_UI_PATH"] = "/swagger-ui"
    app.config["OPENAPI_SWAGGER_UI_URL"] = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/"

    # 2. Sentry SDK initialization - for error and performance tracking
    if app.config.get('SENTRY_DSN'):
        sentry_sdk.init(
            dsn=app.config['SENTRY_DSN'],
            integrations=[FlaskIntegration()],
            traces_sample_rate=1.0
        )
        app.logger.info("Sentry initialized for error tracking.")

    # 3. Initialize Extensions
    cors.init_app(app, resources={r"/api/*": {"origins": app.config.get('CORS_ORIGINS', '*')}})
    practice_store.init_app(app)

    # 4. Initialize Rate Limiter
    limiter.init_app(app)

    # 5. Initialize Flask-Smorest API
    api.init_app(app)

    # 6. Register Blueprints in app context
    with app.app_context():
        from .routes.main_routes import main_bp
        from .routes.health_routes import health_bp
        from .routes.prayer_time_routes import prayer_time_bp, legacy_prayer_time_bp
        from .routes.qibla_routes import qibla_bp
        from .routes.practice_routes import practice_bp

        # Uptime monitors poll the health endpoints frequently
        limiter.exempt(main_bp)
        limiter.exempt(health_bp)
        # Compass clients post a reading on every orientation event
        limiter.exempt(qibla_bp)

        # Register blueprints with Flask-Smorest API
        api.register_blueprint(main_bp)
        api.register_blueprint(health_bp)
        api.register_blueprint(prayer_time_bp)
        api.register_blueprint(legacy_prayer_time_bp)
        api.register_blueprint(qibla_bp)
        api.register_blueprint(practice_bp)

        # 7. Set up Logging
        log_level_str = app.config.get('LOG_LEVEL', 'INFO').upper()
        log_level = getattr(logging, log_level_str, logging.INFO)
        app.logger.setLevel(log_level)
        logging.getLogger(__name__).setLevel(log_level)

        app.logger.info(f"Application initialized with environment: {app.config.get('FLASK_ENV')}, Debug: {app.config.get('DEBUG')}")

    # 8. Finally, return the app
    return app
