"""
Application factory for the Wellness Tracker.

This module provides a function to create and configure the Flask
application. The JWT extension is initialised here, the in-memory
store is built and attached to the app, and the blueprints for the
different parts of the API are registered inside the factory to allow
for modular development and unit testing.

Environment variables control the secret key, the environment name
and whether demo data is loaded. In production set ``APP_ENV`` to
``production`` and provide ``JWT_SECRET_KEY``. A default configuration
is provided for development, which seeds a demo user.
"""

from __future__ import annotations

import logging
import os
from datetime import timedelta

from flask import Flask
from flask_jwt_extended import JWTManager

from .store import EXTENSION_KEY, WellnessStore

# instantiate extensions without binding them to an app yet.  They will
# be bound in create_app().
jwt = JWTManager()

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def create_app(test_config: dict | None = None, store: WellnessStore | None = None) -> Flask:
    """Create and configure a Flask application.

    Parameters
    ----------
    test_config: dict | None, optional
        Optional configuration overrides used when running tests.
    store: WellnessStore | None, optional
        Store to serve from. A fresh, empty store is created when
        omitted.

    Returns
    -------
    Flask
        A configured Flask application instance.
    """
    app = Flask(__name__)

    app_env = os.environ.get("APP_ENV", "development")
    # Default configuration. Override using environment variables or
    # by passing a ``test_config`` mapping.
    app.config.update(
        APP_ENV=app_env,
        JWT_SECRET_KEY=os.environ.get("JWT_SECRET_KEY", "please-change-this-secret-key"),
        JWT_ACCESS_TOKEN_EXPIRES=timedelta(days=1),
        SEED_DEMO_DATA=_env_flag("SEED_DEMO_DATA", app_env != "production"),
        LOG_LEVEL=os.environ.get("LOG_LEVEL", "INFO"),
    )

    if test_config:
        app.config.update(test_config)

    logging.getLogger("wellness_tracker").setLevel(app.config["LOG_LEVEL"])

    jwt.init_app(app)

    # One store per application; handlers reach it through get_store()
    store = store if store is not None else WellnessStore()
    app.extensions[EXTENSION_KEY] = store
    if app.config["SEED_DEMO_DATA"]:
        from .seed import seed_demo_data
        seed_demo_data(store)

    # Register custom error handlers
    from .errors import register_error_handlers
    register_error_handlers(app)

    # Register blueprints. Importing here avoids circular imports.
    from .routes.users import users_bp
    from .routes.habits import habits_bp
    from .routes.moods import moods_bp
    from .routes.goals import goals_bp
    from .routes.reminders import reminders_bp
    from .routes.stats import stats_bp

    app.register_blueprint(users_bp, url_prefix="/api")
    app.register_blueprint(habits_bp, url_prefix="/api")
    app.register_blueprint(moods_bp, url_prefix="/api")
    app.register_blueprint(goals_bp, url_prefix="/api")
    app.register_blueprint(reminders_bp, url_prefix="/api")
    app.register_blueprint(stats_bp, url_prefix="/api")

    # Provide a simple health check route
    @app.route("/api/health")
    def health_check() -> dict[str, str]:
        """Return a simple health check response.

        This endpoint can be used by deployment platforms to verify
        that the application has started correctly.
        """
        return {"status": "ok"}

    logger.info(f"Wellness Tracker created ({app_env})")
    return app
