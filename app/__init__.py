"""
Rooming List reference application factory.

Builds the small Flask application the browser suite runs against when
TEST_BASE_URL is not set. It serves the events page and the JSON
listing the page loads, and seeds demo events into an empty database.

The application registers two blueprints:
  * **api_bp** -- JSON endpoints mounted at ``/api``
  * **views_bp** -- the events page at ``/``
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Flask, jsonify, request
from flask_sqlalchemy import SQLAlchemy

from config import get_config

db = SQLAlchemy()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _ensure_sqlite_db_parent_exists(database_uri: str) -> None:
    """Create parent directories for file-based SQLite URIs when missing."""
    sqlite_prefix = "sqlite:///"
    if not database_uri.startswith(sqlite_prefix):
        return

    sqlite_path = database_uri[len(sqlite_prefix):].split("?", 1)[0]
    if sqlite_path == ":memory:":
        return

    Path(sqlite_path).parent.mkdir(parents=True, exist_ok=True)


def _register_error_handlers(app: Flask) -> None:
    """Answer unknown API URLs with JSON; pages keep Flask's HTML 404."""

    @app.errorhandler(404)
    def not_found(error):
        if request.path.startswith("/api/"):
            return jsonify({"error": "Not found"}), 404
        return error


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the rooming list application.

    Args:
        config_name: Configuration environment name
            (``"development"``, ``"testing"``, ``"production"``). When
            None, read from the FLASK_ENV environment variable.

    Returns:
        Configured Flask application with tables created and, when
        SEED_DEMO_DATA is set, demo events loaded.
    """
    app = Flask(__name__)
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    logger.info(f"Creating rooming list app with config: {config_class.__name__}")

    _ensure_sqlite_db_parent_exists(app.config.get("SQLALCHEMY_DATABASE_URI", ""))
    db.init_app(app)

    from app.routes.api import api_bp
    from app.routes.views import views_bp

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(views_bp)
    _register_error_handlers(app)

    with app.app_context():
        db.create_all()
        logger.info("Rooming list tables created")

        if app.config.get("SEED_DEMO_DATA"):
            from app.seed import seed_demo_data
            seed_demo_data()

    return app
