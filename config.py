"""
Configuration module for the reference application and the E2E suite.

This module defines configuration classes for the reference Rooming List
application (development, testing, production) and for the browser
suite that drives it. Values are loaded from environment variables with
sensible defaults.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Base configuration with default settings."""

    SECRET_KEY: str = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-production")
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    # Default database location
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'instance' / 'rooming_lists.db'}"
    )

    # Load the demo events on startup when the database is empty
    SEED_DEMO_DATA: bool = os.environ.get("SEED_DEMO_DATA", "1") == "1"


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG: bool = True
    TESTING: bool = True

    # In-memory database shared across threads so the live server
    # thread and the test thread see the same rows
    SQLALCHEMY_DATABASE_URI: str = os.environ.get("TEST_DATABASE_URL", "sqlite:///:memory:")
    SQLALCHEMY_ENGINE_OPTIONS: dict = {
        "connect_args": {"check_same_thread": False},
    }

    SEED_DEMO_DATA: bool = False


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False


class E2EConfig:
    """
    Settings for the browser suite.

    TEST_BASE_URL points the suite at an already running deployment;
    without it the reference application is started in-process.
    """

    BASE_URL: str | None = os.environ.get("TEST_BASE_URL")
    LIVE_SERVER_HOST: str = os.environ.get("E2E_HOST", "127.0.0.1")
    LIVE_SERVER_PORT: int = int(os.environ.get("E2E_PORT", "5001"))

    # Playwright timeouts (milliseconds)
    DEFAULT_TIMEOUT_MS: int = int(os.environ.get("E2E_DEFAULT_TIMEOUT_MS", "10000"))
    NAVIGATION_TIMEOUT_MS: int = int(os.environ.get("E2E_NAVIGATION_TIMEOUT_MS", "30000"))

    # Condition waits (seconds)
    SETTLE_TIMEOUT: float = float(os.environ.get("E2E_SETTLE_TIMEOUT", "5"))
    POLL_INTERVAL: float = float(os.environ.get("E2E_POLL_INTERVAL", "0.1"))

    # Upper bound on pages captured while walking one carousel
    MAX_CAROUSEL_PAGES: int = int(os.environ.get("E2E_MAX_CAROUSEL_PAGES", "50"))

    # Visual regression
    BASELINE_DIR: Path = Path(
        os.environ.get("E2E_BASELINE_DIR", BASE_DIR / "tests" / "e2e" / "baselines")
    )
    UPDATE_BASELINES: bool = os.environ.get("E2E_UPDATE_BASELINES", "0") == "1"
    # Fraction of pixels allowed to differ from the baseline
    VISUAL_TOLERANCE: float = float(os.environ.get("E2E_VISUAL_TOLERANCE", "0.001"))

    HEADED: bool = os.environ.get("HEADED", "0") == "1"
    SLOW_MO: int = int(os.environ.get("SLOW_MO", "0"))


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, production).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
