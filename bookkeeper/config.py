"""
Application configuration.

All configuration is loaded from environment variables.
Never hardcode connection strings or file locations in code.
"""

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

# Load .env file into environment variables
load_dotenv()

DEFAULT_CHART_PATH = Path(__file__).parent / "data" / "chart_of_accounts.json"


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Bookkeeper"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # Database
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "sqlite:///./bookkeeper.db"
    )

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Chart of accounts — read once at start-up
    CHART_OF_ACCOUNTS_PATH: str = os.getenv(
        "CHART_OF_ACCOUNTS_PATH", str(DEFAULT_CHART_PATH)
    )

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")


@lru_cache()
def get_settings() -> Settings:
    """
    Return cached settings instance.

    The Settings object is created once and reused for all
    subsequent calls.
    """
    return Settings()
