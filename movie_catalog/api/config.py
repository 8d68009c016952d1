"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path


def get_database_url() -> str:
    """Get SQLAlchemy database URL from env or default SQLite file."""
    return os.getenv("DATABASE_URL", "") or "sqlite:///" + str(
        Path(__file__).resolve().parents[2] / "data" / "catalog.db"
    )


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get log file name; None logs to console only."""
    return os.getenv("LOG_FILE") or None


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))


def get_suggestion_api_url() -> str:
    """Get base URL of the chat completion API used for suggestions."""
    return os.getenv("SUGGESTION_API_URL", "https://api.openai.com/v1")


def get_suggestion_api_key() -> str | None:
    """Get API key for suggestions; None disables them."""
    return os.getenv("SUGGESTION_API_KEY") or None


def get_suggestion_model() -> str:
    """Get model name for suggestions."""
    return os.getenv("SUGGESTION_MODEL", "gpt-4o-mini")


def get_suggestion_timeout() -> float:
    """Get suggestion request timeout in seconds."""
    return float(os.getenv("SUGGESTION_TIMEOUT", "30"))
