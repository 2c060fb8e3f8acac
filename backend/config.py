"""
Contacts backend configuration.
Single source of truth for environment and app settings.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CONTACTS_DB_PATH = Path("db") / "contacts.json"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def get_settings():
    """Return app settings (use as FastAPI Depends or call directly)."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    APP_TITLE: str = "Contacts API"
    APP_VERSION: str = "1.0.0"
    ALLOWED_ORIGINS: list[str]

    # Storage: one JSON array file, relative to the working directory unless absolute
    CONTACTS_DB_PATH: Path

    # Logging
    LOG_LEVEL: str = "INFO"

    def __init__(self):
        origins = os.environ.get("ALLOWED_ORIGINS", "http://localhost:3000")
        self.ALLOWED_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]
        db_path = (os.environ.get("CONTACTS_DB_PATH") or "").strip()
        self.CONTACTS_DB_PATH = Path(db_path) if db_path else DEFAULT_CONTACTS_DB_PATH
        level = (os.environ.get("LOG_LEVEL") or "INFO").strip().upper()
        self.LOG_LEVEL = level if level in LOG_LEVELS else "INFO"
