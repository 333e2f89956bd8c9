"""
Application settings read from the environment (.env supported)
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Snapshot of the environment at creation time"""

    def __init__(self):
        self.database_url = os.getenv("DATABASE_URL", "sqlite:///./cakeshop.db")
        self.persist_history = _as_bool(os.getenv("CAKESHOP_PERSIST_HISTORY", "true"))
        self.log_level = os.getenv("CAKESHOP_LOG_LEVEL", "INFO").upper()
        self.host = os.getenv("CAKESHOP_HOST", "0.0.0.0")
        self.port = int(os.getenv("CAKESHOP_PORT", "8000"))


def get_settings() -> Settings:
    return Settings()
