# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — all env-driven, zero hardcode.
Single source of truth for every tunable parameter.
"""

import os


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "groups-service")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "8005"))

    DEFAULT_HISTORY_LIMIT: int = int(os.getenv("DEFAULT_HISTORY_LIMIT", "100"))
    MAX_HISTORY_SIZE: int = int(os.getenv("MAX_HISTORY_SIZE", "10000"))

    # Session user, used when a request carries no X-User-* headers
    SESSION_USER_ID: str = os.getenv("SESSION_USER_ID", "admin1")
    SESSION_USER_NAME: str = os.getenv("SESSION_USER_NAME", "Admin User")
    SESSION_USER_EMAIL: str = os.getenv("SESSION_USER_EMAIL", "admin@example.com")
    SESSION_USER_ROLE: str = os.getenv("SESSION_USER_ROLE", "admin")

    ENFORCE_PERMISSIONS: bool = _flag("ENFORCE_PERMISSIONS", "true")
    REQUIRE_GROUP_LEADER: bool = _flag("REQUIRE_GROUP_LEADER", "false")

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    SEED_DEFAULT_GROUPS: bool = _flag("SEED_DEFAULT_GROUPS", "true")


settings = Settings()
