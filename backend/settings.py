import os
from pathlib import Path

# Basic settings helper to read environment configuration.

BACKEND_ROOT = Path(__file__).resolve().parent


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_list(val: str | None, default: list[str]) -> list[str]:
    if not val:
        return default
    return [item.strip() for item in val.split(",") if item.strip()]


class Settings:
    def __init__(self) -> None:
        self.DATABASE_URL: str = os.getenv(
            "DATABASE_URL", f"sqlite:///{BACKEND_ROOT / 'app.db'}"
        )
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.SQL_ECHO: bool = _as_bool(os.getenv("SQL_ECHO"), False)
        # Identity of the signed-in user, set by the auth proxy in front of the app
        self.AUTH_HEADER: str = os.getenv("AUTH_HEADER", "X-User-Id")
        self.AUTH_COOKIE: str = os.getenv("AUTH_COOKIE", "user_id")
        self.CORS_ORIGINS: list[str] = _as_list(os.getenv("CORS_ORIGINS"), ["*"])
        self.API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:8000")


settings = Settings()
