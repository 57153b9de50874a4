import os
from pathlib import Path

from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
FALLBACK_ENV_PATHS = [
    ENV_PATH,
    Path.cwd() / ".env",
    Path.cwd() / "backend" / ".env",
]
for env_path in FALLBACK_ENV_PATHS:
    load_dotenv(env_path, override=False)


def _env_get(key: str, default: str = "") -> str:
    return str(os.getenv(key) or os.getenv(f"\ufeff{key}") or default).strip()


def _env_bool(key: str, default: bool) -> bool:
    raw = _env_get(key)
    if not raw:
        return default
    return raw.lower() in {"1", "true", "yes", "on", "si"}


def _env_int(key: str, default: int) -> int:
    raw = _env_get(key)
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


class Settings:
    PROJECT_NAME: str = _env_get("PROJECT_NAME", "POS API")
    DATABASE_URL: str = _env_get("DATABASE_URL", "sqlite:///./pos.db")
    SQL_ECHO: bool = _env_bool("SQL_ECHO", False)
    AUTO_CREATE_TABLES: bool = _env_bool("AUTO_CREATE_TABLES", True)
    LOG_LEVEL: str = _env_get("LOG_LEVEL", "INFO").upper()
    APP_TIMEZONE: str = _env_get("APP_TIMEZONE", "America/Managua")

    # "none" deja la API abierta de forma explicita; "jwt" exige Bearer token.
    AUTH_MODE: str = _env_get("AUTH_MODE", "none").lower()
    SECRET_KEY: str = _env_get("SECRET_KEY", "CHANGE_ME")
    ALGORITHM: str = _env_get("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = _env_int("ACCESS_TOKEN_EXPIRE_MINUTES", 43200)

    CORS_ALLOW_ORIGIN: str = _env_get("CORS_ALLOW_ORIGIN", "*")
    SEARCH_LIMIT: int = _env_int("SEARCH_LIMIT", 20)
    VENTAS_LIST_LIMIT: int = _env_int("VENTAS_LIST_LIMIT", 50)


settings = Settings()
