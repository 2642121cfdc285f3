# orderbook/config/settings.py
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///./orderbook.db"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


def get_database_url() -> str:
    """
    DATABASE_URL wins; otherwise a PostgreSQL URL is built from DB_* variables,
    and without DB_HOST we fall back to a local SQLite file.
    """
    url = os.getenv("DATABASE_URL", "").strip()
    if url:
        return url

    host = os.getenv("DB_HOST", "").strip()
    if not host:
        return DEFAULT_DATABASE_URL

    port = os.getenv("DB_PORT", "5432").strip()
    name = os.getenv("DB_NAME", "orderbook").strip()
    user = os.getenv("DB_USER", "orderbook").strip()
    password = os.getenv("DB_PASSWORD", "").strip()
    return f"postgresql://{user}:{password}@{host}:{port}/{name}"


@dataclass(frozen=True)
class Settings:
    database_url: str
    db_echo: bool = False
    pool_size: int = 10
    max_overflow: int = 20
    pool_timeout: float = 30
    statement_timeout: Optional[float] = None
    create_tables: bool = True
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    return Settings(
        database_url=get_database_url(),
        db_echo=_env_bool("DB_ECHO", False),
        pool_size=int(os.getenv("DB_POOL_SIZE", "10")),
        max_overflow=int(os.getenv("DB_MAX_OVERFLOW", "20")),
        pool_timeout=float(os.getenv("DB_POOL_TIMEOUT", "30")),
        statement_timeout=_env_float("DB_STATEMENT_TIMEOUT"),
        create_tables=_env_bool("DB_CREATE_TABLES", True),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
