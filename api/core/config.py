"""
Environment-driven settings.

Every value is read on call, so tests can override it with `monkeypatch.setenv`.
"""

from __future__ import annotations

import os

DEFAULT_CORS_ORIGINS: tuple[str, ...] = ()


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def db_pool_min_size() -> int:
    return max(_env_int("DB_POOL_MIN_SIZE", 1), 0)


def db_pool_max_size() -> int:
    # asyncpg rejects max_size < min_size.
    return max(_env_int("DB_POOL_MAX_SIZE", 5), db_pool_min_size(), 1)


def db_command_timeout() -> int:
    return _env_int("DB_COMMAND_TIMEOUT", 30)


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def server_host() -> str:
    return _env_str("HOST", "0.0.0.0")


def server_port() -> int:
    return _env_int("PORT", 8080)
