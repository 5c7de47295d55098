from __future__ import annotations

import os
from dataclasses import dataclass


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


@dataclass(frozen=True, slots=True)
class PoolSettings:
    size: int = 10
    max_overflow: int = 20
    recycle_seconds: int = 3600


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)

    if not raw:
        return default

    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


def pool_settings() -> PoolSettings:
    """Connection pool sizing, overridable with DB_POOL_* variables."""
    return PoolSettings(
        size=_int_env("DB_POOL_SIZE", PoolSettings.size),
        max_overflow=_int_env("DB_POOL_MAX_OVERFLOW", PoolSettings.max_overflow),
        recycle_seconds=_int_env("DB_POOL_RECYCLE_SECONDS", PoolSettings.recycle_seconds),
    )
