"""Environment-driven application settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


def _env_optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return int(raw)


@dataclass(frozen=True)
class Settings:
    app_name: str
    app_version: str
    log_level: str
    random_occupancy_probability: float
    random_occupancy_seed: Optional[int]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Read settings once per process; call `cache_clear()` to reload."""
    return Settings(
        app_name=os.getenv("APP_NAME", "Hotel Room Reservation"),
        app_version=os.getenv("APP_VERSION", "1.0.0"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        random_occupancy_probability=_env_float("RANDOM_OCCUPANCY_PROBABILITY", 0.45),
        random_occupancy_seed=_env_optional_int("RANDOM_OCCUPANCY_SEED"),
    )
