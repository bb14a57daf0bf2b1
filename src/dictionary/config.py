# src/dictionary/config.py

import logging
import os
from dataclasses import dataclass, field


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    Values can be overridden via environment variables:
    - DICTIONARY_DIR
    - DICTIONARY_PREFETCH_SIZE
    - DICTIONARY_LOCK_TIMEOUT
    - DICTIONARY_LOG_LEVEL
    """

    data_dir: str = field(
        default_factory=lambda: os.getenv("DICTIONARY_DIR", "./dictionary_data")
    )
    prefetch_size: int = field(
        default_factory=lambda: _env_int("DICTIONARY_PREFETCH_SIZE", 10)
    )
    lock_timeout: float = field(
        default_factory=lambda: _env_float("DICTIONARY_LOCK_TIMEOUT", 0.0)
    )
    log_level: str = field(
        default_factory=lambda: os.getenv("DICTIONARY_LOG_LEVEL", "WARNING").upper()
    )

    def __post_init__(self):
        if self.prefetch_size < 1:
            raise ValueError("DICTIONARY_PREFETCH_SIZE must be at least 1")
        if self.lock_timeout < 0:
            raise ValueError("DICTIONARY_LOCK_TIMEOUT must not be negative")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"DICTIONARY_LOG_LEVEL is not a logging level: {self.log_level!r}")


def load_settings() -> Settings:
    return Settings()
