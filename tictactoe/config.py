from __future__ import annotations

import logging
import os
from dataclasses import dataclass


DEFAULT_REDIS_URL = "redis://localhost:6379/0"
DEFAULT_ARCHIVE_URL = "http://localhost:5010/api"


@dataclass(frozen=True, slots=True)
class Settings:
    redis_url: str
    archive_url: str
    archive_timeout_s: float
    # Delay before a won board is cleared for the next round.
    reset_delay_ms: int
    log_level: str

    @property
    def reset_delay_s(self) -> float:
        return self.reset_delay_ms / 1000


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {raw!r}")
    return value


def _log_level_env(name: str, default: str) -> str:
    level = os.environ.get(name, default).strip().upper() or default
    if level not in logging.getLevelNamesMapping():
        raise ValueError(f"{name} must be a logging level name, got {level!r}")
    return level


def settings_from_env() -> Settings:
    return Settings(
        redis_url=os.environ.get("REDIS_URL", DEFAULT_REDIS_URL),
        # The archive client appends /results to this.
        archive_url=os.environ.get("TICTACTOE_ARCHIVE_URL", DEFAULT_ARCHIVE_URL).rstrip("/"),
        archive_timeout_s=_float_env("TICTACTOE_ARCHIVE_TIMEOUT_S", 5.0),
        reset_delay_ms=_int_env("TICTACTOE_RESET_DELAY_MS", 2000),
        log_level=_log_level_env("TICTACTOE_LOG_LEVEL", "INFO"),
    )
