from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .operations import DEFAULT_RANGE_FROM, DEFAULT_RANGE_TO

SEED_ENV = "SIMPLE_MATH_GAME_SEED"
LOG_LEVEL_ENV = "SIMPLE_MATH_GAME_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when the environment holds an unusable setting."""


@dataclass(frozen=True, slots=True)
class GameConfig:
    seed: int | None = None
    log_level: str = "WARNING"
    range_from: int = DEFAULT_RANGE_FROM
    range_to: int = DEFAULT_RANGE_TO

    def __post_init__(self) -> None:
        if self.log_level not in _LOG_LEVELS:
            raise ConfigError(f"unknown log level: {self.log_level!r}")
        if self.range_from >= self.range_to:
            raise ConfigError("range_from must be less than range_to")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GameConfig:
        env = os.environ if environ is None else environ

        seed: int | None = None
        raw_seed = env.get(SEED_ENV, "").strip()
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError:
                raise ConfigError(f"{SEED_ENV} must be an integer, got {raw_seed!r}") from None

        log_level = env.get(LOG_LEVEL_ENV, "").strip().upper() or "WARNING"
        return cls(seed=seed, log_level=log_level)
