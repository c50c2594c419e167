"""Service settings read from environment variables."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

__all__: list[str] = [
    "Settings",
    "get_settings",
]


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.INFO
    max_vector_length: int = 10_000  # Longest vector accepted in a request body
    host: str = "0.0.0.0"
    port: int = 8080

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from NUMVEC_* environment variables.
        Raises ValueError for an unknown log level or a non-integer number.
        """
        level_name = os.environ.get("NUMVEC_LOG_LEVEL", "INFO").upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"unknown log level {level_name!r}")
        return cls(
            log_level=level,
            max_vector_length=int(os.environ.get("NUMVEC_MAX_VECTOR_LENGTH", 10_000)),
            host=os.environ.get("NUMVEC_HOST", "0.0.0.0"),
            port=int(os.environ.get("NUMVEC_PORT", 8080)),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
