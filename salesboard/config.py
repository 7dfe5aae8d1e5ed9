"""
Runtime settings read from the environment.
"""

import os
from dataclasses import dataclass
from typing import Optional

from .catalog import SUPPORTED_YEARS, is_supported_year


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, '').strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name, '').strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@dataclass
class Settings:
    fetch_delay: float = 0.5
    seed: Optional[int] = None
    default_year: int = 2023
    port: int = 5003
    log_level: str = 'INFO'

    def __post_init__(self):
        if self.fetch_delay < 0:
            raise ValueError("fetch_delay cannot be negative")
        if not is_supported_year(self.default_year):
            raise ValueError(
                f"default_year must be one of {', '.join(str(y) for y in SUPPORTED_YEARS)}, "
                f"got {self.default_year}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Read SALESBOARD_* variables, falling back to the defaults above.

        Raises:
            ValueError: naming the variable when a value cannot be parsed
        """
        return cls(
            fetch_delay=_env_float('SALESBOARD_FETCH_DELAY', cls.fetch_delay),
            seed=_env_int('SALESBOARD_SEED', None),
            default_year=_env_int('SALESBOARD_DEFAULT_YEAR', cls.default_year),
            port=_env_int('SALESBOARD_PORT', cls.port),
            log_level=os.getenv('SALESBOARD_LOG_LEVEL', cls.log_level).strip().upper() or cls.log_level,
        )
