# Licensed under the Apache License, Version 2.0
from __future__ import annotations

import os
from dataclasses import dataclass

from .domain.errors import ConfigurationError
from .services.compare_service import DEFAULT_THRESHOLD
from .services.fingerprint_service import DEFAULT_GRID_SIZE


@dataclass
class Settings:
    grid_size: int = DEFAULT_GRID_SIZE
    threshold: float = DEFAULT_THRESHOLD
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Read VISPRINT_GRID_SIZE, VISPRINT_THRESHOLD and VISPRINT_LOG_LEVEL."""
        s = cls()
        grid = os.getenv("VISPRINT_GRID_SIZE")
        threshold = os.getenv("VISPRINT_THRESHOLD")
        try:
            if grid:
                s.grid_size = int(grid)
            if threshold:
                s.threshold = float(threshold)
        except ValueError as e:
            raise ConfigurationError(f"bad VISPRINT_* environment value: {e}") from e
        s.log_level = os.getenv("VISPRINT_LOG_LEVEL", s.log_level).upper()
        if s.grid_size < 2:
            raise ConfigurationError(f"VISPRINT_GRID_SIZE must be >= 2, got {s.grid_size}")
        if not 0.0 <= s.threshold <= 1.0:
            raise ConfigurationError(
                f"VISPRINT_THRESHOLD must be within [0, 1], got {s.threshold}"
            )
        return s
