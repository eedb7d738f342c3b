"""
Process-wide configuration.

Everything here is immutable and read-only once the app starts; the
calculators themselves never read the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_INFLATION_PCT = 6.0
MAX_HORIZON_YEARS = 60

DEFAULT_CORS_ORIGINS: Tuple[str, ...] = (
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class Settings:
    cors_origins: Tuple[str, ...] = DEFAULT_CORS_ORIGINS
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "Settings":
        """Build settings from WEALTHCALC_* variables, falling back to defaults."""
        env = os.environ if environ is None else environ

        origins_raw = env.get("WEALTHCALC_CORS_ORIGINS", "")
        origins = tuple(o.strip() for o in origins_raw.split(",") if o.strip())

        return cls(
            cors_origins=origins or DEFAULT_CORS_ORIGINS,
            log_level=env.get("WEALTHCALC_LOG_LEVEL", "INFO").upper(),
        )
