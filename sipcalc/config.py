# sipcalc/config.py

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

_TRUTHY = {"1", "true", "yes", "on"}


def _split_origins(raw: Optional[str]) -> List[str]:
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"
    port: int = 5000
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            cors_origins=_split_origins(env.get("SIPCALC_CORS_ORIGINS")),
            log_level=env.get("SIPCALC_LOG_LEVEL", "INFO").upper(),
            port=int(env.get("SIPCALC_PORT", "5000")),
            debug=env.get("SIPCALC_DEBUG", "").strip().lower() in _TRUTHY,
        )
