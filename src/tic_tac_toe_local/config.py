"""Environment-driven settings for the local game service."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List

from .presentation import DEFAULT_COMPACT_BREAKPOINT


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    compact_breakpoint: int = DEFAULT_COMPACT_BREAKPOINT
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings() -> Settings:
    """Read settings from TTT_* environment variables, falling back to defaults."""
    origins = os.getenv("TTT_CORS_ORIGINS")
    return Settings(
        log_level=(os.getenv("TTT_LOG_LEVEL") or "INFO").upper(),
        compact_breakpoint=_int_env("TTT_COMPACT_BREAKPOINT", DEFAULT_COMPACT_BREAKPOINT),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()] if origins else ["*"],
    )
