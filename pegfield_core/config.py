from __future__ import annotations

import logging
import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    default_layout: str = "english"
    max_sessions: int = 1000
    log_level: str = "INFO"
    port: int = 5000
    debug: bool = False


def load_settings() -> Settings:
    """Reads settings from PEGFIELD_* environment variables (plus PORT and FLASK_DEBUG)."""
    return Settings(
        default_layout=os.getenv("PEGFIELD_LAYOUT", "english"),
        max_sessions=max(1, _env_int("PEGFIELD_MAX_SESSIONS", 1000)),
        log_level=os.getenv("PEGFIELD_LOG_LEVEL", "INFO").upper(),
        port=_env_int("PORT", 5000),
        debug=_env_flag("FLASK_DEBUG", os.getenv("DEBUG", "0")),
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
