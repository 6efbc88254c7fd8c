# src/trakr/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every variable is optional; with none set, trakr behaves like the classic
  tool (store at ~/.journal/trakr.json, quiet console).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TRAKR"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def default_db_path() -> Path:
    return Path.home() / ".journal" / "trakr.json"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Storage ----
    db_path: Path

    # ---- Logging ----
    log_level: str
    log_file: Path | None

    # ---- Reporting ----
    # Compare full dates (not just day-of-month) for "completed today".
    strict_today: bool

    @staticmethod
    def from_env() -> "Settings":
        db_path = _env_path(_k("DB_PATH"), None) or default_db_path()
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_file = _env_path(_k("LOG_FILE"), None)
        strict_today = _env_bool(_k("STRICT_TODAY"), False)

        return Settings(
            db_path=db_path,
            log_level=log_level,
            log_file=log_file,
            strict_today=strict_today,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
