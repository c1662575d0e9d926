# src/optodo/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is persisted: data_dir only holds the log file.
- Every value has a sane default, so the app starts with an empty environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "OPTODO"

DEFAULT_NOTICE_TTL_SECONDS = 3.0

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


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, default: str, choices: set[str]) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    return value if value in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Notices ----
    notice_ttl_seconds: float

    # ---- Task list behaviour ----
    seed_tasks: bool
    strict_ids: bool
    strict_titles: bool

    # ---- Rendering ----
    color: str  # "auto" | "always" | "never"

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "Operational To-Dos").strip() or "Operational To-Dos"
        # Console logs share the terminal with the board; keep them quiet by default.
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/optodo"))

        ttl = _env_float(_k("NOTICE_TTL_SECONDS"), DEFAULT_NOTICE_TTL_SECONDS)
        notice_ttl_seconds = ttl if ttl > 0 else DEFAULT_NOTICE_TTL_SECONDS

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            notice_ttl_seconds=notice_ttl_seconds,
            seed_tasks=_env_bool(_k("SEED_TASKS"), True),
            strict_ids=_env_bool(_k("STRICT_IDS"), False),
            strict_titles=_env_bool(_k("STRICT_TITLES"), False),
            color=_env_choice(_k("COLOR"), "auto", {"auto", "always", "never"}),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
