# src/tasklist_app/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing required at import time: every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKLIST"

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


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Media ----
    media_dir: Path
    image_mime_filter: str

    # ---- Permission ----
    platform_api_level: int
    request_permission: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tasklist").strip() or "tasklist"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tasklist"))

        media_dir = _env_path(_k("MEDIA_DIR"), Path.home() / "Pictures")
        image_mime_filter = _env(_k("IMAGE_MIME_FILTER"), "image/*").strip() or "image/*"

        platform_api_level = _env_int(_k("PLATFORM_API_LEVEL"), 33)
        request_permission = _env_bool(_k("REQUEST_PERMISSION"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            media_dir=media_dir,
            image_mime_filter=image_mime_filter,
            platform_api_level=platform_api_level,
            request_permission=request_permission,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
