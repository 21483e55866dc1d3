# src/dude/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Environment variables (prefix DUDE_):
- DUDE_APP_NAME   bot display name (default: Dude)
- DUDE_LOG_LEVEL  console log level (default: WARNING)
- DUDE_DATA_DIR   local data directory (default: data)
- DUDE_DATA_FILE  task file (default: <data_dir>/duke.txt)
- DUDE_LOG_DIR    directory of dude.log (default: <data_dir>/logs)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "DUDE"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v


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

    # ---- Local data paths ----
    data_dir: Path
    data_file: Path
    log_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "Dude")
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), Path("data"))
        data_file = _env_path(_k("DATA_FILE"), data_dir / "duke.txt")
        log_dir = _env_path(_k("LOG_DIR"), data_dir / "logs")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            data_file=data_file,
            log_dir=log_dir,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
