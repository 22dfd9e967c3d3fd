"""Settings for the command-line entry point.

Only ``main`` reads these; the store and handler receive plain values.
A ``.env`` in the working directory is loaded first, real environment
variables take precedence over it.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from storage import DEFAULT_FILE_NAME

ENV_PREFIX = "TASK_CLI"
DEFAULT_LOG_LEVEL = logging.WARNING


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


def _env_log_level(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class Settings:
    tasks_file: Path
    log_level: int


def load_settings(dotenv_path: Optional[Path] = None) -> Settings:
    load_dotenv(dotenv_path or Path.cwd() / ".env", override=False)
    return Settings(
        tasks_file=_env_path(_k("FILE"), Path(DEFAULT_FILE_NAME)),
        log_level=_env_log_level(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL),
    )
