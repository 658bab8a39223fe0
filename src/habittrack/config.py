"""Application configuration objects and helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "HabitTrack"
    LOG_FILENAME = "habittrack.log"
    LOG_MAX_BYTES = 10 * 1024 * 1024
    LOG_BACKUP_COUNT = 5
    TESTING = False

    def __init__(self) -> None:
        self.DEV_MODE = _env_bool("HABITTRACK_DEV_MODE", default=True)
        self.LOG_LEVEL = self._resolve_log_level()
        self.DATA_DIR = self._resolve_data_dir()

    def _resolve_log_level(self) -> str:
        level = os.getenv("HABITTRACK_LOG_LEVEL", "INFO").strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Invalid HABITTRACK_LOG_LEVEL: {level}")
        return level

    def _resolve_data_dir(self) -> Path:
        """Return the directory where log files live."""

        data_root = os.getenv("HABITTRACK_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def log_level(self) -> int:
        return logging.getLevelName(self.LOG_LEVEL)

    def as_dict(self) -> dict[str, object]:
        """Expose resolved settings for diagnostics."""

        return {
            "app_name": self.APP_NAME,
            "dev_mode": self.DEV_MODE,
            "testing": self.TESTING,
            "log_level": self.LOG_LEVEL,
            "data_dir": str(self.DATA_DIR),
        }


class TestConfig(BaseConfig):
    """Configuration used by the test suite."""

    __test__ = False  # keep pytest from collecting this class

    TESTING = True

    def __init__(self, data_dir: Path | str | None = None) -> None:
        super().__init__()
        if data_dir is not None:
            self.DATA_DIR = Path(data_dir)
