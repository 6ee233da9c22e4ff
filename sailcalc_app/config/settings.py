"""
Settings and logging configuration for the sailcalc demo entry point.

The core calculators never read settings; only callers such as main.py do.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .ratio_bands import DEFAULT_DL_PRESET

DATA_DIR_NAME = "sailcalc_app_data"
LOG_FILE_NAME = "sailcalc.log"


@dataclass(slots=True)
class Settings:
    """Application-level settings."""

    data_dir: Path
    log_path: Path
    dl_preset: str = DEFAULT_DL_PRESET
    log_level: int = logging.INFO

    @classmethod
    def default(cls, data_dir: Path | None = None) -> "Settings":
        """Settings writing into ``data_dir`` (default: ./sailcalc_app_data)."""
        if data_dir is None:
            data_dir = Path.cwd() / DATA_DIR_NAME
        data_dir.mkdir(parents=True, exist_ok=True)
        return cls(data_dir=data_dir, log_path=data_dir / LOG_FILE_NAME)


def init_logging(settings: Settings) -> None:
    """Configure basic logging to the settings' log file."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[
            logging.FileHandler(settings.log_path, encoding="utf-8"),
        ],
        force=True,
    )

    logging.getLogger(__name__).info(
        "Logging initialized. D/L preset %s, log at %s", settings.dl_preset, settings.log_path
    )
