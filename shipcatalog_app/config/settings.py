"""
Basic settings and logging configuration for the ship catalog.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class Settings:
    """Application-level settings."""

    data_dir: Path
    db_path: Path

    @classmethod
    def default(cls, data_dir: Path | None = None) -> "Settings":
        """Create default settings, placing data under the working directory unless told otherwise."""
        if data_dir is None:
            data_dir = Path.cwd() / "shipcatalog_app_data"
        data_dir.mkdir(parents=True, exist_ok=True)
        db_path = data_dir / "shipcatalog.db"
        return cls(data_dir=data_dir, db_path=db_path)


def init_logging(settings: Settings) -> None:
    """Configure basic logging to the catalog log file."""
    log_file = settings.data_dir / "shipcatalog.log"

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )

    logging.getLogger(__name__).info("Logging initialized. DB at %s", settings.db_path)
