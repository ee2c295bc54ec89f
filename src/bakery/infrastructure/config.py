"""Runtime configuration.

Values come from the environment; a ``.env`` file in the working
directory is loaded first so local installs can keep settings there.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    log_level: str = "WARNING"
    log_file: Path | None = None


def load_settings() -> Settings:
    load_dotenv()
    log_file = os.getenv("BAKERY_LOG_FILE")
    return Settings(
        data_dir=Path(os.getenv("BAKERY_DATA_DIR", "data")).expanduser(),
        log_level=os.getenv("BAKERY_LOG_LEVEL", "WARNING").upper(),
        log_file=Path(log_file).expanduser() if log_file else None,
    )
