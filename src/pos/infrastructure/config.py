"""Application configuration — loaded once at startup.

Read from environment variables by ``Settings.from_env()`` in the CLI
entry point and passed down explicitly; nothing else reads the
environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_DATABASE_URL = f"sqlite:///{_DATA_DIR / 'pos.db'}"
LOG_FORMATS = ("console", "json")


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = "INFO"
    log_format: str = "console"
    sql_echo: bool = False

    def __post_init__(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        if self.log_format not in LOG_FORMATS:
            raise ValueError(
                f"POS_LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, "
                f"got {self.log_format!r}"
            )

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return Settings(
            database_url=env.get("POS_DATABASE_URL", DEFAULT_DATABASE_URL),
            log_level=env.get("POS_LOG_LEVEL", "INFO").upper(),
            log_format=env.get("POS_LOG_FORMAT", "console").lower(),
            sql_echo=env.get("POS_SQL_ECHO", "0") == "1",
        )
