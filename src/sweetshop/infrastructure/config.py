"""Runtime settings read from the environment.

``SWEETSHOP_CATALOG``    path to a JSON catalogue used to seed the store
``SWEETSHOP_LOG_LEVEL``  logging level name (default WARNING)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

CATALOG_ENV = "SWEETSHOP_CATALOG"
LOG_LEVEL_ENV = "SWEETSHOP_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:

    catalog_path: Path | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        raw_path = env.get(CATALOG_ENV, "").strip()
        return Settings(
            catalog_path=Path(raw_path) if raw_path else None,
            log_level=env.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper(),
        )


def configure_logging(level: str) -> None:
    """Install the root handler.  Raises ValueError for an unknown level."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level!r}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
