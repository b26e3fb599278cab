"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from sweetshop.domain.exceptions import InvalidEntityError, ValidationError
from sweetshop.domain.model.sweet import Sweet, validate_sweet
from sweetshop.infrastructure.config import Settings
from sweetshop.infrastructure.persistence.in_memory_sweet_repository import (
    InMemorySweetRepository,
)

logger = logging.getLogger(__name__)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_CATALOG = _DATA_DIR / "sweets.json"


def load_catalog(path: Path) -> list[Sweet]:
    """Read a JSON array of sweet records, validating each one.

    The file is only ever read; the store never writes back to it.
    """
    with open(path, encoding="utf-8") as fh:
        records = json.load(fh)
    if not isinstance(records, list):
        raise InvalidEntityError(f"Catalogue {path} must contain a JSON array")

    sweets: list[Sweet] = []
    for index, record in enumerate(records):
        try:
            sweets.append(validate_sweet(record))
        except ValidationError as exc:
            raise ValidationError(
                f"Catalogue {path}, entry {index}: {exc}", exc.errors
            ) from exc
    logger.info("Loaded %d sweet(s) from %s", len(sweets), path)
    return sweets


def sweet_repository(settings: Settings | None = None) -> InMemorySweetRepository:
    """Build a fresh store, seeded from the configured catalogue if any."""
    settings = settings or Settings.from_env()
    path = settings.catalog_path or DEFAULT_CATALOG
    if not path.exists():
        if settings.catalog_path is not None:
            raise FileNotFoundError(f"Catalogue not found: {path}")
        logger.debug("No catalogue at %s, starting empty", path)
        return InMemorySweetRepository()
    return InMemorySweetRepository(load_catalog(path))
