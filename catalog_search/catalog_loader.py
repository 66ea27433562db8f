"""Catalog snapshot loading for the hosting shells."""
from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def load_catalog(path: str | Path) -> list[dict]:
    """Read a JSON array of product records, or ``{"products": [...]}``.

    A missing file yields an empty catalog with a warning; malformed JSON
    propagates as :class:`json.JSONDecodeError`.
    """

    path = Path(path)
    if not path.exists():
        logger.warning("Catalog file %s is missing", path)
        return []
    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if isinstance(data, dict):
        data = data.get("products", [])
    if not isinstance(data, list):
        logger.warning("Catalog file %s does not hold a list of products", path)
        return []
    records = [item for item in data if isinstance(item, dict)]
    logger.info("Loaded %s catalog records from %s", len(records), path)
    return records
