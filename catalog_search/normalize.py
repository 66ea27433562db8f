"""Text folding shared by the index and the query path.

Both sides must see the same representation, otherwise an exact title typed
by the user would not come out at distance zero:

    1) lowercase and fold accents/other scripts to ASCII with ``unidecode``
       (``"Café"`` -> ``"cafe"``);
    2) replace anything that is not a letter or digit with a space;
    3) collapse whitespace.
"""
from __future__ import annotations

import logging
import re
from typing import Any

from unidecode import unidecode

logger = logging.getLogger(__name__)

_ASCII_ALNUM_SPACE_RE = re.compile(r"[^0-9a-z ]+")


def normalize_text(text: str) -> str:
    """Fold ``text`` into lowercase ASCII tokens separated by single spaces."""

    if not text:
        return ""
    folded = unidecode(text).lower()
    cleaned = _ASCII_ALNUM_SPACE_RE.sub(" ", folded)
    return " ".join(cleaned.split())


def field_text(value: Any) -> str:
    """Coerce a raw product field into searchable text.

    Missing values become an empty string and numbers are stringified. Any
    other type cannot be compared meaningfully and is treated as empty.
    """

    if value is None:
        return ""
    if isinstance(value, str):
        return normalize_text(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return normalize_text(str(value))
    logger.debug("field_text ignoring unsupported value type=%s", type(value).__name__)
    return ""
