"""Application configuration and constants."""
from __future__ import annotations

import os
from dataclasses import dataclass


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


@dataclass(frozen=True)
class Settings:
    """Simple settings container with environment variable overrides.

    ``search_threshold`` is the loosest normalized distance (0 = exact,
    1 = nothing in common) a field may have and still count as a match.
    Raising it lets more typos through at the cost of noisier suggestions.
    ``search_result_limit`` caps the suggestion list and
    ``search_min_query_length`` keeps single keystrokes from matching.
    """

    search_threshold: float = float(_get_env("SEARCH_THRESHOLD", "0.4"))
    search_result_limit: int = int(_get_env("SEARCH_RESULT_LIMIT", "5"))
    search_min_query_length: int = int(_get_env("SEARCH_MIN_QUERY_LENGTH", "2"))
    catalog_path: str = _get_env("CATALOG_PATH", "catalog.json")
    product_path_template: str = _get_env("PRODUCT_PATH_TEMPLATE", "/product/{id}")
    currency_symbol: str = _get_env("CURRENCY_SYMBOL", "₹")
    log_level: str = _get_env("LOG_LEVEL", "INFO")


settings = Settings()
