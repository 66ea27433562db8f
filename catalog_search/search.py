"""Typo-tolerant ranking of catalog products for live search suggestions."""
from __future__ import annotations

import logging
from typing import Any, Sequence

from rapidfuzz import fuzz
from rapidfuzz.distance import Levenshtein

from .config import settings
from .indexing import CatalogIndex, IndexEntry
from .normalize import normalize_text

logger = logging.getLogger(__name__)

NO_MATCH = 1.0


def _field_distance(query: str, query_tokens: Sequence[str], text: str, tokens: Sequence[str]) -> float:
    """Return the closest normalized distance between ``query`` and one field.

    Three alignments are tried: the whole field, every run of contiguous field
    tokens as long as the query, and the best substring of the field (so a
    partially typed word already matches).
    """

    if not text:
        return NO_MATCH
    best = Levenshtein.normalized_distance(query, text)
    width = len(query_tokens)
    for start in range(len(tokens) - width + 1):
        if best == 0.0:
            return best
        window = " ".join(tokens[start : start + width])
        best = min(best, Levenshtein.normalized_distance(query, window))
    if len(text) >= len(query):
        best = min(best, (100.0 - fuzz.partial_ratio(query, text)) / 100.0)
    return best


def _entry_distance(query: str, query_tokens: Sequence[str], entry: IndexEntry) -> float:
    best = NO_MATCH
    for text, tokens in zip(entry.fields, entry.tokens):
        best = min(best, _field_distance(query, query_tokens, text, tokens))
        if best == 0.0:
            break
    return best


def score_product(query: str, entry: IndexEntry) -> float:
    """Distance of an indexed product to ``query`` (0 = exact, 1 = no match)."""

    normalized = normalize_text(query) if isinstance(query, str) else ""
    if not normalized:
        return NO_MATCH
    return _entry_distance(normalized, normalized.split(), entry)


def rank(
    query: str,
    index: CatalogIndex,
    *,
    threshold: float | None = None,
    limit: int | None = None,
    min_length: int | None = None,
) -> list[tuple[float, Any]]:
    """Return ``(distance, product)`` pairs, best first, capped at ``limit``."""

    threshold = settings.search_threshold if threshold is None else threshold
    limit = settings.search_result_limit if limit is None else limit
    min_length = settings.search_min_query_length if min_length is None else min_length

    # The gate looks at the raw input: " a" is two characters and passes.
    if not isinstance(query, str) or len(query) < min_length:
        return []
    normalized = normalize_text(query)
    if not normalized:
        logger.debug("rank q=%r empty after normalization", query)
        return []

    query_tokens = normalized.split()
    scored: list[tuple[float, int, Any]] = []
    for entry in index.entries:
        try:
            distance = _entry_distance(normalized, query_tokens, entry)
        except Exception as exc:  # one bad record must not abort the query
            logger.debug("scoring failed for catalog position %s: %s", entry.position, exc)
            continue
        if distance <= threshold:
            scored.append((distance, entry.position, entry.product))

    scored.sort(key=lambda item: (item[0], item[1]))
    logger.debug(
        "rank q=%r normalized=%r candidates=%s matched=%s limit=%s",
        query,
        normalized,
        len(index.entries),
        len(scored),
        limit,
    )
    return [(distance, product) for distance, _, product in scored[:limit]]


def search(
    query: str,
    index: CatalogIndex,
    *,
    threshold: float | None = None,
    limit: int | None = None,
) -> list[Any]:
    """Map a query and an index to the ranked, capped list of products.

    Short or non-string queries and queries without a close match both yield
    an empty list. The returned items are the catalog's own records.
    """

    return [product for _, product in rank(query, index, threshold=threshold, limit=limit)]
