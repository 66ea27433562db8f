"""In-memory catalog index construction.

An index is built once per catalog snapshot and never patched afterwards: a
catalog change produces a brand new :class:`CatalogIndex` that replaces the
old one wholesale.
"""
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, Mapping, Optional

from .normalize import field_text

logger = logging.getLogger(__name__)

SEARCH_FIELDS = ("name", "title", "category", "description")


def get_field(product: Any, name: str) -> Any:
    """Read ``name`` from a mapping or an attribute-style record."""

    if isinstance(product, Mapping):
        return product.get(name)
    return getattr(product, name, None)


def _has_id(product: Any) -> bool:
    product_id = get_field(product, "id")
    return product_id is not None and product_id != ""


@dataclass(frozen=True)
class IndexEntry:
    position: int
    product: Any
    fields: tuple[str, ...]
    tokens: tuple[tuple[str, ...], ...]


@dataclass(frozen=True)
class BuildReport:
    total: int = 0
    indexed: int = 0
    skipped_missing_id: int = 0
    duplicate_ids: tuple[str, ...] = ()
    version: Optional[Hashable] = None


@dataclass(frozen=True)
class CatalogIndex:
    entries: tuple[IndexEntry, ...] = ()
    report: BuildReport = field(default_factory=BuildReport)

    def __len__(self) -> int:
        return len(self.entries)

    def find(self, product_id: Any) -> Any | None:
        """Return the first indexed product with ``product_id``."""

        wanted = str(product_id)
        for entry in self.entries:
            if str(get_field(entry.product, "id")) == wanted:
                return entry.product
        return None


def _make_entry(position: int, product: Any) -> IndexEntry:
    texts = tuple(field_text(get_field(product, name)) for name in SEARCH_FIELDS)
    return IndexEntry(
        position=position,
        product=product,
        fields=texts,
        tokens=tuple(tuple(text.split()) for text in texts),
    )


def build_index(products: Iterable[Any] | None, version: Hashable | None = None) -> CatalogIndex:
    """Build an immutable index over ``name``, ``title``, ``category`` and ``description``.

    Records without an ``id`` are skipped and counted rather than failing the
    build. Records sharing an ``id`` are all kept and reported, never merged.
    """

    entries: list[IndexEntry] = []
    skipped = 0
    total = 0
    for total, product in enumerate(products or (), start=1):
        if not _has_id(product):
            skipped += 1
            continue
        entries.append(_make_entry(total - 1, product))

    counts = Counter(str(get_field(entry.product, "id")) for entry in entries)
    duplicates = tuple(product_id for product_id, count in counts.items() if count > 1)

    report = BuildReport(
        total=total,
        indexed=len(entries),
        skipped_missing_id=skipped,
        duplicate_ids=duplicates,
        version=version,
    )
    if skipped:
        logger.warning("Skipped %s catalog records without an id", skipped)
    if duplicates:
        logger.warning("Catalog contains duplicate product ids: %s", list(duplicates))
    logger.info("Indexed %s of %s catalog records (version=%r)", report.indexed, total, version)
    return CatalogIndex(entries=tuple(entries), report=report)
