"""Search facade that owns the current catalog index.

The index is immutable; a catalog change builds a new one off to the side and
swaps the reference in a single assignment, so a query running concurrently
sees either the old catalog or the new one, never half of each.
"""
from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any, Hashable, Iterable, Optional

from .config import Settings, settings as default_settings
from .indexing import BuildReport, CatalogIndex, build_index, get_field
from .search import rank

logger = logging.getLogger(__name__)

_UNSET = object()


class SearchService:
    def __init__(self, products: Iterable[Any] | None = None, settings: Settings | None = None) -> None:
        self.settings = settings or default_settings
        self._lock = threading.Lock()
        self._index = CatalogIndex()
        self._source: Any = _UNSET
        self._version: Optional[Hashable] = None
        if products is not None:
            self.load(products)

    @property
    def index(self) -> CatalogIndex:
        return self._index

    def _install(self, products: Iterable[Any] | None, version: Hashable | None) -> BuildReport:
        # Caller holds self._lock; queries read self._index without it.
        index = build_index(list(products or ()), version=version)
        self._index = index
        self._source = products
        self._version = version
        return index.report

    def load(self, products: Iterable[Any] | None, version: Hashable | None = None) -> BuildReport:
        """Rebuild the index from ``products`` and make it current."""

        with self._lock:
            return self._install(products, version)

    def refresh(self, products: Iterable[Any] | None, version: Hashable | None = None) -> bool:
        """Rebuild only when the catalog changed by identity or version."""

        with self._lock:
            if products is self._source and version == self._version:
                logger.debug("refresh skipped: catalog unchanged (version=%r)", version)
                return False
            self._install(products, version)
        return True

    def rank(self, query: str) -> list[tuple[float, Any]]:
        index = self._index
        return rank(
            query,
            index,
            threshold=self.settings.search_threshold,
            limit=self.settings.search_result_limit,
            min_length=self.settings.search_min_query_length,
        )

    def search(self, query: str) -> list[Any]:
        return [product for _, product in self.rank(query)]

    def find(self, product_id: Any) -> Any | None:
        return self._index.find(product_id)

    def product_path(self, product_id: Any) -> str:
        return product_path(product_id, self.settings)

    def display_details(self, product: Any) -> str:
        return display_details(product, self.settings)


class LiveSearch:
    """Keystroke-driven session with last-query-wins semantics.

    Each :meth:`update` evaluates its query in a worker thread. When a newer
    query was issued before it finished, its results are discarded and
    ``None`` is returned; otherwise ``results`` is replaced and returned.
    """

    def __init__(self, service: SearchService) -> None:
        self.service = service
        self.query = ""
        self.results: list[Any] = []
        self._generation = 0

    async def update(self, query: str) -> list[Any] | None:
        self._generation += 1
        generation = self._generation
        self.query = query
        results = await asyncio.to_thread(self.service.search, query)
        if generation != self._generation:
            logger.debug("live search q=%r superseded", query)
            return None
        self.results = results
        return results

    def clear(self) -> None:
        self._generation += 1
        self.query = ""
        self.results = []


def select(product: Any) -> Any:
    """Return the identifier the host should navigate to for ``product``."""

    return get_field(product, "id")


def product_path(product_id: Any, settings: Settings | None = None) -> str:
    template = (settings or default_settings).product_path_template
    return template.format(id=product_id)


def display_name(product: Any) -> str:
    value = get_field(product, "name") or get_field(product, "title")
    return "" if value is None else str(value)


def format_price(price: Any) -> str:
    """Render whole-number floats without a trailing ``.0`` (``50.0`` -> ``"50"``)."""

    if isinstance(price, float) and price.is_integer():
        return str(int(price))
    return str(price)


def display_details(product: Any, settings: Settings | None = None) -> str:
    """Secondary suggestion line, e.g. ``"₹50 • Footwear"``; missing parts are left out."""

    symbol = (settings or default_settings).currency_symbol
    price = get_field(product, "price")
    category = get_field(product, "category")
    parts = []
    if price is not None:
        parts.append(f"{symbol}{format_price(price)}")
    if category:
        parts.append(str(category))
    return " • ".join(parts)
