"""FastAPI application wiring the catalog search service."""
from __future__ import annotations

import logging
from pathlib import Path
from time import perf_counter
from typing import Any, List

from fastapi import FastAPI, HTTPException, Query

from .catalog_loader import load_catalog
from .config import settings
from .indexing import BuildReport, get_field
from .models import (
    CatalogRequest,
    CatalogResponse,
    ProductResult,
    SearchResponse,
    SelectionResponse,
)
from .search_service import SearchService, display_name, select

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL = logging.getLevelName(settings.log_level.upper())

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, force=True)
for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
    logging.getLogger(name).setLevel(LOG_LEVEL)

logger = logging.getLogger(__name__)
logger.info("Logging configured at %s", settings.log_level.upper())

app = FastAPI(title="Product Search Service")
service = SearchService(settings=settings)


def _catalog_response(report: BuildReport) -> CatalogResponse:
    return CatalogResponse(
        total=report.total,
        indexed=report.indexed,
        skipped_missing_id=report.skipped_missing_id,
        duplicate_ids=list(report.duplicate_ids),
        version=None if report.version is None else str(report.version),
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _result_id(product_id: Any) -> str | int:
    if isinstance(product_id, str) or (isinstance(product_id, int) and not isinstance(product_id, bool)):
        return product_id
    return str(product_id)


def _to_result(product: Any, score: float) -> ProductResult:
    product_id = select(product)
    category = get_field(product, "category")
    price = get_field(product, "price")
    return ProductResult(
        id=_result_id(product_id),
        primary=display_name(product),
        secondary=service.display_details(product),
        category=None if category is None else str(category),
        price=price if _is_number(price) else None,
        score=round(score, 4),
        path=service.product_path(product_id),
    )


@app.on_event("startup")
async def startup_event() -> None:
    path = Path(settings.catalog_path)
    if path.exists():
        report = service.load(load_catalog(path), version=str(path.stat().st_mtime_ns))
        logger.info("Loaded %s products on startup", report.indexed)


@app.get("/health")
async def health() -> dict:
    report = service.index.report
    return {
        "indexed": report.indexed,
        "skipped_missing_id": report.skipped_missing_id,
        "version": report.version,
    }


@app.put("/catalog", response_model=CatalogResponse)
async def replace_catalog(payload: CatalogRequest) -> CatalogResponse:
    products = [item.model_dump() for item in payload.products]
    report = service.load(products, version=payload.version)
    return _catalog_response(report)


@app.get("/search", response_model=SearchResponse)
async def search(q: str = Query("", description="Search query")) -> SearchResponse:
    started = perf_counter()
    ranked = service.rank(q)
    results: List[ProductResult] = [_to_result(product, score) for score, product in ranked]
    took_ms = (perf_counter() - started) * 1000
    logger.info("search q=%r hits=%s took=%.2fms", q, len(results), took_ms)
    return SearchResponse(query=q, results=results, took_ms=took_ms)


@app.get("/products/{product_id}/select", response_model=SelectionResponse)
async def select_product(product_id: str) -> SelectionResponse:
    product = service.find(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    selected = select(product)
    return SelectionResponse(id=_result_id(selected), path=service.product_path(selected))
