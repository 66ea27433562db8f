"""Pydantic models for request/response payloads."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProductIn(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | int | None = None
    name: str | None = None
    title: str | None = None
    category: str | None = None
    description: str | None = None
    price: float | None = None


class CatalogRequest(BaseModel):
    products: list[ProductIn] = Field(default_factory=list)
    version: str | None = None


class CatalogResponse(BaseModel):
    total: int
    indexed: int
    skipped_missing_id: int
    duplicate_ids: list[str]
    version: str | None = None


class ProductResult(BaseModel):
    id: str | int
    primary: str
    secondary: str
    category: str | None = None
    price: float | None = None
    score: float | None = None
    path: str


class SearchResponse(BaseModel):
    query: str
    results: list[ProductResult]
    took_ms: float


class SelectionResponse(BaseModel):
    id: str | int
    path: str
