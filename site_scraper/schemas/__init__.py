"""Pydantic 스키마 - export only."""

from .scrape_schema import (
    CacheClearResponse,
    DetailSelectorSet,
    ErrorResponse,
    HealthResponse,
    ProductDetail,
    ProductDetailRequest,
    ProductSummary,
    SearchRequest,
    SearchResult,
    SelectorSet,
    SiteConfig,
    SiteInfo,
)

__all__ = [
    "CacheClearResponse",
    "DetailSelectorSet",
    "ErrorResponse",
    "HealthResponse",
    "ProductDetail",
    "ProductDetailRequest",
    "ProductSummary",
    "SearchRequest",
    "SearchResult",
    "SelectorSet",
    "SiteConfig",
    "SiteInfo",
]
