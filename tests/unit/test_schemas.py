"""Pydantic 스키마 테스트."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from site_scraper.schemas.scrape_schema import (
    DetailSelectorSet,
    ProductDetailRequest,
    ProductSummary,
    SearchRequest,
    SearchResult,
    SiteConfig,
)
from tests.fixtures import DETAIL_SELECTORS, SITE_CONFIGS


def test_site_config_from_camel_case():
    config = SiteConfig.model_validate(SITE_CONFIGS["acme_full"])

    assert config.search_url == "https://acme.test/s?q={query}"
    assert config.selectors.product_card == ".card"
    assert config.selectors.brand == ".b"


def test_site_config_missing_required_selector():
    with pytest.raises(ValidationError) as exc_info:
        SiteConfig.model_validate(SITE_CONFIGS["missing_link_selector"])
    assert "link" in str(exc_info.value)


def test_site_config_empty_selector_rejected():
    data = {**SITE_CONFIGS["acme"], "selectors": {**SITE_CONFIGS["acme"]["selectors"], "price": ""}}
    with pytest.raises(ValidationError):
        SiteConfig.model_validate(data)


def test_site_config_requires_query_placeholder():
    with pytest.raises(ValidationError):
        SiteConfig.model_validate(SITE_CONFIGS["no_placeholder"])


def test_search_request_defaults_page():
    request = SearchRequest.model_validate({"siteConfig": SITE_CONFIGS["acme"], "query": "drill"})
    assert request.page == 1


@pytest.mark.parametrize("payload", [
    {"query": "", "page": 1},
    {"query": "   ", "page": 1},
    {"query": "drill", "page": 0},
])
def test_search_request_invalid(payload):
    with pytest.raises(ValidationError):
        SearchRequest.model_validate({"siteConfig": SITE_CONFIGS["acme"], **payload})


def test_detail_request_only_needs_site_name():
    request = ProductDetailRequest.model_validate({
        "siteConfig": {"name": "Acme"},
        "productUrl": "https://acme.test/product/42",
        "selectors": DETAIL_SELECTORS["minimal"],
    })
    assert request.site_config.name == "Acme"
    assert request.selectors.images is None


def test_detail_request_rejects_non_http_url():
    with pytest.raises(ValidationError):
        ProductDetailRequest.model_validate({
            "siteConfig": {"name": "Acme"},
            "productUrl": "javascript:alert(1)",
            "selectors": DETAIL_SELECTORS["minimal"],
        })


def test_detail_selectors_require_title_and_price():
    with pytest.raises(ValidationError):
        DetailSelectorSet.model_validate({"title": "h1"})


def test_search_result_serializes_camel_case():
    result = SearchResult(
        site="Acme",
        query="drill",
        page=1,
        total_results=1,
        results=[ProductSummary(product_code="42", title="Drill", price="$99.00")],
        timestamp="2024-01-01T00:00:00.000Z",
    )
    data = result.model_dump(by_alias=True)

    assert data["totalResults"] == 1
    assert data["cached"] is False
    assert data["results"][0]["productCode"] == "42"


def test_search_result_total_must_match_results():
    with pytest.raises(ValidationError):
        SearchResult(
            site="Acme",
            query="drill",
            page=1,
            total_results=2,
            results=[ProductSummary(title="Drill", price="$99.00")],
            timestamp="2024-01-01T00:00:00.000Z",
        )
