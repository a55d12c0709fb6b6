"""Scrape Routes - HTTP 요청을 ScrapeOrchestrator로 위임하는 Translator

입력 검증(사이트 설정/셀렉터 누락)은 스키마 단계에서 끝나고,
엔진은 검증된 값만 받습니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from site_scraper.core.exceptions import ProductDetailsException, ScrapeFailedException
from site_scraper.core.logging import logger
from site_scraper.core.security import verify_api_key
from site_scraper.engine import ScrapeOrchestrator
from site_scraper.schemas.scrape_schema import (
    CacheClearResponse,
    ErrorResponse,
    ProductDetail,
    ProductDetailRequest,
    SearchRequest,
    SearchResult,
)

router = APIRouter(prefix="/api", tags=["scrape"], dependencies=[Depends(verify_api_key)])

# 싱글톤 엔진 (브라우저 프로세스 1개 공유)
_orchestrator: Optional[ScrapeOrchestrator] = None


def get_orchestrator() -> ScrapeOrchestrator:
    """ScrapeOrchestrator 싱글톤"""
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = ScrapeOrchestrator()
    return _orchestrator


@router.post(
    "/scrape/search",
    response_model=SearchResult,
    responses={500: {"model": ErrorResponse}},
)
async def scrape_search(
    request: SearchRequest,
    orchestrator: ScrapeOrchestrator = Depends(get_orchestrator),
):
    """상품 검색 API

    Flow:
        1. 요청 검증 (siteConfig 필수 필드/셀렉터, query, page)
        2. 엔진에 위임 (Cache → Browser)
        3. 실패 시 500 + 감싼 에러 메시지
    """
    logger.info(
        f"[API] Search request: site={request.site_config.name}, "
        f"query (length: {len(request.query)}), page={request.page}"
    )
    try:
        return await orchestrator.search(request.site_config, request.query, request.page)
    except ScrapeFailedException as e:
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Scraping failed", message=e.message).model_dump(),
        )


@router.post(
    "/scrape/product",
    response_model=ProductDetail,
    responses={500: {"model": ErrorResponse}},
)
async def scrape_product(
    request: ProductDetailRequest,
    orchestrator: ScrapeOrchestrator = Depends(get_orchestrator),
):
    """상품 상세 API"""
    logger.info(f"[API] Product request: site={request.site_config.name}")
    try:
        return await orchestrator.get_product_details(
            request.site_config,
            request.product_url,
            request.selectors,
        )
    except ProductDetailsException as e:
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Failed to get product details", message=e.message).model_dump(),
        )


@router.post("/cache/clear", response_model=CacheClearResponse)
async def clear_cache(orchestrator: ScrapeOrchestrator = Depends(get_orchestrator)):
    """캐시 전체 삭제"""
    orchestrator.clear_cache()
    return CacheClearResponse(success=True, message="Cache cleared successfully")
