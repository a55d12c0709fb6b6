"""헬스 체크 엔드포인트"""
from datetime import datetime

from fastapi import APIRouter, Depends

from site_scraper import __version__
from site_scraper.api.routes.scrape_routes import get_orchestrator
from site_scraper.core.config import settings
from site_scraper.engine import ScrapeOrchestrator
from site_scraper.schemas.scrape_schema import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(orchestrator: ScrapeOrchestrator = Depends(get_orchestrator)):
    """
    헬스 체크 엔드포인트

    - 서버 상태
    - 브라우저 실행 여부 (lazy-launch이므로 미실행도 정상)
    - 캐시 항목 수
    """
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(),
        version=__version__,
        browser_started=orchestrator.session.is_started,
        cache_entries=len(orchestrator.cache),
    )


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "status": "online",
        "service": settings.api_title,
        "version": __version__,
        "endpoints": {
            "search": "POST /api/scrape/search",
            "product": "POST /api/scrape/product",
            "cache": "POST /api/cache/clear",
        },
        "docs": "/docs",
    }
