"""ScrapeOrchestrator - 설정 기반 추출 엔진

Flow (search):
    1. (site, query, page) 캐시 키 조회 → 히트면 브라우저 작업 없이 반환
    2. 격리된 page context 확보 → 검색 URL 이동 (networkidle, 30s)
    3. productCard 대기 (15s) → 고정 2s 대기
    4. DOM 스냅샷에서 카드별 원시 필드 추출 → 정규화 → title/price 없는 카드 제외
    5. 결과 캐시 저장 후 반환

실패(네비게이션/타임아웃/추출)는 모두 ScrapeFailedException 하나로 감싸 전파합니다.
재시도/부분 결과 없음. page context는 예외 전파 전에 항상 닫힙니다.
같은 키에 대한 동시 요청은 각자 스크래핑하며 나중에 끝난 쪽이 캐시에 남습니다.
"""

from __future__ import annotations

from typing import Optional, Union

from playwright.async_api import Page

from site_scraper.core.exceptions import ProductDetailsException, ScrapeFailedException, ScraperException
from site_scraper.core.logging import logger, truncate_for_log
from site_scraper.crawlers.boundary import (
    RawProductCard,
    RawProductDetail,
    extract_product_cards,
    extract_product_detail,
)
from site_scraper.crawlers.playwright import BrowserSession
from site_scraper.schemas.scrape_schema import (
    DetailSelectorSet,
    ProductDetail,
    ProductSummary,
    SearchResult,
    SiteConfig,
    SiteInfo,
)
from site_scraper.services.impl.cache_service import CacheService, generate_cache_key
from site_scraper.utils.text_utils import utc_timestamp
from site_scraper.utils.url_utils import (
    build_search_url,
    extract_product_code,
    normalize_href,
    resolve_image_source,
    resolve_url,
)


NAVIGATION_TIMEOUT_MS = 30000
PRODUCT_CARD_TIMEOUT_MS = 15000
# 늦게 렌더링되는 클라이언트 콘텐츠를 위한 고정 대기 (적응형 아님)
SETTLE_DELAY_MS = 2000


def describe_error(error: Exception) -> str:
    """감싸는 에러 메시지에 넣을 원인 문자열 (내부 예외는 에러 코드 없이 message만)"""
    if isinstance(error, ScraperException):
        return error.message
    return str(error)


def normalize_product_card(raw: RawProductCard, page_url: str) -> Optional[ProductSummary]:
    """원시 카드 → ProductSummary. title/price 중 하나라도 없으면 None"""
    if not raw.title or not raw.price:
        return None

    url = normalize_href(raw.link, page_url)
    return ProductSummary(
        product_code=extract_product_code(url),
        title=raw.title,
        brand=raw.brand,
        price=raw.price,
        rating=raw.rating,
        image=resolve_image_source(raw.image_src, raw.image_data_src),
        url=url,
    )


def normalize_product_detail(
    raw: RawProductDetail,
    site_name: str,
    product_url: str,
    page_url: str,
) -> ProductDetail:
    images: list[str] = []
    for src, data_src in raw.image_sources:
        resolved = resolve_url(src, page_url) or resolve_url(data_src, page_url)
        if resolved:
            images.append(resolved)

    return ProductDetail(
        site=site_name,
        url=product_url,
        title=raw.title,
        price=raw.price,
        description=raw.description,
        brand=raw.brand,
        rating=raw.rating,
        images=images,
        availability=raw.availability,
        timestamp=utc_timestamp(),
    )


class ScrapeOrchestrator:
    """검색/상세 추출 엔진

    브라우저 세션과 캐시는 주입 가능 (없으면 내부 생성).
    """

    def __init__(
        self,
        session: Optional[BrowserSession] = None,
        cache: Optional[CacheService] = None,
    ):
        self.session = session if session is not None else BrowserSession()
        self.cache = cache if cache is not None else CacheService()

    async def init(self) -> None:
        """브라우저 미리 띄우기 (이미 실행 중이면 no-op)"""
        await self.session.ensure_started()

    async def close(self) -> None:
        """브라우저 종료 (프로세스 종료 시 1회)"""
        await self.session.shutdown()

    def clear_cache(self) -> None:
        self.cache.clear()

    async def search(self, site_config: SiteConfig, query: str, page: int = 1) -> SearchResult:
        """
        사이트 설정으로 상품 검색

        Args:
            site_config: 사이트 설정 (검증 완료된 값)
            query: 검색어
            page: 페이지 번호 (1부터)

        Returns:
            SearchResult (캐시 히트면 cached=True)

        Raises:
            ScrapeFailedException: 네비게이션/타임아웃/추출 실패
        """
        cache_key = generate_cache_key(site_config.name, query, page)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        logger.info(
            f"[Scraper] Search {site_config.name}: query='{truncate_for_log(query)}', page={page}"
        )

        try:
            async with self.session.isolated_page() as browser_page:
                products = await self._scrape_search_page(browser_page, site_config, query)
        except Exception as e:
            logger.error(f"[Scraper] Scraping error ({site_config.name}): {type(e).__name__}: {e}")
            raise ScrapeFailedException(site_config.name, describe_error(e)) from e

        result = SearchResult(
            site=site_config.name,
            query=query,
            page=page,
            total_results=len(products),
            results=products,
            cached=False,
            timestamp=utc_timestamp(),
        )
        self.cache.set(cache_key, result)

        logger.info(f"[Scraper] {site_config.name}: {result.total_results} products")
        return result

    async def _scrape_search_page(
        self,
        browser_page: Page,
        site_config: SiteConfig,
        query: str,
    ) -> list[ProductSummary]:
        search_url = build_search_url(site_config.search_url, query)
        logger.debug(f"[Scraper] Navigating: {truncate_for_log(search_url, max_length=300)}")

        await browser_page.goto(search_url, wait_until="networkidle", timeout=NAVIGATION_TIMEOUT_MS)
        await browser_page.wait_for_selector(
            site_config.selectors.product_card,
            timeout=PRODUCT_CARD_TIMEOUT_MS,
        )
        await browser_page.wait_for_timeout(SETTLE_DELAY_MS)

        html = await browser_page.content()
        page_url = browser_page.url or search_url

        raw_cards = extract_product_cards(html, site_config.selectors)
        products = [
            product
            for product in (normalize_product_card(raw, page_url) for raw in raw_cards)
            if product is not None
        ]
        dropped = len(raw_cards) - len(products)
        if dropped:
            logger.debug(f"[Scraper] Dropped {dropped}/{len(raw_cards)} cards without title/price")
        return products

    async def get_product_details(
        self,
        site_config: Union[SiteInfo, SiteConfig],
        product_url: str,
        detail_selectors: DetailSelectorSet,
    ) -> ProductDetail:
        """
        상품 상세 페이지 추출 (캐시 없음)

        NOTE: 검색과 달리 특정 셀렉터 대기 없이 networkidle + 고정 대기만 사용합니다.

        Raises:
            ProductDetailsException: 네비게이션/타임아웃/추출 실패
        """
        logger.info(
            f"[Scraper] Product details {site_config.name}: {truncate_for_log(product_url, max_length=300)}"
        )

        try:
            async with self.session.isolated_page() as browser_page:
                await browser_page.goto(
                    product_url,
                    wait_until="networkidle",
                    timeout=NAVIGATION_TIMEOUT_MS,
                )
                await browser_page.wait_for_timeout(SETTLE_DELAY_MS)

                html = await browser_page.content()
                page_url = browser_page.url or product_url
                raw = extract_product_detail(html, detail_selectors)
                return normalize_product_detail(raw, site_config.name, product_url, page_url)
        except Exception as e:
            logger.error(f"[Scraper] Product details error ({site_config.name}): {type(e).__name__}: {e}")
            raise ProductDetailsException(describe_error(e)) from e
