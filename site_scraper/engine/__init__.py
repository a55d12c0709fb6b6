"""Engine Layer - 설정 기반 추출 엔진

- ScrapeOrchestrator: 검색/상세 추출 진입점 (캐시 → 브라우저 → 정규화)
- normalize_product_card: 원시 카드 필드 → ProductSummary
"""

from .orchestrator import (
    NAVIGATION_TIMEOUT_MS,
    PRODUCT_CARD_TIMEOUT_MS,
    SETTLE_DELAY_MS,
    ScrapeOrchestrator,
    describe_error,
    normalize_product_card,
    normalize_product_detail,
)

__all__ = [
    "NAVIGATION_TIMEOUT_MS",
    "PRODUCT_CARD_TIMEOUT_MS",
    "SETTLE_DELAY_MS",
    "ScrapeOrchestrator",
    "describe_error",
    "normalize_product_card",
    "normalize_product_detail",
]
