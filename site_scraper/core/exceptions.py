"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


class ScraperException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


class BrowserException(ScraperException):
    """브라우저 실행/세션 오류"""
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, "BROWSER_ERROR", details)


class ScrapeFailedException(ScraperException):
    """검색 페이지 스크래핑 실패 (네비게이션/타임아웃/추출 오류를 하나로 감쌈)"""
    def __init__(self, site: str, cause: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to scrape {site}: {cause}"
        super().__init__(message, "SCRAPE_FAILED", details or {"site": site, "cause": cause})


class ProductDetailsException(ScraperException):
    """상품 상세 페이지 추출 실패"""
    def __init__(self, cause: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to get product details: {cause}"
        super().__init__(message, "PRODUCT_DETAILS_FAILED", details or {"cause": cause})
