"""Pydantic 스키마 정의

속성은 snake_case, JSON 필드는 camelCase(productCard, searchUrl, totalResults ...)로 주고받습니다.
입력은 두 형태 모두 허용합니다.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


QUERY_PLACEHOLDER = "{query}"


class CamelModel(BaseModel):
    """camelCase alias 공통 베이스"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SelectorSet(CamelModel):
    """검색 결과 페이지 셀렉터 (엔진은 문법을 해석하지 않고 그대로 전달)"""
    product_card: str = Field(..., min_length=1, description="상품 카드 셀렉터")
    title: str = Field(..., min_length=1, description="상품명 셀렉터")
    price: str = Field(..., min_length=1, description="가격 셀렉터")
    image: str = Field(..., min_length=1, description="이미지 셀렉터")
    link: str = Field(..., min_length=1, description="상품 링크 셀렉터")
    brand: Optional[str] = Field(None, description="(선택) 브랜드 셀렉터")
    rating: Optional[str] = Field(None, description="(선택) 평점 셀렉터")


class DetailSelectorSet(CamelModel):
    """상품 상세 페이지 셀렉터"""
    title: str = Field(..., min_length=1)
    price: str = Field(..., min_length=1)
    description: Optional[str] = None
    brand: Optional[str] = None
    rating: Optional[str] = None
    images: Optional[str] = None
    availability: Optional[str] = None


class SiteInfo(CamelModel):
    """사이트 식별 정보 (상세 조회는 이름만 사용)"""
    name: str = Field(..., min_length=1, max_length=200, description="사이트 이름")


class SiteConfig(SiteInfo):
    """사이트 설정 - 요청마다 전달되며 저장되지 않음"""
    search_url: str = Field(..., min_length=1, max_length=2048, description="{query} 자리표시자가 있는 검색 URL")
    selectors: SelectorSet

    @field_validator("search_url")
    @classmethod
    def validate_search_url(cls, v: str) -> str:
        if QUERY_PLACEHOLDER not in v:
            raise ValueError(f"searchUrl must contain a {QUERY_PLACEHOLDER} placeholder")
        if not v.startswith(("http://", "https://")):
            raise ValueError("searchUrl must start with http:// or https://")
        return v


class ProductSummary(CamelModel):
    """검색 결과 상품 1건 (title/price 둘 다 있어야 결과에 포함)"""
    product_code: Optional[str] = None
    title: str
    brand: Optional[str] = None
    price: str
    rating: Optional[str] = None
    image: Optional[str] = None
    url: Optional[str] = None


class ProductDetail(CamelModel):
    """상품 상세 정보"""
    site: str
    url: str
    title: Optional[str] = None
    price: Optional[str] = None
    description: Optional[str] = None
    brand: Optional[str] = None
    rating: Optional[str] = None
    images: list[str] = Field(default_factory=list)
    availability: Optional[str] = None
    timestamp: str


class SearchResult(CamelModel):
    """검색 결과"""
    site: str
    query: str
    page: int = Field(..., ge=1)
    total_results: int = Field(..., ge=0)
    results: list[ProductSummary] = Field(default_factory=list)
    cached: bool = False
    timestamp: str

    @model_validator(mode="after")
    def check_total_results(self) -> "SearchResult":
        if self.total_results != len(self.results):
            raise ValueError(
                f"totalResults ({self.total_results}) must equal number of results ({len(self.results)})"
            )
        return self


class SearchRequest(CamelModel):
    """검색 요청"""
    site_config: SiteConfig
    query: str = Field(..., min_length=1, max_length=500)
    page: int = Field(1, ge=1, le=1000)

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("query must not be blank")
        return v


class ProductDetailRequest(CamelModel):
    """상품 상세 요청"""
    site_config: SiteInfo
    product_url: str = Field(..., min_length=1, max_length=2048)
    selectors: DetailSelectorSet

    @field_validator("product_url")
    @classmethod
    def validate_product_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("productUrl must start with http:// or https://")
        return v


class CacheClearResponse(BaseModel):
    success: bool
    message: str


class ErrorResponse(BaseModel):
    """에러 응답"""
    error: str
    message: Optional[str] = None


class HealthResponse(CamelModel):
    """헬스 체크 응답"""
    status: str
    timestamp: datetime
    version: str
    browser_started: bool
    cache_entries: int
