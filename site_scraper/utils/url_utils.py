"""URL 정규화 유틸리티

검색 URL 생성, 상대 링크 절대화, 이미지 소스 폴백, 상품 코드 추출.
"""
import re
from typing import Optional
from urllib.parse import quote, urljoin, urlparse


PLACEHOLDER_IMAGE_MARKER = "data:image"

# encodeURIComponent가 인코딩하지 않는 문자 (영숫자와 "-_.~"는 quote가 항상 유지)
_URI_COMPONENT_SAFE = "!*'()"

# 순서대로 시도, 첫 매치 사용
# "/p" 뒤가 "product"인 경로(/product/AB12)는 두 번째 패턴이 처리
_PRODUCT_CODE_PATTERNS = (
    re.compile(r"/p(?!roduct)([A-Z0-9]+)", re.IGNORECASE),
    re.compile(r"product[/\-]([A-Z0-9]+)", re.IGNORECASE),
)


def build_search_url(template: str, query: str) -> str:
    """검색 URL 템플릿의 {query}를 인코딩된 검색어로 1회 치환

    Examples:
        >>> build_search_url("https://acme.test/s?q={query}", "drill bits")
        'https://acme.test/s?q=drill%20bits'
    """
    return template.replace("{query}", quote(query, safe=_URI_COMPONENT_SAFE), 1)


def get_origin(url: str) -> str:
    """URL의 origin (scheme://host[:port])"""
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        return ""
    return f"{parsed.scheme}://{parsed.netloc}"


def normalize_href(href: Optional[str], page_url: str) -> Optional[str]:
    """상대/프로토콜-상대 href를 현재 페이지 기준 절대 URL로 정규화합니다.

    - "http(s)://..." -> 그대로
    - "//host/path" -> "{page scheme}://host/path"
    - "/path" -> "{page origin}/path"
    - 그 외 상대 경로 -> 페이지 URL 기준 join

    Examples:
        >>> normalize_href("/product/42", "https://shop.example/search?q=x")
        'https://shop.example/product/42'
    """
    if href is None:
        return None

    h = href.strip()
    if not h:
        return None

    if h.lower().startswith(("http://", "https://")):
        return h

    if h.startswith("//"):
        scheme = urlparse(page_url).scheme or "https"
        return f"{scheme}:{h}"

    if h.startswith("/"):
        origin = get_origin(page_url)
        return f"{origin}{h}" if origin else h

    return urljoin(page_url, h)


def resolve_url(src: Optional[str], page_url: str) -> Optional[str]:
    """이미지 src 등 리소스 경로를 페이지 URL 기준으로 해석 (img.src 프로퍼티와 동일)"""
    if not src or not src.strip():
        return None
    return urljoin(page_url, src.strip())


def is_placeholder_image(src: Optional[str]) -> bool:
    """src 어디에든 data:image가 들어 있으면 placeholder (lazy-load 스텁)"""
    return bool(src) and PLACEHOLDER_IMAGE_MARKER in src


def resolve_image_source(src: Optional[str], data_src: Optional[str]) -> Optional[str]:
    """이미지 URL 결정 - src 우선, 없거나 placeholder(data:image...)면 data-src

    Examples:
        >>> resolve_image_source("data:image/gif;base64,R0lGOD", "https://cdn.example/a.jpg")
        'https://cdn.example/a.jpg'
    """
    if src and src.strip() and not is_placeholder_image(src):
        return src
    return data_src or None


def extract_product_code(url: Optional[str]) -> Optional[str]:
    """상품 링크에서 상품 코드 추출

    Examples:
        >>> extract_product_code("https://shop.example/p7X42AB")
        '7X42AB'
        >>> extract_product_code("https://shop.example/product/AB12")
        'AB12'
        >>> extract_product_code("/shop/item")

    Args:
        url: 정규화된 상품 링크

    Returns:
        상품 코드 또는 None
    """
    if not url:
        return None

    for pattern in _PRODUCT_CODE_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)

    return None
