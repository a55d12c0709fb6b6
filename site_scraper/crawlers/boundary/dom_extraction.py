"""페이지 DOM 스냅샷에서 셀렉터 기반 원시 필드 추출

이 모듈은 브라우저(Playwright)와 분리된 순수 파싱 로직만 담습니다.
입력은 렌더링이 끝난 HTML과 셀렉터 묶음, 출력은 가공 전 필드 매핑입니다.
링크 절대화/이미지 폴백/상품 코드 추출 같은 정규화는 엔진 쪽(utils.url_utils)에서 합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from selectolax.parser import HTMLParser, Node

from site_scraper.schemas.scrape_schema import DetailSelectorSet, SelectorSet
from site_scraper.utils.text_utils import clean_text


@dataclass
class RawProductCard:
    title: Optional[str]
    price: Optional[str]
    image_src: Optional[str]
    image_data_src: Optional[str]
    link: Optional[str]
    brand: Optional[str] = None
    rating: Optional[str] = None


@dataclass
class RawProductDetail:
    title: Optional[str]
    price: Optional[str]
    description: Optional[str] = None
    brand: Optional[str] = None
    rating: Optional[str] = None
    # (src, data-src) 쌍, 문서 순서
    image_sources: List[Tuple[Optional[str], Optional[str]]] = field(default_factory=list)
    availability: Optional[str] = None


def _first(scope: Node, selector: str, descendants_only: bool) -> Optional[Node]:
    """querySelector와 같은 첫 매치. descendants_only면 scope 자신은 제외"""
    if not descendants_only:
        return scope.css_first(selector)
    for node in scope.css(selector):
        if node.mem_id != scope.mem_id:
            return node
    return None


def _text(scope: Node, selector: Optional[str], descendants_only: bool = True) -> Optional[str]:
    if not selector:
        return None
    node = _first(scope, selector, descendants_only)
    if node is None:
        return None
    return clean_text(node.text(deep=True))


def _attr(scope: Node, selector: str, name: str) -> Optional[str]:
    node = _first(scope, selector, descendants_only=True)
    if node is None:
        return None
    return node.attributes.get(name)


def extract_product_cards(html: str, selectors: SelectorSet) -> List[RawProductCard]:
    """상품 카드마다 원시 필드 추출 (문서 순서 유지)

    카드 안에서 셀렉터별 첫 번째 요소만 사용합니다.
    brand/rating은 셀렉터가 주어졌을 때만 추출합니다.
    """
    root = HTMLParser(html or "").root
    cards: List[RawProductCard] = []
    if root is None:
        return cards

    for card in root.css(selectors.product_card):
        cards.append(
            RawProductCard(
                title=_text(card, selectors.title),
                price=_text(card, selectors.price),
                image_src=_attr(card, selectors.image, "src"),
                image_data_src=_attr(card, selectors.image, "data-src"),
                link=_attr(card, selectors.link, "href"),
                brand=_text(card, selectors.brand),
                rating=_text(card, selectors.rating),
            )
        )

    return cards


def extract_product_detail(html: str, selectors: DetailSelectorSet) -> RawProductDetail:
    """상세 페이지 전체 문서에서 원시 필드 추출"""
    parser = HTMLParser(html or "")
    root = parser.root
    if root is None:
        return RawProductDetail(title=None, price=None)

    image_sources: List[Tuple[Optional[str], Optional[str]]] = []
    if selectors.images:
        for node in root.css(selectors.images):
            image_sources.append((node.attributes.get("src"), node.attributes.get("data-src")))

    return RawProductDetail(
        title=_text(root, selectors.title, descendants_only=False),
        price=_text(root, selectors.price, descendants_only=False),
        description=_text(root, selectors.description, descendants_only=False),
        brand=_text(root, selectors.brand, descendants_only=False),
        rating=_text(root, selectors.rating, descendants_only=False),
        image_sources=image_sources,
        availability=_text(root, selectors.availability, descendants_only=False),
    )
