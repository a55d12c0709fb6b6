"""네트워크/브라우저와 분리된 순수 DOM 추출 로직."""

from .dom_extraction import RawProductCard, RawProductDetail, extract_product_cards, extract_product_detail

__all__ = ["RawProductCard", "RawProductDetail", "extract_product_cards", "extract_product_detail"]
