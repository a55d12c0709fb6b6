"""브라우저 세션/DOM 추출 모듈.

공개 API는 이 파일에서만 export합니다.
"""

from .boundary import RawProductCard, RawProductDetail, extract_product_cards, extract_product_detail
from .playwright import BrowserSession, configure_page

__all__ = [
    "BrowserSession",
    "configure_page",
    "RawProductCard",
    "RawProductDetail",
    "extract_product_cards",
    "extract_product_detail",
]
