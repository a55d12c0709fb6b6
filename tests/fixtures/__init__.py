"""테스트 자산(데이터) 레이어

규칙:
- 로직 없음 (단순 dict/str/primitive)
- 엔진/네트워크 의존 없음
"""

from .pages import PAGES
from .site_configs import SITE_CONFIGS, DETAIL_SELECTORS

__all__ = [
    "PAGES",
    "SITE_CONFIGS",
    "DETAIL_SELECTORS",
]
