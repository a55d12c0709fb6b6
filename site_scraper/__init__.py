"""설정 기반 멀티 사이트 상품 스크래퍼"""

__version__ = "2.0.0"
