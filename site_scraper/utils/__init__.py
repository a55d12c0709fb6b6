"""정규화 유틸리티 - export only."""

from .text_utils import clean_text, utc_timestamp
from .url_utils import (
    build_search_url,
    extract_product_code,
    get_origin,
    normalize_href,
    resolve_image_source,
    resolve_url,
)

__all__ = [
    "clean_text",
    "utc_timestamp",
    "build_search_url",
    "extract_product_code",
    "get_origin",
    "normalize_href",
    "resolve_image_source",
    "resolve_url",
]
