"""로깅 설정

- 로거 이름: site_scraper (모듈별로 [Scraper]/[Playwright]/[Cache]/[API] 태그를 메시지에 붙임)
- production: DEBUG 비활성화, 간단한 포맷
"""
import logging
import sys
from typing import Optional

from site_scraper.core.config import Settings, settings


PRODUCTION_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DEVELOPMENT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"


def resolve_log_level(config: Settings) -> str:
    """production에서는 최소 INFO"""
    if config.is_production and config.log_level == "DEBUG":
        return "INFO"
    return config.log_level


def setup_logging(config: Optional[Settings] = None) -> logging.Logger:
    """site_scraper 로거 초기화 (핸들러는 한 번만 추가)"""
    config = config or settings
    logger = logging.getLogger("site_scraper")
    level = getattr(logging, resolve_log_level(config))
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(
            fmt=PRODUCTION_FORMAT if config.is_production else DEVELOPMENT_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger


logger = setup_logging()


def truncate_for_log(value: Optional[str], max_length: int = 100) -> str:
    """검색어/URL을 로그 한 줄에 맞게 자름"""
    if not value:
        return "[empty]"
    if len(value) > max_length:
        return value[:max_length] + "..."
    return value
