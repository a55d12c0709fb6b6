"""API Key 인증 의존성"""
import secrets
from typing import Optional

from fastapi import Header, HTTPException

from site_scraper.core.config import settings
from site_scraper.core.logging import logger


UNAUTHORIZED_MESSAGE = "Unauthorized: Invalid API key"


def is_valid_api_key(api_key: Optional[str], expected: Optional[str] = None) -> bool:
    """요청 헤더의 API Key가 설정값과 일치하는지 확인

    설정된 키가 비어 있으면 어떤 키도 통과하지 못합니다.
    """
    expected = settings.api_key if expected is None else expected
    if not api_key or not expected:
        return False
    return secrets.compare_digest(api_key.encode(), expected.encode())


async def verify_api_key(x_api_key: Optional[str] = Header(None)) -> None:
    """FastAPI 의존성: x-api-key 헤더 검증"""
    if not is_valid_api_key(x_api_key):
        logger.warning("[API] Rejected request with missing or invalid API key")
        raise HTTPException(status_code=401, detail=UNAUTHORIZED_MESSAGE)
