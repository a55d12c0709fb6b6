"""텍스트/시간 유틸"""
from datetime import datetime, timezone
from typing import Optional


def clean_text(value: Optional[str]) -> Optional[str]:
    """textContent.trim()과 같은 의미로 앞뒤 공백 제거

    요소가 없으면(None) None을 그대로 돌려줍니다. 빈 문자열은 빈 문자열로 남깁니다.
    """
    if value is None:
        return None
    return value.strip()


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """UTC ISO-8601 타임스탬프 (밀리초, Z 접미사)

    Examples:
        >>> utc_timestamp(datetime(2024, 1, 1, tzinfo=timezone.utc))
        '2024-01-01T00:00:00.000Z'
    """
    current = now or datetime.now(timezone.utc)
    return current.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
