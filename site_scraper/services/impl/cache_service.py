"""검색 결과 캐시 서비스 - 프로세스 로컬 메모리, TTL 기반 만료

- 최대 크기/LRU 없음: 시간만이 유일한 제한 (조회 시점에 만료 항목 제거)
- 백그라운드 정리 작업 없음
"""
import time
from dataclasses import dataclass
from typing import Callable, Optional

from site_scraper.core.logging import logger
from site_scraper.schemas.scrape_schema import SearchResult


CACHE_TTL_SECONDS = 60 * 60  # 1시간 (고정)


def generate_cache_key(site_name: str, query: str, page: int) -> str:
    """
    (사이트, 검색어, 페이지)로 캐시 키 생성

    대소문자/공백 정규화를 하지 않습니다: "Drill"과 "drill"은 서로 다른 키입니다.

    Examples:
        >>> generate_cache_key("Acme", "drill", 1)
        'Acme:drill:1'
    """
    return f"{site_name}:{query}:{page}"


@dataclass
class CacheEntry:
    key: str
    data: SearchResult
    stored_at: float


class CacheService:
    """검색 결과 캐시

    저장된 SearchResult는 호출자와 참조를 공유하지 않습니다.
    조회 시 항상 cached=True인 복사본을 돌려줍니다.
    """

    def __init__(
        self,
        ttl_seconds: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            ttl_seconds: 만료 시간 (초)
            clock: 단조 증가 시계 (테스트에서 주입)
        """
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: str) -> Optional[SearchResult]:
        """
        캐시된 검색 결과 조회

        만료된 항목은 조회 시점에 삭제되고 None을 반환합니다.

        Args:
            key: 캐시 키

        Returns:
            cached=True로 표시된 SearchResult 복사본 또는 None
        """
        entry = self._entries.get(key)
        if entry is not None and self._clock() - entry.stored_at < self.ttl_seconds:
            logger.info(f"[Cache] Hit for key: {key}")
            return entry.data.model_copy(update={"cached": True}, deep=True)

        if self._entries.pop(key, None) is not None:
            logger.info(f"[Cache] Expired entry evicted: {key}")
        else:
            logger.debug(f"[Cache] Miss for key: {key}")
        return None

    def set(self, key: str, result: SearchResult) -> None:
        """
        검색 결과 저장 (같은 키는 새 타임스탬프로 덮어씀)

        Args:
            key: 캐시 키
            result: 저장할 결과 (cached 플래그는 False로 저장)
        """
        self._entries[key] = CacheEntry(
            key=key,
            data=result.model_copy(update={"cached": False}, deep=True),
            stored_at=self._clock(),
        )
        logger.info(f"[Cache] Set for key: {key}, TTL: {self.ttl_seconds}s")

    def clear(self) -> None:
        """모든 항목 즉시 삭제"""
        count = len(self._entries)
        self._entries.clear()
        logger.info(f"[Cache] Cleared {count} entries")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries
