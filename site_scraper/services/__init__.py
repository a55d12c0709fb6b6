"""서비스 레이어 - export only."""

from .impl import CacheService

__all__ = ["CacheService"]
