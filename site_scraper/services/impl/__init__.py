from .cache_service import CACHE_TTL_SECONDS, CacheEntry, CacheService, generate_cache_key

__all__ = ["CACHE_TTL_SECONDS", "CacheEntry", "CacheService", "generate_cache_key"]
