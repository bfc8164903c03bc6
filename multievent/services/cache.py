"""
Cache Service Singleton - Multi-Event Scoring
multievent/services/cache.py

Provides a singleton Redis cache instance with TTL constants.
Returns None when caching is disabled or Redis is unreachable, so callers
fall back to computing responses directly.
"""
import logging
from typing import Optional

import redis

from multievent.config import settings
from multievent.services.redis_cache import RedisCache

logger = logging.getLogger(__name__)

# TTL constants (in seconds)
TTL_EVENTS = settings.CACHE_TTL_EVENTS

# Cache key prefixes
EVENTS_KEY = "events:all"
EVENT_KEY_PREFIX = "events:"

# Singleton instance
_cache: Optional[RedisCache] = None


def get_cache() -> Optional[RedisCache]:
    """
    Get or create Redis cache instance.

    Returns:
        RedisCache instance if caching is enabled and Redis answers, None otherwise.
    """
    global _cache
    if not settings.CACHE_ENABLED:
        return None
    if _cache is None:
        try:
            cache = RedisCache()
            cache.ping()
            _cache = cache
        except (redis.RedisError, ConnectionError) as e:
            logger.warning("Redis unavailable at %s, serving uncached: %s", settings.REDIS_URL, e)
            _cache = None
    return _cache


def reset_cache() -> None:
    """
    Reset the cache singleton.

    Useful for testing or when Redis connection needs to be re-established.
    """
    global _cache
    _cache = None
