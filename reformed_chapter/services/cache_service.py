"""Redis caching service for the resources snapshot."""
import hashlib
import json
import logging
from typing import Any, Optional

import redis
from redis.exceptions import RedisError

from reformed_chapter.config import get_settings

logger = logging.getLogger(__name__)

RESOURCES_KEY_PREFIX = "resources"

# Global Redis client
_redis_client: Optional[redis.Redis] = None


def initialize_redis() -> None:
    """Initialize the Redis client."""
    global _redis_client

    if _redis_client is not None:
        logger.warning("Redis client already initialized")
        return

    settings = get_settings()

    if not settings.cache_enabled:
        logger.info("Caching is disabled in settings")
        return

    try:
        _redis_client = redis.from_url(
            settings.redis_url,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
            health_check_interval=30
        )
        _redis_client.ping()
        logger.info(f"Redis client initialized: {settings.redis_url}")
    except RedisError as e:
        logger.error(f"Failed to initialize Redis client: {e}")
        _redis_client = None
        # Don't raise - degrade gracefully without cache


def close_redis() -> None:
    """Close the Redis client connection."""
    global _redis_client

    if _redis_client is not None:
        try:
            _redis_client.close()
            logger.info("Redis client closed")
        except RedisError as e:
            logger.error(f"Error closing Redis client: {e}")
        finally:
            _redis_client = None


def _get_client() -> Optional[redis.Redis]:
    """Get the Redis client if available."""
    return _redis_client


def _generate_cache_key(prefix: str, *args: Any) -> str:
    """Generate a cache key from prefix and arguments.

    Args:
        prefix: Key prefix (e.g., 'resources')
        *args: Values to include in the key

    Returns:
        Cache key string
    """
    normalized = []
    for arg in args:
        if isinstance(arg, str):
            normalized.append(arg.lower().strip())
        elif isinstance(arg, (dict, list)):
            normalized.append(json.dumps(arg, sort_keys=True))
        else:
            normalized.append(str(arg))

    content = ":".join(normalized)
    content_hash = hashlib.sha256(content.encode()).hexdigest()[:16]

    return f"{prefix}:{content_hash}"


class CacheService:
    """Service for caching the resources table snapshot."""

    @staticmethod
    def get(key: str) -> Optional[Any]:
        """Get a value from cache.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found or error
        """
        client = _get_client()
        if client is None:
            return None

        try:
            value = client.get(key)
            if value is None:
                logger.info(f"Cache miss for key: {key[:50]}")
                return None

            logger.info(f"Cache hit for key: {key[:50]}")

            try:
                return json.loads(value)
            except json.JSONDecodeError:
                return value

        except RedisError as e:
            logger.error(f"Cache get error for key {key}: {e}")
            return None

    @staticmethod
    def set(key: str, value: Any, ttl: int = 0) -> bool:
        """Set a value in cache.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time to live in seconds (0 = no expiry)

        Returns:
            True if successful, False otherwise
        """
        client = _get_client()
        if client is None:
            return False

        try:
            if isinstance(value, (dict, list)):
                serialized = json.dumps(value, default=str)
            else:
                serialized = str(value)

            if ttl > 0:
                client.setex(key, ttl, serialized)
            else:
                client.set(key, serialized)

            return True

        except RedisError as e:
            logger.error(f"Cache set error for key {key}: {e}")
            return False

    @staticmethod
    def clear_pattern(pattern: str) -> int:
        """Clear all keys matching a pattern.

        Args:
            pattern: Key pattern (e.g., 'resources:*')

        Returns:
            Number of keys deleted
        """
        client = _get_client()
        if client is None:
            return 0

        try:
            keys = client.keys(pattern)
            if keys:
                return client.delete(*keys)
            return 0
        except RedisError as e:
            logger.error(f"Cache clear pattern error for {pattern}: {e}")
            return 0

    @staticmethod
    def get_resources() -> Optional[list]:
        """Get the cached resources snapshot."""
        key = _generate_cache_key(RESOURCES_KEY_PREFIX, "all")
        return CacheService.get(key)

    @staticmethod
    def set_resources(rows: list) -> bool:
        """Cache the resources snapshot (short TTL; the table is edited by hand)."""
        settings = get_settings()
        key = _generate_cache_key(RESOURCES_KEY_PREFIX, "all")
        return CacheService.set(key, rows, ttl=settings.cache_ttl_resources)

    @staticmethod
    def invalidate_resources() -> int:
        return CacheService.clear_pattern(f"{RESOURCES_KEY_PREFIX}:*")
