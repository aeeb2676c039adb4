"""
Redis caching for translation overrides.
Caching is disabled when REDIS_URL is empty or the server is unreachable.
"""
import redis
import json
import logging
from typing import Optional, Any

from mailtext.core.config import settings

logger = logging.getLogger(__name__)


class RedisCache:
    """Redis cache manager with connection pooling."""

    def __init__(self, url: Optional[str] = None):
        """Initialize Redis connection pool."""
        self._url = url
        self._pool: Optional[redis.ConnectionPool] = None
        self._client: Optional[redis.Redis] = None
        self._connected = False

    def connect(self):
        """
        Connect to Redis server.
        Safe to call multiple times - will reuse existing connection.
        """
        if self._connected and self._client:
            return

        url = self._url if self._url is not None else settings.REDIS_URL
        if not url:
            logger.info("REDIS_URL not set, translation cache disabled")
            return

        try:
            self._pool = redis.ConnectionPool.from_url(
                url,
                max_connections=20,
                decode_responses=True,
                socket_timeout=5,
                socket_connect_timeout=5,
            )
            self._client = redis.Redis(connection_pool=self._pool)

            # Test connection
            self._client.ping()
            self._connected = True
            logger.info("Redis cache connected")
        except redis.RedisError as e:
            logger.warning(f"Redis connection failed: {e}. Caching disabled.")
            self._connected = False
            self._client = None

    def disconnect(self):
        """Disconnect from Redis."""
        if self._pool:
            self._pool.disconnect()
        self._connected = False
        self._client = None
        logger.info("Redis cache disconnected")

    @property
    def is_connected(self) -> bool:
        """Check if Redis is connected."""
        return self._connected and self._client is not None

    def get(self, key: str) -> Optional[Any]:
        """
        Get value from cache.

        Args:
            key: Cache key

        Returns:
            Decoded JSON value or None if not found/error
        """
        if not self.is_connected:
            return None

        try:
            value = self._client.get(key)
            if value:
                return json.loads(value)
            return None
        except (redis.RedisError, json.JSONDecodeError) as e:
            logger.warning(f"Redis GET error for key '{key}': {e}")
            return None

    def set(self, key: str, value: Any, ttl: int = 3600) -> bool:
        """
        Set value in cache with TTL.

        Args:
            key: Cache key
            value: Value to cache (JSON serialized)
            ttl: Time to live in seconds (default: 1 hour)

        Returns:
            True if successful, False otherwise
        """
        if not self.is_connected:
            return False

        try:
            self._client.setex(key, ttl, json.dumps(value))
            return True
        except redis.RedisError as e:
            logger.warning(f"Redis SET error for key '{key}': {e}")
            return False

    def delete(self, key: str) -> bool:
        """
        Delete key from cache.

        Args:
            key: Cache key

        Returns:
            True if deleted, False otherwise
        """
        if not self.is_connected:
            return False

        try:
            self._client.delete(key)
            return True
        except redis.RedisError as e:
            logger.warning(f"Redis DELETE error for key '{key}': {e}")
            return False

    def incr(self, key: str) -> Optional[int]:
        """
        Atomically increment an integer counter (created at 0).

        Returns:
            New value, or None if Redis is unavailable
        """
        if not self.is_connected:
            return None

        try:
            return self._client.incr(key)
        except redis.RedisError as e:
            logger.warning(f"Redis INCR error for key '{key}': {e}")
            return None

    def ping(self) -> bool:
        if not self.is_connected:
            return False
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False


# Global cache instance, connected on application startup
cache = RedisCache()
