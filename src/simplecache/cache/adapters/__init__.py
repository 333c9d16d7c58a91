"""Cache adapters — concrete storage backends."""

from simplecache.cache.adapters.redis import RedisStorage

__all__ = ["RedisStorage"]
