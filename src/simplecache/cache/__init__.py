"""simplecache cache — simplified key-value cache contract over a storage backend."""

from simplecache.cache.adapter import SimpleCacheAdapter
from simplecache.cache.adapters.redis import RedisStorage
from simplecache.cache.auto_configuration import SimpleCacheAutoConfiguration
from simplecache.cache.delegator import SimpleCacheDelegator
from simplecache.cache.ports.inbound import SimpleCache
from simplecache.cache.ports.outbound import FlushableStorage, StorageBackend, TtlAwareStorage
from simplecache.cache.types import CacheLookup, StorageOptions

__all__ = [
    "CacheLookup",
    "FlushableStorage",
    "RedisStorage",
    "SimpleCache",
    "SimpleCacheAdapter",
    "SimpleCacheAutoConfiguration",
    "SimpleCacheDelegator",
    "StorageBackend",
    "StorageOptions",
    "TtlAwareStorage",
]
