"""simplecache — a simplified key-value cache contract over existing storage backends."""

from simplecache.cache import (
    CacheLookup,
    FlushableStorage,
    SimpleCache,
    SimpleCacheAdapter,
    SimpleCacheDelegator,
    StorageBackend,
    StorageOptions,
    TtlAwareStorage,
)
from simplecache.kernel.exceptions import InvalidArgumentError, InvalidKeyError, SimpleCacheException

__version__ = "0.1.0"

__all__ = [
    "CacheLookup",
    "FlushableStorage",
    "InvalidArgumentError",
    "InvalidKeyError",
    "SimpleCache",
    "SimpleCacheAdapter",
    "SimpleCacheDelegator",
    "SimpleCacheException",
    "StorageBackend",
    "StorageOptions",
    "TtlAwareStorage",
]
