"""simplecache kernel — exception hierarchy with zero external dependencies."""

from simplecache.kernel.exceptions import (
    CacheConfigurationError,
    CacheException,
    InvalidArgumentError,
    InvalidKeyError,
    SimpleCacheException,
)

__all__ = [
    "CacheConfigurationError",
    "CacheException",
    "InvalidArgumentError",
    "InvalidKeyError",
    "SimpleCacheException",
]
