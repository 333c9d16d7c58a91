"""Cache ports — inbound contract and outbound storage interfaces."""

from simplecache.cache.ports.inbound import SimpleCache, Ttl
from simplecache.cache.ports.outbound import FlushableStorage, StorageBackend, TtlAwareStorage

__all__ = ["FlushableStorage", "SimpleCache", "StorageBackend", "Ttl", "TtlAwareStorage"]
