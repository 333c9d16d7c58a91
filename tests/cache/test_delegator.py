"""Tests for SimpleCacheDelegator and SimpleCacheAutoConfiguration."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import pytest

from simplecache.cache.adapter import SimpleCacheAdapter
from simplecache.cache.auto_configuration import SimpleCacheAutoConfiguration
from simplecache.cache.delegator import SimpleCacheDelegator
from simplecache.cache.types import StorageOptions
from simplecache.core.config import Config
from simplecache.kernel.exceptions import CacheConfigurationError


class StubStorage:
    def __init__(self) -> None:
        self.options = StorageOptions()
        self.store: dict[str, Any] = {}

    async def get_item(self, key: str) -> Any | None:
        return self.store.get(key)

    async def get_items(self, keys: Iterable[str]) -> dict[str, Any]:
        return {k: self.store[k] for k in keys if k in self.store}

    async def has_item(self, key: str) -> bool:
        return key in self.store

    async def set_item(self, key: str, value: Any) -> bool:
        self.store[key] = value
        return True

    async def set_items(self, values: Mapping[str, Any]) -> list[str]:
        self.store.update(values)
        return []

    async def remove_item(self, key: str) -> bool:
        return self.store.pop(key, None) is not None

    async def remove_items(self, keys: Iterable[str]) -> list[str]:
        return [k for k in keys if self.store.pop(k, None) is None]


class TestSimpleCacheDelegator:
    def test_wraps_backend_from_callback(self):
        backend = StubStorage()
        cache = SimpleCacheDelegator()(object(), "cache.storage", lambda: backend)
        assert isinstance(cache, SimpleCacheAdapter)
        assert cache.backend is backend

    def test_callback_invoked_once(self):
        calls: list[str] = []

        def build() -> StubStorage:
            calls.append("built")
            return StubStorage()

        SimpleCacheDelegator()(None, "cache.storage", build)
        assert calls == ["built"]

    @pytest.mark.asyncio
    async def test_delegated_cache_is_usable(self):
        cache = SimpleCacheDelegator()(None, "cache.storage", StubStorage)
        assert await cache.set("k", "v") is True
        assert await cache.get("k") == "v"


class TestSimpleCacheAutoConfiguration:
    def test_detect_provider_without_redis(self, monkeypatch):
        monkeypatch.setattr(SimpleCacheAutoConfiguration, "is_available", staticmethod(lambda name: False))
        assert SimpleCacheAutoConfiguration.detect_provider() == "none"

    def test_detect_provider_with_redis(self, monkeypatch):
        monkeypatch.setattr(SimpleCacheAutoConfiguration, "is_available", staticmethod(lambda name: True))
        assert SimpleCacheAutoConfiguration.detect_provider() == "redis"

    def test_is_available(self):
        assert SimpleCacheAutoConfiguration.is_available("json") is True
        assert SimpleCacheAutoConfiguration.is_available("no_such_module_xyz") is False

    def test_unknown_provider_raises(self):
        config = Config({"simplecache": {"cache": {"provider": "memcached"}}})
        with pytest.raises(CacheConfigurationError) as exc_info:
            SimpleCacheAutoConfiguration().storage_backend(config)
        assert exc_info.value.code == "NO_STORAGE_PROVIDER"
        assert exc_info.value.context == {"provider": "memcached"}

    def test_no_provider_available_raises(self, monkeypatch):
        monkeypatch.setattr(SimpleCacheAutoConfiguration, "is_available", staticmethod(lambda name: False))
        with pytest.raises(CacheConfigurationError):
            SimpleCacheAutoConfiguration().create(Config({}))

    def test_simple_cache_wraps_backend(self):
        backend = StubStorage()
        cache = SimpleCacheAutoConfiguration().simple_cache(backend)
        assert cache.backend is backend

    def test_redis_backend_gets_configured_options(self):
        pytest.importorskip("redis.asyncio")
        from simplecache.cache.adapters.redis import RedisStorage

        config = Config(
            {
                "simplecache": {
                    "cache": {
                        "provider": "redis",
                        "ttl": 120,
                        "key_pattern": "^[a-z:]+$",
                        "redis": {"url": "redis://localhost:6379/1"},
                    }
                }
            }
        )
        cache = SimpleCacheAutoConfiguration().create(config)
        assert isinstance(cache.backend, RedisStorage)
        assert cache.backend.options == StorageOptions(ttl=120, key_pattern="^[a-z:]+$")
