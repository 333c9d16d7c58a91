# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Cache auto-configuration with provider detection."""

from __future__ import annotations

import importlib

import structlog

from simplecache.cache.adapter import SimpleCacheAdapter
from simplecache.cache.ports.outbound import StorageBackend
from simplecache.config.properties.cache import CacheProperties
from simplecache.core.config import Config
from simplecache.kernel.exceptions import CacheConfigurationError

logger = structlog.get_logger("simplecache.cache.auto_configuration")


class SimpleCacheAutoConfiguration:
    """Build a storage backend and cache adapter from configuration."""

    @staticmethod
    def is_available(module_name: str) -> bool:
        """Check if a Python package is importable."""
        try:
            importlib.import_module(module_name)
            return True
        except ImportError:
            return False

    @classmethod
    def detect_provider(cls) -> str:
        """Detect the best available storage provider."""
        if cls.is_available("redis.asyncio"):
            return "redis"
        return "none"

    def storage_backend(self, config: Config) -> StorageBackend:
        props = config.bind(CacheProperties)
        provider = props.provider if props.provider != "auto" else self.detect_provider()

        if provider == "redis" and self.is_available("redis.asyncio"):
            import redis.asyncio as aioredis

            from simplecache.cache.adapters.redis import RedisStorage

            url = str(config.get("simplecache.cache.redis.url", props.redis.get("url")))
            backend: StorageBackend = RedisStorage(client=aioredis.from_url(url))
        else:
            raise CacheConfigurationError(
                f"No storage backend available for provider '{provider}'",
                code="NO_STORAGE_PROVIDER",
                context={"provider": provider},
            )

        if props.ttl is not None:
            backend.options.ttl = props.ttl
        if props.key_pattern:
            backend.options.key_pattern = props.key_pattern

        logger.info("cache_backend_configured", provider=provider, ttl=backend.options.ttl)
        return backend

    def simple_cache(self, backend: StorageBackend) -> SimpleCacheAdapter:
        return SimpleCacheAdapter(backend)

    def create(self, config: Config) -> SimpleCacheAdapter:
        """Build the backend from *config* and wrap it in an adapter."""
        return self.simple_cache(self.storage_backend(config))
