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
"""Redis-backed storage backend."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any, cast

from simplecache.cache.types import StorageOptions

_logger = logging.getLogger(__name__)

_UNDECODABLE = object()


class RedisStorage:
    """Storage backend that delegates to a ``redis.asyncio.Redis``-like client.

    Values are JSON-serialized before storage so that any JSON-compatible
    Python object can be cached transparently. Expiry is handled by Redis:
    a TTL of ``None`` or ``<= 0`` stores the key without expiry. Values that
    cannot be decoded are evicted when read, so they count as misses for
    ``get_item``, ``get_items`` and ``has_item`` alike.

    Implements the ``StorageBackend``, ``FlushableStorage`` and
    ``TtlAwareStorage`` ports.
    """

    def __init__(self, client: Any, options: StorageOptions | None = None) -> None:
        self._client = client
        self.options = options if options is not None else StorageOptions()

    def _decode(self, key: str, raw: Any) -> Any:
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            _logger.warning("Failed to deserialize cached value for key '%s', evicting", key)
            return _UNDECODABLE

    @staticmethod
    def _expiry_ms(ttl: float | None) -> int | None:
        if ttl is None or ttl <= 0:
            return None
        return max(1, int(ttl * 1000))

    async def get_item(self, key: str) -> Any | None:
        """Retrieve and deserialize a cached value."""
        value = self._decode(key, await self._client.get(key))
        if value is _UNDECODABLE:
            await self._client.delete(key)
            return None
        return value

    async def get_items(self, keys: Iterable[str]) -> dict[str, Any]:
        """Retrieve several values; keys that are missing are left out."""
        key_list = list(keys)
        if not key_list:
            return {}
        raw_values = await self._client.mget(key_list)
        items: dict[str, Any] = {}
        undecodable: list[str] = []
        for key, raw in zip(key_list, raw_values):
            value = self._decode(key, raw)
            if value is _UNDECODABLE:
                undecodable.append(key)
            elif value is not None:
                items[key] = value
        if undecodable:
            await self._client.delete(*undecodable)
        return items

    async def has_item(self, key: str) -> bool:
        """Check whether a key exists."""
        count = await self._client.exists(key)
        return cast(bool, count > 0)

    async def set_item(self, key: str, value: Any) -> bool:
        """Store a value using the configured ``options.ttl``."""
        return await self.set_item_with_ttl(key, value, None)

    async def set_item_with_ttl(self, key: str, value: Any, ttl: float | None) -> bool:
        """Serialize and store a value; ``ttl=None`` falls back to ``options.ttl``."""
        px = self._expiry_ms(ttl if ttl is not None else self.options.ttl)
        raw = json.dumps(value)
        result = await self._client.set(key, raw.encode(), px=px)
        return bool(result)

    async def set_items(self, values: Mapping[str, Any]) -> list[str]:
        """Store several values; returns the keys that were not written."""
        return await self.set_items_with_ttl(values, None)

    async def set_items_with_ttl(self, values: Mapping[str, Any], ttl: float | None) -> list[str]:
        failed: list[str] = []
        for key, value in values.items():
            if not await self.set_item_with_ttl(key, value, ttl):
                failed.append(key)
        return failed

    async def remove_item(self, key: str) -> bool:
        """Remove a key. Returns True if the key existed."""
        count = await self._client.delete(key)
        return cast(bool, count > 0)

    async def remove_items(self, keys: Iterable[str]) -> list[str]:
        """Remove several keys; returns the keys that did not exist."""
        return [key for key in keys if not await self.remove_item(key)]

    async def flush(self) -> bool:
        """Flush the entire database."""
        await self._client.flushdb()
        return True

    async def start(self) -> None:
        """Validate connectivity by pinging Redis."""
        await self._client.ping()

    async def stop(self) -> None:
        """Close the underlying Redis connection."""
        await self._client.aclose()
