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
"""SimpleCacheAdapter — the simplified cache contract over a storage backend."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from simplecache.cache.ports.inbound import Ttl
from simplecache.cache.ports.outbound import FlushableStorage, StorageBackend, TtlAwareStorage
from simplecache.cache.ttl import backend_locks, normalize_ttl, ttl_scope
from simplecache.cache.types import CacheLookup
from simplecache.kernel.exceptions import InvalidArgumentError, InvalidKeyError

logger = logging.getLogger(__name__)


class SimpleCacheAdapter:
    """Expose a :class:`StorageBackend` through the :class:`SimpleCache` contract.

    The adapter validates keys, substitutes defaults on miss and scopes TTL
    overrides around writes. Storage, expiry and eviction stay with the
    backend, and backend errors propagate unchanged.

    Keys must be non-empty strings matching ``backend.options.key_pattern``
    when one is configured. Validation always happens before the backend is
    touched, so an invalid key has no side effects.
    """

    def __init__(self, backend: StorageBackend) -> None:
        self._backend = backend
        self._ttl_locks = backend_locks(backend)

    @property
    def backend(self) -> StorageBackend:
        return self._backend

    @property
    def supports_clear(self) -> bool:
        """Whether the backend can flush; ``clear()`` returns False otherwise."""
        return isinstance(self._backend, FlushableStorage)

    # -- validation --------------------------------------------------------

    def validate_key(self, key: Any) -> None:
        """Raise InvalidKeyError unless *key* is an acceptable cache key."""
        pattern = self._backend.options.key_pattern

        if not isinstance(key, str):
            raise InvalidKeyError(f"Cache keys must be strings, got {type(key).__name__}", key=key)
        if key == "":
            raise InvalidKeyError("An empty key is not allowed", key=key)
        if pattern and not re.search(pattern, key):
            raise InvalidKeyError(
                f'The key "{key}" does not match against pattern "{pattern}"',
                key=key,
                pattern=pattern,
            )

    def validate_keys(self, keys: Iterable[Any]) -> list[str]:
        """Validate every key, stopping at the first invalid one.

        Returns the keys as a list so one-shot iterables can be reused.
        """
        if isinstance(keys, str | bytes) or not isinstance(keys, Iterable):
            raise InvalidArgumentError(
                f"Keys must be an iterable of strings, got {type(keys).__name__}",
                code="INVALID_KEYS",
            )
        key_list = list(keys)
        for key in key_list:
            self.validate_key(key)
        return key_list

    # -- reads -------------------------------------------------------------

    async def get(self, key: str, default: Any = None) -> Any:
        """Fetch a value, returning *default* on a miss.

        A stored ``None`` reads as a miss; use :meth:`lookup` to tell them apart.
        """
        self.validate_key(key)
        value = await self._backend.get_item(key)
        return default if value is None else value

    async def lookup(self, key: str) -> CacheLookup:
        """Fetch a value as an explicit hit/miss result.

        A ``None`` payload is confirmed with ``has_item``; like :meth:`has`,
        that second call can race with concurrent writers.
        """
        self.validate_key(key)
        value = await self._backend.get_item(key)
        if value is not None:
            return CacheLookup.found(value)
        if await self._backend.has_item(key):
            return CacheLookup.found(None)
        return CacheLookup.missing()

    async def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        """Fetch several values; every requested key appears in the result, in order."""
        key_list = self.validate_keys(keys)
        items = await self._backend.get_items(key_list)

        result: dict[str, Any] = {}
        for key in key_list:
            value = items.get(key)
            result[key] = default if value is None else value
        return result

    async def has(self, key: str) -> bool:
        """Check whether a key is present.

        Only use this for cache warming: another writer can remove the item
        between ``has()`` returning True and a following ``get()``.
        """
        self.validate_key(key)
        return bool(await self._backend.has_item(key))

    # -- writes ------------------------------------------------------------

    async def set(self, key: str, value: Any, ttl: Ttl = None) -> bool:
        """Store a value, optionally overriding the backend TTL for this write."""
        self.validate_key(key)
        seconds = normalize_ttl(ttl)

        if isinstance(self._backend, TtlAwareStorage):
            return await self._backend.set_item_with_ttl(key, value, seconds)

        async with ttl_scope(self._backend, seconds, self._ttl_locks):
            return await self._backend.set_item(key, value)

    async def set_multiple(self, values: Mapping[str, Any], ttl: Ttl = None) -> bool:
        """Store several values; True only if the backend reports no failed keys."""
        if not isinstance(values, Mapping):
            raise InvalidArgumentError(
                f"Values must be a mapping of key to value, got {type(values).__name__}",
                code="INVALID_VALUES",
            )
        self.validate_keys(values.keys())
        seconds = normalize_ttl(ttl)

        if isinstance(self._backend, TtlAwareStorage):
            failed = await self._backend.set_items_with_ttl(values, seconds)
        else:
            async with ttl_scope(self._backend, seconds, self._ttl_locks):
                failed = await self._backend.set_items(values)

        if failed:
            logger.debug("set_multiple: %d of %d keys failed", len(failed), len(values))
        return not failed

    async def delete(self, key: str) -> bool:
        """Remove a key; returns the backend's own result."""
        self.validate_key(key)
        return await self._backend.remove_item(key)

    async def delete_multiple(self, keys: Iterable[str]) -> bool:
        """Remove several keys; True only if the backend reports no failed removals."""
        key_list = self.validate_keys(keys)
        failed = await self._backend.remove_items(key_list)
        return not failed

    async def clear(self) -> bool:
        """Flush the backend, or return False if it cannot flush."""
        if isinstance(self._backend, FlushableStorage):
            return await self._backend.flush()

        logger.debug("clear() not supported by %s", type(self._backend).__name__)
        return False
