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
"""Outbound ports: the storage backend a SimpleCacheAdapter delegates to."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from simplecache.cache.types import StorageOptions


@runtime_checkable
class StorageBackend(Protocol):
    """Abstract storage engine interface.

    Bulk writes and removals return the keys that could NOT be processed;
    an empty collection means every item succeeded.
    """

    options: StorageOptions

    async def get_item(self, key: str) -> Any | None: ...

    async def get_items(self, keys: Iterable[str]) -> Mapping[str, Any]: ...

    async def has_item(self, key: str) -> bool: ...

    async def set_item(self, key: str, value: Any) -> bool: ...

    async def set_items(self, values: Mapping[str, Any]) -> Collection[str]: ...

    async def remove_item(self, key: str) -> bool: ...

    async def remove_items(self, keys: Iterable[str]) -> Collection[str]: ...


@runtime_checkable
class FlushableStorage(Protocol):
    """Capability: the backend can remove every entry at once."""

    async def flush(self) -> bool: ...


@runtime_checkable
class TtlAwareStorage(Protocol):
    """Capability: the backend accepts a time-to-live per write.

    ``ttl`` is in seconds; ``None`` means use ``options.ttl``. Backends with
    this capability never need their shared options mutated for a write.
    """

    async def set_item_with_ttl(self, key: str, value: Any, ttl: float | None) -> bool: ...

    async def set_items_with_ttl(self, values: Mapping[str, Any], ttl: float | None) -> Collection[str]: ...
