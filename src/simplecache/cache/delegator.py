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
"""Delegator factory that decorates a storage backend service with the cache contract."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from simplecache.cache.adapter import SimpleCacheAdapter
from simplecache.cache.ports.outbound import StorageBackend


class SimpleCacheDelegator:
    """Wrap the backend produced by a DI container in a :class:`SimpleCacheAdapter`.

    Register it as a delegator for the storage backend service: the container
    calls it with itself, the service name and a callback that builds the
    original service.

    Usage::

        delegator = SimpleCacheDelegator()
        cache = delegator(container, "cache.storage", lambda: RedisStorage(client))
    """

    def __call__(
        self,
        container: Any,
        name: str,
        callback: Callable[[], StorageBackend],
    ) -> SimpleCacheAdapter:
        backend = callback()
        return SimpleCacheAdapter(backend)
