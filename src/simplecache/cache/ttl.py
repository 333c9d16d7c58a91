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
"""TTL normalisation and the scoped TTL override used for writes."""

from __future__ import annotations

import asyncio
import logging
import weakref
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Any

from simplecache.cache.ports.outbound import StorageBackend
from simplecache.kernel.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

LockRegistry = dict[asyncio.AbstractEventLoop, asyncio.Lock]

_backend_locks: weakref.WeakKeyDictionary[Any, LockRegistry] = weakref.WeakKeyDictionary()


def normalize_ttl(ttl: Any) -> float | None:
    """Convert a TTL argument to seconds.

    Accepts ``None``, ``int``/``float`` seconds, or a ``timedelta``.
    Zero and negative values are returned as-is; their meaning belongs to
    the backend.
    """
    if ttl is None:
        return None
    if isinstance(ttl, timedelta):
        return ttl.total_seconds()
    # bool is an int subclass but never a meaningful TTL
    if isinstance(ttl, bool) or not isinstance(ttl, int | float):
        raise InvalidArgumentError(
            f"TTL must be None, a number of seconds or a timedelta, got {type(ttl).__name__}",
            code="INVALID_TTL",
            context={"ttl": ttl},
        )
    return float(ttl)


def backend_locks(backend: StorageBackend) -> LockRegistry:
    """Return the per-event-loop lock registry guarding *backend*'s options.

    Every caller asking for the same backend instance gets the same registry.
    Backends that cannot be weak-referenced get a fresh, unshared one.
    """
    try:
        locks = _backend_locks.get(backend)
        if locks is None:
            locks = _backend_locks[backend] = {}
        return locks
    except TypeError:
        logger.debug("Backend %r is not weak-referenceable; TTL lock is not shared", type(backend).__name__)
        return {}


def loop_lock(locks: LockRegistry) -> asyncio.Lock:
    """Return the lock in *locks* for the running event loop.

    An ``asyncio.Lock`` is bound to one loop, so a backend that outlives its
    loop (e.g. a singleton driven by repeated ``asyncio.run``) needs one lock
    per loop. Entries for closed loops are dropped.
    """
    loop = asyncio.get_running_loop()
    lock = locks.get(loop)
    if lock is None:
        for stale in [other for other in locks if other.is_closed()]:
            del locks[stale]
        lock = locks[loop] = asyncio.Lock()
    return lock


@asynccontextmanager
async def ttl_scope(backend: StorageBackend, ttl: float | None, locks: LockRegistry) -> AsyncIterator[None]:
    """Apply *ttl* to ``backend.options`` for the duration of the block.

    The previous TTL is restored on every exit path, including backend
    errors and cancellation. ``ttl=None`` leaves the configured TTL in place.
    Holding the running loop's lock from *locks* keeps concurrent writers
    from observing each other's override.
    """
    async with loop_lock(locks):
        options = backend.options
        previous = options.ttl
        if ttl is not None:
            options.ttl = ttl
            logger.debug("TTL override %s (was %s)", ttl, previous)
        try:
            yield
        finally:
            options.ttl = previous
