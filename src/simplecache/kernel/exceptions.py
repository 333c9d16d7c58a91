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
"""Exception hierarchy for simplecache.

All library exceptions inherit from SimpleCacheException so callers can
handle every cache-layer error with a single ``except`` clause.

Categories:
- CacheException: errors raised by the cache layer itself
- InvalidArgumentError: arguments rejected before the backend is called
- CacheConfigurationError: no usable backend could be configured

Errors raised by a storage backend are never wrapped; they reach the caller
as the backend raised them.
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class SimpleCacheException(Exception):
    """Base exception for all simplecache errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "INVALID_KEY").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Cache Exceptions
# =============================================================================


class CacheException(SimpleCacheException):
    """Errors raised by the cache layer."""


class InvalidArgumentError(CacheException, ValueError):
    """An argument passed to a cache operation is not acceptable."""


class InvalidKeyError(InvalidArgumentError):
    """A cache key is empty, not a string, or does not match the key pattern."""

    def __init__(self, message: str, key: object = None, pattern: str | None = None) -> None:
        super().__init__(message, code="INVALID_KEY", context={"key": key, "pattern": pattern})
        self.key = key
        self.pattern = pattern


class CacheConfigurationError(CacheException):
    """The cache could not be configured (e.g. no storage provider available)."""
