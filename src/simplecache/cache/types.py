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
"""Value types shared by the cache ports and adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class StorageOptions:
    """Mutable backend configuration.

    ``ttl`` is the backend's default time-to-live in seconds (``None`` means
    the backend's own default). ``key_pattern`` is a regular expression every
    key must match; empty disables the check.
    """

    ttl: float | None = None
    key_pattern: str = ""


@dataclass(frozen=True)
class CacheLookup:
    """Explicit present/absent result of a cache lookup.

    Unlike ``get()``, a hit whose payload is ``None`` is still a hit.
    """

    hit: bool
    value: Any = None

    @classmethod
    def found(cls, value: Any) -> CacheLookup:
        return cls(hit=True, value=value)

    @classmethod
    def missing(cls) -> CacheLookup:
        return cls(hit=False)

    def value_or(self, default: Any = None) -> Any:
        """Return the stored value on a hit, *default* on a miss."""
        return self.value if self.hit else default
