# app/services/kv.py
"""
Key-value namespaces that hold one serialized record per key.

Any backend that can get, put, delete and list string keys can implement
``KVNamespace`` and be plugged into ``AssignmentStore``.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class KVNamespace(Protocol):
    """Protocol for a flat string namespace.

    ``list_keys`` returns keys in ascending lexical order, at most
    ``page_size`` of them.
    """

    page_size: int

    async def get(self, key: str) -> Optional[str]:
        ...

    async def put(self, key: str, value: str) -> None:
        ...

    async def delete(self, key: str) -> bool:
        """Remove ``key``. Returns False when it did not exist."""
        ...

    async def list_keys(self) -> List[str]:
        ...


class RedisKV:
    """Namespace stored in Redis under a common key prefix."""

    def __init__(self, client, prefix: str = "assignments:", page_size: int = 1000):
        self.client = client
        self.prefix = prefix
        self.page_size = page_size

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    async def get(self, key: str) -> Optional[str]:
        return await self.client.get(self._key(key))

    async def put(self, key: str, value: str) -> None:
        await self.client.set(self._key(key), value)

    async def delete(self, key: str) -> bool:
        removed = await self.client.delete(self._key(key))
        return bool(removed)

    async def list_keys(self) -> List[str]:
        keys = []
        async for raw in self.client.scan_iter(match=f"{self.prefix}*"):
            if isinstance(raw, bytes):
                raw = raw.decode("utf-8")
            keys.append(raw[len(self.prefix):])
        keys.sort()
        if len(keys) > self.page_size:
            logger.debug(f"Listing truncated to {self.page_size} of {len(keys)} keys")
        return keys[: self.page_size]


class MemoryKV:
    """In-process namespace for local development and tests."""

    def __init__(self, page_size: int = 1000, data: Optional[Dict[str, str]] = None):
        self.page_size = page_size
        self.data: Dict[str, str] = dict(data or {})

    async def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    async def put(self, key: str, value: str) -> None:
        self.data[key] = value

    async def delete(self, key: str) -> bool:
        return self.data.pop(key, None) is not None

    async def list_keys(self) -> List[str]:
        return sorted(self.data)[: self.page_size]
