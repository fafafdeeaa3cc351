"""In-memory store backend, mostly meant for testing."""

from __future__ import annotations

import asyncio
import logging

from .store import StoreBackend

log = logging.getLogger(__name__)


class CpuStore(StoreBackend):
    """Keeps serialized results in a dictionary guarded by an asyncio lock."""

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}
        self._lock = asyncio.Lock()

    def lock(self) -> asyncio.Lock:
        """Return the lock that gives exclusive access to the entries."""
        return self._lock

    async def fetch_serialized(self, key: str) -> str | None:
        """Return the JSON text stored under ``key``, or None if absent."""
        log.debug("fetching key %s", key)
        value = self._entries.get(key)
        if value is None:
            log.debug("  %s not found", key)
        else:
            log.debug("  found %s", key)
        return value

    async def store_serialized(self, key: str, value: str) -> None:
        """Store the JSON text ``value`` under ``key``, replacing any old one."""
        log.debug("storing %s: %r", key, value)
        self._entries[key] = value

    async def delete_key(self, key: str) -> None:
        """Remove ``key`` if it is present."""
        log.debug("deleting %s", key)
        self._entries.pop(key, None)