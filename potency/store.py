"""Durable memoisation of function results behind a pluggable backend."""

from __future__ import annotations

import abc
import inspect
import logging
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass, field, replace
from typing import Any, Awaitable, Callable

from .bundle import suffix
from .json_value import deserialize, serialize
from .key import as_key

log = logging.getLogger(__name__)


class StoreBackend(abc.ABC):
    """Key/value storage for serialized results.

    ``fetch_serialized``, ``store_serialized`` and ``delete_key`` are only
    called while the context manager returned by ``lock`` is held.
    """

    @abc.abstractmethod
    def lock(self) -> AbstractAsyncContextManager[Any]:
        """Return an async context manager giving exclusive access."""

    @abc.abstractmethod
    async def fetch_serialized(self, key: str) -> str | None:
        """Return the JSON text stored under ``key``, or None if absent."""

    @abc.abstractmethod
    async def store_serialized(self, key: str, value: str) -> None:
        """Store the JSON text ``value`` under ``key``."""

    @abc.abstractmethod
    async def delete_key(self, key: str) -> None:
        """Remove ``key`` if it is present."""


@dataclass(frozen=True)
class Builder:
    """Collects the arguments of a cached call; the key follows them."""

    store: Store
    f: Callable[..., Any]
    is_async: bool = False
    key: tuple[str, ...] = ()
    inputs: tuple = field(default=())

    def param(self, value: Any) -> Builder:
        """Return a builder with ``value`` added as the next argument."""
        return replace(
            self,
            key=(*self.key, as_key(value)),
            inputs=suffix(self.inputs, value),
        )

    async def run(self) -> Any:
        """Return the cached result, computing and storing it if missing."""
        f, inputs, is_async = self.f, self.inputs, self.is_async

        async def call() -> Any:
            if is_async:
                return await f(*inputs)
            return f(*inputs)

        return await self.store.fetch_or_else(",".join(self.key), call)


class Store:
    """A cache of function results kept in a backend."""

    def __init__(self, inner: StoreBackend) -> None:
        self.inner = inner
        self.key: list[str] = []

    def namespace(self, namespace: str) -> Store:
        """Return a copy of this store with ``namespace`` added to its path."""
        store = Store(self.inner)
        store.key = [*self.key, str(namespace)]
        log.debug("store %r adding %r", self.key, namespace)
        return store

    def entry(self, f: Callable[..., Any]) -> Builder:
        """Start a cached call of the plain function ``f``."""
        return Builder(store=self, f=f, is_async=False)

    def entry_async(self, f: Callable[..., Awaitable[Any]]) -> Builder:
        """Start a cached call of the coroutine function ``f``."""
        return Builder(store=self, f=f, is_async=True)

    async def fetch_or_else(self, key: str, f: Callable[[], Any]) -> Any:
        """Return the value cached under ``key``, or compute it with ``f``.

        ``f`` takes no arguments and may return an awaitable. Its exceptions
        propagate and leave nothing stored.
        """
        async with self.inner.lock():
            stored = await self.inner.fetch_serialized(key)
            if stored is not None:
                log.debug("%r is cached, returning cache hit", key)
                return deserialize(stored)
            log.debug("%r is not cached, computing the value", key)
            output = f()
            if inspect.isawaitable(output):
                output = await output
            await self.inner.store_serialized(key, serialize(output))
            return output