import asyncio
import time

import pytest

from potency.cpu_store import CpuStore
from potency.json_value import DeserializeError, deserialize, serialize
from potency.store import Store


async def _timed_function(seconds: float, text: str) -> str:
    await asyncio.sleep(seconds)
    return f"{seconds} {text}"


@pytest.mark.asyncio
async def test_backend_round_trip():
    store = CpuStore()
    async with store.lock():
        assert await store.fetch_serialized("hello") is None
        value = (0, 1.0, "goodbye")
        await store.store_serialized("hello", serialize(value))
        stored = await store.fetch_serialized("hello")
        assert stored is not None
        assert deserialize(stored) == [0, 1.0, "goodbye"]


@pytest.mark.asyncio
async def test_store_replaces_existing_value():
    store = CpuStore()
    async with store.lock():
        await store.store_serialized("k", serialize(1))
        await store.store_serialized("k", serialize(2))
        assert await store.fetch_serialized("k") == "2"


@pytest.mark.asyncio
async def test_delete_key():
    store = CpuStore()
    async with store.lock():
        await store.store_serialized("k", serialize("x"))
        await store.delete_key("k")
        assert await store.fetch_serialized("k") is None
        await store.delete_key("missing")
        assert await store.fetch_serialized("missing") is None


@pytest.mark.asyncio
async def test_fetch_or_else_caches():
    store = Store(CpuStore())
    wait = 0.2
    text = "To each their own."

    start = time.monotonic()
    output = await store.fetch_or_else("the key", lambda: _timed_function(wait, text))
    elapsed = time.monotonic() - start
    assert output == "0.2 To each their own."
    assert elapsed >= wait

    calls = []

    def never() -> str:
        calls.append(1)
        return "fresh"

    start = time.monotonic()
    cached = await store.fetch_or_else("the key", never)
    elapsed = time.monotonic() - start
    assert cached == "0.2 To each their own."
    assert calls == []
    assert elapsed < wait


@pytest.mark.asyncio
async def test_failed_computation_stores_nothing():
    backend = CpuStore()
    store = Store(backend)

    def fail() -> str:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        await store.fetch_or_else("k", fail)
    async with backend.lock():
        assert await backend.fetch_serialized("k") is None


@pytest.mark.asyncio
async def test_corrupt_entry_raises_deserialize_error():
    backend = CpuStore()
    async with backend.lock():
        await backend.store_serialized("k", "{not json")
    store = Store(backend)
    with pytest.raises(DeserializeError):
        await store.fetch_or_else("k", lambda: 1)


async def _no_params_no_return() -> None:
    return None


async def _one_param_string(name: str) -> str:
    return f"{name} - this is a test of the emergency pants system"


async def _one_param_timed(millis: int) -> str:
    await asyncio.sleep(millis / 1000)
    return f"{millis} - this is a timed test of the emergency pants system"


def _three_params(a: float, b: int, c: str) -> str:
    return f"({a:g}, {b}, {c})"


@pytest.mark.asyncio
async def test_builder_sanity():
    store = Store(CpuStore())

    param0 = store.namespace("async-param0")
    assert await param0.entry_async(_no_params_no_return).run() is None

    param1 = store.namespace("async-param1-andparam2")
    result = await param1.entry_async(_one_param_string).param("Bill").run()
    assert result == "Bill - this is a test of the emergency pants system"
    result = await param1.entry_async(_one_param_timed).param(300).run()
    assert result == "300 - this is a timed test of the emergency pants system"

    param3 = store.namespace("sync-param3")
    result = (
        await param3.entry(_three_params)
        .param(69.0)
        .param(666)
        .param("Late Night")
        .run()
    )
    assert result == "(69, 666, Late Night)"


@pytest.mark.asyncio
async def test_builder_uses_key_from_params():
    backend = CpuStore()
    store = Store(backend)
    await store.entry(_three_params).param(1.5).param(2).param("x").run()
    async with backend.lock():
        assert await backend.fetch_serialized("1.5,2,x") == '"(1.5, 2, x)"'