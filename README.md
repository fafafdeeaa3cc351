# potency

`potency` remembers the results of function calls. Each call is stored under a
key built from its parameters. When the same call comes in again, the stored
result is returned and the function does not run a second time. Results are
kept as JSON text, either in memory (`potency.cpu_store.CpuStore`) or in an
SQLite database (`potency.sqlite_store.SqliteStore`).

## Installation

```
pip install potency
```

The package has no dependencies beyond the standard library.

## Usage

Wrap a backend in a `potency.store.Store` and describe the call with `entry`
for a plain function or `entry_async` for a coroutine function. Each `param`
adds the next positional argument, and `run` returns the result:

```python
import asyncio

from potency.sqlite_store import SqliteStore
from potency.store import Store


async def add_three(a, b, c):
    await asyncio.sleep(0.1)
    return a + b + c


def describe(a, b, c):
    return f"({a}, {b}, {c})"


async def main():
    async with await SqliteStore.open("results.db") as backend:
        store = Store(backend)

        total = await store.entry_async(add_three).param(1).param(2).param(3).run()
        print(total)  # 6, computed

        total = await store.entry_async(add_three).param(1).param(2).param(3).run()
        print(total)  # 6, read back from the database

        text = await store.entry(describe).param(69.0).param(666).param("Late Night").run()
        print(text)   # (69.0, 666, Late Night)


asyncio.run(main())
```

`SqliteStore.open(path)` creates the database and its `potency` table if
needed; `":memory:"` gives a throwaway database. Leaving the `async with`
block, or calling `close()`, closes the connection.

For tests or short-lived work, use the in-memory backend:

```python
from potency.cpu_store import CpuStore
from potency.store import Store

store = Store(CpuStore())
```

`Store.fetch_or_else(key, f)` gives direct access to the same fetch-or-compute
step with a key of your choosing. `f` takes no arguments and may return a
plain value or an awaitable.

`Store.namespace(name)` returns a copy of the store that records `name` in its
`key` list. Keys used by `Builder.run` are built from the parameters alone, so
two namespaces of the same backend share stored results for equal parameters.

## Keys

Parameters become part of the key through `potency.key.as_key`:

- `None` and `()` give `"()"`;
- strings are used as they are;
- integers are written out, and floats with no fractional part lose their
  `.0` (`69.0` gives `"69"`);
- lists become `v[...]` with their items' keys joined by commas;
- tuples of two or more items have their items' keys joined by commas, and a
  one-element tuple raises `TypeError`;
- an object with its own `as_key()` method supplies its own key.

Anything else raises `TypeError`. Two calls that produce the same key share one
stored result.

## Writing a backend

Subclass `potency.store.StoreBackend` and provide `lock()` (an async context
manager giving exclusive access) and the coroutines `fetch_serialized(key)`,
`store_serialized(key, value)` and `delete_key(key)`. Values are JSON text, as
produced by `potency.json_value.serialize` and read by `deserialize`.

## Errors

A result that cannot be written as JSON raises
`potency.json_value.SerializeError`; a stored value that cannot be read back
raises `DeserializeError`. Both derive from `JsonError`. Database failures
raise `potency.sqlite_store.SqliteStoreError`; `SqliteStore` inserts new keys
only, so storing a key that already exists is one of them. An exception raised
by your own function reaches you unchanged, and nothing is stored for that
call.

## What it does not do

There is no command-line tool and no expiry of stored results. `Store` offers
no way to remove a result; use the backend's `delete_key` directly.

## Running the tests

```
pip install -e ".[test]"
pytest
```