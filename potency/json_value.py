"""JSON text as the stored form of cached values."""

from __future__ import annotations

import json
from typing import Any


class JsonError(Exception):
    """A value could not be turned into or read back from JSON."""


class SerializeError(JsonError):
    """A value could not be written as JSON."""

    def __init__(self, source: Exception) -> None:
        super().__init__(f"Error serialize: {source}")
        self.source = source


class DeserializeError(JsonError):
    """Stored JSON could not be read back."""

    def __init__(self, source: Exception) -> None:
        super().__init__(f"Error deserializing: {source}")
        self.source = source


def serialize(value: Any) -> str:
    """Return ``value`` as compact JSON text."""
    try:
        return json.dumps(value, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SerializeError(exc) from exc


def deserialize(stored: str) -> Any:
    """Return the value held in the JSON text ``stored``."""
    try:
        return json.loads(stored)
    except (TypeError, ValueError) as exc:
        raise DeserializeError(exc) from exc