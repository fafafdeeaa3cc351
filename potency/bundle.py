"""Growing and shrinking tuples of call arguments."""

from __future__ import annotations

from typing import Any


def prefix(bundle: tuple, element: Any) -> tuple:
    """Return ``bundle`` with ``element`` put in front."""
    return (element, *bundle)


def suffix(bundle: tuple, element: Any) -> tuple:
    """Return ``bundle`` with ``element`` added at the end."""
    return (*bundle, element)


def reduce(bundle: tuple) -> Any:
    """Unwrap a one-element bundle; leave any other bundle as it is."""
    if len(bundle) == 1:
        return bundle[0]
    return bundle