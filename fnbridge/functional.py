"""
fnbridge.functional - Curried Collection and Arithmetic Helpers

Small utilities built on ``curry``. Each accepts its arguments all at once
or in any split, and returns itself when called with no arguments.

Example:
    >>> double_all = map_items(lambda x: x * 2)
    >>> double_all([1, 2, 3])
    [2, 4, 6]
    >>> reduce_items(add, 0)([1, 2, 3])
    6
    >>> prop({"name": "Jane"}, "name")
    'Jane'
"""

import functools
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from fnbridge.core.curry import curry


def _map_items(fn: Callable[[Any], Any], items: Iterable[Any]) -> list[Any]:
    """Return a new list of ``fn`` applied to each item."""
    return [fn(item) for item in items]


def _filter_items(predicate: Callable[[Any], bool], items: Iterable[Any]) -> list[Any]:
    """Return a new list of the items for which ``predicate`` is truthy."""
    return [item for item in items if predicate(item)]


def _reduce_items(reducer: Callable[[Any, Any], Any], initial: Any, items: Iterable[Any]) -> Any:
    """Fold ``items`` left to right with ``reducer``, starting from ``initial``."""
    return functools.reduce(reducer, items, initial)


def _add(a: Any, b: Any) -> Any:
    """Return a + b."""
    return a + b


def _subtract(a: Any, b: Any) -> Any:
    """Return a - b."""
    return a - b


def _prop(obj: Any, name: str) -> Any:
    """Return ``obj[name]`` for mappings, ``getattr(obj, name)`` otherwise."""
    if isinstance(obj, Mapping):
        return obj[name]
    return getattr(obj, name)


map_items = curry(_map_items, 2)
filter_items = curry(_filter_items, 2)
reduce_items = curry(_reduce_items, 3)
add = curry(_add, 2)
subtract = curry(_subtract, 2)
prop = curry(_prop, 2)


__all__ = [
    "add",
    "filter_items",
    "map_items",
    "prop",
    "reduce_items",
    "subtract",
]
