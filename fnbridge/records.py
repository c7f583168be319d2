"""
fnbridge.records - Immutable Record Manipulation

Get/set/delete on a dict-like record without mutating it. Every ``set``
and ``delete`` returns a new manipulator over a fresh copy.

Example:
    >>> base = RecordManipulator({"name": "Jane"})
    >>> updated = base.set("age", 32).delete("name")
    >>> updated.get_object()
    {'age': 32}
    >>> base.get_object()
    {'name': 'Jane'}
"""

from collections.abc import Mapping
from typing import Any


class RecordManipulator:
    def __init__(self, record: Mapping[str, Any]) -> None:
        self._record = dict(record)

    def set(self, key: str, value: Any) -> "RecordManipulator":
        """Return a new manipulator with ``key`` set to ``value``."""
        return RecordManipulator({**self._record, key: value})

    def get(self, key: str) -> Any:
        """Return the value stored under ``key``. Raises KeyError if missing."""
        return self._record[key]

    def delete(self, key: str) -> "RecordManipulator":
        """Return a new manipulator without ``key``. Raises KeyError if missing."""
        if key not in self._record:
            raise KeyError(key)
        return RecordManipulator({k: v for k, v in self._record.items() if k != key})

    def get_object(self) -> dict[str, Any]:
        """Return a copy of the underlying record."""
        return dict(self._record)

    def __repr__(self) -> str:
        return f"RecordManipulator({self._record!r})"
