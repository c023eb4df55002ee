"""Global storage of values keyed by their type."""

from __future__ import annotations

from typing import Any, TypeVar

__all__ = ["Storage", "store", "get", "try_get"]

T = TypeVar("T")


class Storage:
    """Holds at most one value per type."""

    def __init__(self) -> None:
        self._data: dict[type, Any] = {}

    def store(self, data: Any) -> None:
        """Store a value under its type, replacing any previous one."""
        self._data[type(data)] = data

    def get(self, kind: type[T]) -> T:
        """The value stored for this type; KeyError if there is none."""
        try:
            return self._data[kind]
        except KeyError:
            raise KeyError(f"no value of type {kind.__name__} in storage") from None

    def try_get(self, kind: type[T]) -> T | None:
        """The value stored for this type, or None."""
        return self._data.get(kind)

    def __contains__(self, kind: object) -> bool:
        return kind in self._data


_default = Storage()


def store(data: Any) -> None:
    """Store a value in the global storage."""
    _default.store(data)


def get(kind: type[T]) -> T:
    """Fetch a value from the global storage; KeyError if missing."""
    return _default.get(kind)


def try_get(kind: type[T]) -> T | None:
    """Fetch a value from the global storage, or None."""
    return _default.try_get(kind)