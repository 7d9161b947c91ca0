"""Compute-once cells."""

from __future__ import annotations

from collections.abc import Callable
from threading import Lock
from typing import Generic, TypeVar

T = TypeVar("T")

_UNSET = object()


class Lazy(Generic[T]):
    """Hold a value computed by ``factory`` on first access.

    Concurrent first callers block on the lock until the single initializer
    stores its result; later callers read it without locking.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._value: object = _UNSET
        self._lock = Lock()

    @property
    def is_set(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> T:
        value = self._value
        if value is _UNSET:
            with self._lock:
                value = self._value
                if value is _UNSET:
                    value = self._factory()
                    self._value = value
        return value  # type: ignore[return-value]


__all__ = ["Lazy"]
