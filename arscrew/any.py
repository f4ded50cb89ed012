"""A container holding one value of any type within a fixed storage budget."""

from __future__ import annotations

import copy as _copy
from typing import Any as _AnyType

from arscrew.errors import MylibError

__all__ = ["DEFAULT_ALIGNMENT", "storage_size", "Any"]

DEFAULT_ALIGNMENT = 16

_EMPTY = object()


def storage_size(minimum_storage_size: int, alignment: int = DEFAULT_ALIGNMENT) -> int:
    """Return the storage size rounded up to a multiple of ``alignment``."""
    if minimum_storage_size % alignment == 0:
        return minimum_storage_size
    return ((minimum_storage_size + alignment) // alignment) * alignment


def _byte_length(value: object) -> int | None:
    try:
        return memoryview(value).nbytes  # type: ignore[arg-type]
    except TypeError:
        return None


class Any:
    """Holds a single value; buffer values must fit within the storage size."""

    __slots__ = ("_minimum", "_alignment", "_value")

    def __init__(
        self,
        minimum_storage_size: int,
        value: _AnyType = _EMPTY,
        alignment: int = DEFAULT_ALIGNMENT,
    ) -> None:
        self._minimum = minimum_storage_size
        self._alignment = alignment
        self._value: _AnyType = _EMPTY
        if value is not _EMPTY:
            self.set(value)

    def size(self) -> int:
        """Storage size in bytes."""
        return storage_size(self._minimum, self._alignment)

    def set(self, value: _AnyType) -> "Any":
        """Store ``value``, replacing the previous one."""
        if isinstance(value, Any):
            value = value.get()
        nbytes = _byte_length(value)
        if nbytes is not None and nbytes > self.size():
            raise MylibError(
                f"value of {nbytes} bytes does not fit in storage of {self.size()} bytes"
            )
        self._value = value
        return self

    def get(self) -> _AnyType:
        """Return the stored value."""
        if self._value is _EMPTY:
            raise MylibError("Any holds no value")
        return self._value

    def copy(self) -> "Any":
        """Return an independent copy holding the same value."""
        other = Any(self._minimum, alignment=self._alignment)
        if self._value is not _EMPTY:
            other._value = _copy.copy(self._value)
        return other

    def __repr__(self) -> str:
        shown = "<empty>" if self._value is _EMPTY else repr(self._value)
        return f"Any(size={self.size()}, value={shown})"