"""Bit-field extraction and a fixed-width bit set of up to 64 bits."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Union

__all__ = ["BitField", "extract_bits", "set_bits", "storage_bits", "BitSet"]


def _index(value: object) -> int:
    if isinstance(value, BitSet):
        return value.to_underlying()
    if isinstance(value, Enum):
        value = value.value
    return operator.index(value)  # type: ignore[arg-type]


@dataclass(frozen=True)
class BitField:
    """A bit range: start position and length."""

    bpos: int
    blength: int

    def __str__(self) -> str:
        return f"{{{self.bpos},{self.blength}}}"


def _field(bpos: object, blength: object) -> tuple[int, int]:
    if isinstance(bpos, BitField):
        return bpos.bpos, bpos.blength
    if blength is None:
        raise TypeError("blength is required unless a BitField is given")
    return _index(bpos), _index(blength)


def extract_bits(value: int, bpos: Union[int, BitField, Enum], blength: object = None) -> int:
    """Return ``blength`` bits of ``value`` starting at ``bpos``."""
    pos, length = _field(bpos, blength)
    mask = (1 << length) - 1
    return (_index(value) >> pos) & mask


def set_bits(src: int, bpos: object, blength: object = None, value: object = None) -> int:
    """Return ``src`` with the given bit range replaced by ``value``.

    With a BitField as ``bpos``, the third argument is the value.
    """
    if isinstance(bpos, BitField):
        if value is None:
            value = blength
        pos, length = bpos.bpos, bpos.blength
    else:
        pos, length = _field(bpos, blength)
    if value is None:
        raise TypeError("a value to set is required")
    mask = (1 << length) - 1
    shifted_mask = mask << pos
    safe_value = _index(value) & mask
    return (_index(src) & ~shifted_mask) | (safe_value << pos)


def storage_bits(nbits: int) -> int:
    """Return the storage width used for ``nbits`` bits, or 0 if over 64."""
    for width in (8, 16, 32, 64):
        if nbits <= width:
            return width
    return 0


class BitSet:
    """A set of ``nbits`` bits kept in an 8, 16, 32 or 64 bit word."""

    __slots__ = ("_nbits", "_width", "_storage")

    def __init__(self, nbits: int, value: object = 0) -> None:
        width = storage_bits(nbits)
        if width == 0:
            raise ValueError(f"BitSet supports at most 64 bits, got {nbits}")
        self._nbits = nbits
        self._width = width
        self._storage = _index(value) & self._word_mask

    @property
    def _word_mask(self) -> int:
        return (1 << self._width) - 1

    def _store(self, value: int) -> None:
        self._storage = value & self._word_mask

    def size(self) -> int:
        """Number of bits in the set."""
        return self._nbits

    def storage_nbits(self) -> int:
        """Width of the underlying storage word."""
        return self._width

    def to_underlying(self) -> int:
        """The raw storage word."""
        return self._storage

    def __getitem__(self, key: object) -> Union[bool, int]:
        if isinstance(key, BitField):
            return extract_bits(self._storage, key.bpos, key.blength)
        if isinstance(key, tuple):
            pos, length = key
            return extract_bits(self._storage, pos, length)
        return bool((self._storage >> _index(key)) & 1)

    def __setitem__(self, key: object, value: object) -> None:
        if isinstance(key, BitField):
            self.set(key.bpos, key.blength, value)
        elif isinstance(key, tuple):
            pos, length = key
            self.set(pos, length, value)
        else:
            self.set(key, 1, value)

    def __call__(self, pos: object, length: object = None) -> "BitSet":
        return self.extract(pos, length)

    def extract(self, pos: object, length: object = None) -> "BitSet":
        """Return the bit range as a new BitSet of the same size."""
        return BitSet(self._nbits, self.extract_underlying(pos, length))

    def extract_underlying(self, pos: object, length: object = None) -> int:
        """Return the bit range as an integer."""
        return extract_bits(self._storage, pos, length)

    def set(self, pos: object, length: object, value: object) -> None:
        """Replace the bit range with ``value``."""
        p, n = _field(pos, length)
        self._store(set_bits(self._storage, p, n, value))

    def __invert__(self) -> "BitSet":
        return BitSet(self._nbits, ~self._storage & self._word_mask)

    def __iand__(self, other: object) -> "BitSet":
        self._store(self._storage & _index(other))
        return self

    def __ior__(self, other: object) -> "BitSet":
        self._store(self._storage | _index(other))
        return self

    def __ixor__(self, other: object) -> "BitSet":
        self._store(self._storage ^ _index(other))
        return self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BitSet):
            return self._nbits == other._nbits and self._storage == other._storage
        if isinstance(other, int):
            return self._storage == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join("1" if self[i] else "0" for i in reversed(range(self._nbits)))

    def __repr__(self) -> str:
        return f"BitSet({self._nbits}, 0b{self})"