"""Tagged runtime values: integers, floats, strings, 3-vectors and fixed-size arrays."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterator, Optional

__all__ = [
    "Kind",
    "DanObject",
    "Integer",
    "Float",
    "String",
    "Vector",
    "Array",
    "add",
    "length",
]

_INT_BITS = 32
_INT_RANGE = 1 << _INT_BITS
_INT_HALF = 1 << (_INT_BITS - 1)


def _wrap_int(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return ((value + _INT_HALF) % _INT_RANGE) - _INT_HALF


def _to_single(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


class Kind(Enum):
    """The kind of value an object holds."""

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    VECTOR = "vector"
    ARRAY = "array"


class DanObject:
    """Base class of every runtime value."""

    kind: ClassVar[Kind]

    def __len__(self) -> int:
        return 1

    def _add(self, other: DanObject) -> Optional[DanObject]:
        return None

    def __add__(self, other: object) -> DanObject:
        if not isinstance(other, DanObject):
            return NotImplemented
        result = self._add(other)
        if result is None:
            return NotImplemented
        return result


@dataclass(frozen=True)
class Integer(DanObject):
    """A signed 32-bit integer."""

    value: int
    kind: ClassVar[Kind] = Kind.INTEGER

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Integer needs an int, got {type(self.value).__name__}")
        object.__setattr__(self, "value", _wrap_int(self.value))

    def _add(self, other: DanObject) -> Optional[DanObject]:
        if isinstance(other, Integer):
            return Integer(self.value + other.value)
        if isinstance(other, Float):
            return Float(float(self.value) + other.value)
        return None

    __add__ = DanObject.__add__


@dataclass(frozen=True)
class Float(DanObject):
    """A single-precision floating point number."""

    value: float
    kind: ClassVar[Kind] = Kind.FLOAT

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"Float needs a number, got {type(self.value).__name__}")
        object.__setattr__(self, "value", _to_single(float(self.value)))

    def _add(self, other: DanObject) -> Optional[DanObject]:
        if isinstance(other, (Integer, Float)):
            return Float(self.value + float(other.value))
        return None

    __add__ = DanObject.__add__


@dataclass(frozen=True)
class String(DanObject):
    """A text string."""

    value: str
    kind: ClassVar[Kind] = Kind.STRING

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"String needs a str, got {type(self.value).__name__}")

    def __len__(self) -> int:
        return len(self.value)

    def _add(self, other: DanObject) -> Optional[DanObject]:
        if isinstance(other, String):
            return String(self.value + other.value)
        return None

    __add__ = DanObject.__add__


@dataclass(frozen=True)
class Vector(DanObject):
    """A three-component vector of objects."""

    x: DanObject
    y: DanObject
    z: DanObject
    kind: ClassVar[Kind] = Kind.VECTOR

    def __post_init__(self) -> None:
        for component in (self.x, self.y, self.z):
            if not isinstance(component, DanObject):
                raise TypeError("Vector components must be objects")

    def __len__(self) -> int:
        return 3

    def _add(self, other: DanObject) -> Optional[DanObject]:
        if isinstance(other, Vector):
            return Vector(add(self.x, other.x), add(self.y, other.y), add(self.z, other.z))
        return None

    __add__ = DanObject.__add__


@dataclass(eq=True)
class Array(DanObject):
    """A fixed-size array of object slots, initially empty."""

    size: int
    _elements: list = field(init=False, repr=False)
    kind: ClassVar[Kind] = Kind.ARRAY

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise TypeError("Array size must be an int")
        if self.size < 0:
            raise ValueError("Array size must not be negative")
        self._elements = [None] * self.size

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError("Array index must be an int")
        if not 0 <= index < self.size:
            raise IndexError(f"index {index} out of range for array of size {self.size}")

    def __getitem__(self, index: int) -> Optional[DanObject]:
        self._check_index(index)
        return self._elements[index]

    def __setitem__(self, index: int, value: DanObject) -> None:
        if not isinstance(value, DanObject):
            raise TypeError("only objects can be stored in an array")
        self._check_index(index)
        self._elements[index] = value

    def __iter__(self) -> Iterator[Optional[DanObject]]:
        return iter(self._elements)

    def __len__(self) -> int:
        return self.size

    def _add(self, other: DanObject) -> Optional[DanObject]:
        if not isinstance(other, Array):
            return None
        joined = Array(self.size + other.size)
        joined._elements = [*self._elements, *other._elements]
        return joined

    __add__ = DanObject.__add__


def add(a: DanObject, b: DanObject) -> DanObject:
    """Add two objects, raising TypeError when their kinds do not combine."""
    if not isinstance(a, DanObject) or not isinstance(b, DanObject):
        raise TypeError("both operands must be objects")
    result = a._add(b)
    if result is None:
        raise TypeError(f"cannot add {a.kind.value} and {b.kind.value}")
    return result


def length(obj: DanObject) -> int:
    """Return the length of an object: 1 for numbers, 3 for vectors."""
    if not isinstance(obj, DanObject):
        raise TypeError("length needs an object")
    return len(obj)