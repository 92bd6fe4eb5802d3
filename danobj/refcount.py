"""Reference-counted runtime values that release their children when the last reference goes."""

from __future__ import annotations

from typing import ClassVar, Iterator, Optional

from danobj.objects import Kind, _to_single, _wrap_int

__all__ = [
    "ReleasedObjectError",
    "RcObject",
    "RcInteger",
    "RcFloat",
    "RcString",
    "RcVector",
    "RcArray",
    "add",
]


class ReleasedObjectError(RuntimeError):
    """Raised when an object is used after its storage has been released."""


class RcObject:
    """Base class of reference-counted values; a new object holds one reference."""

    kind: ClassVar[Kind]
    __slots__ = ("_refcount",)

    def __init__(self) -> None:
        self._refcount = 1

    @property
    def refcount(self) -> int:
        """The number of live references to this object."""
        return self._refcount

    @property
    def released(self) -> bool:
        """Whether the object has been released."""
        return self._refcount == 0

    def _ensure_alive(self) -> None:
        if self._refcount == 0:
            raise ReleasedObjectError(f"{self.kind.value} object has been released")

    def incref(self) -> RcObject:
        """Take one more reference to the object and return it."""
        self._ensure_alive()
        self._refcount += 1
        return self

    def decref(self) -> bool:
        """Drop one reference; release the object when none remain.

        Returns True if the object was released by this call.
        """
        self._ensure_alive()
        self._refcount -= 1
        if self._refcount == 0:
            self._drop_children()
            return True
        return False

    def release(self) -> None:
        """Release the object now, whatever its reference count."""
        self._ensure_alive()
        self._refcount = 0
        self._drop_children()

    def _drop_children(self) -> None:
        """Give up the references this object holds to others."""

    def __len__(self) -> int:
        self._ensure_alive()
        return 1

    def _add(self, other: RcObject) -> Optional[RcObject]:
        return None

    def __add__(self, other: object) -> RcObject:
        if not isinstance(other, RcObject):
            return NotImplemented
        self._ensure_alive()
        other._ensure_alive()
        result = self._add(other)
        if result is None:
            return NotImplemented
        return result


def _release_child(child: Optional[RcObject]) -> None:
    if child is not None and not child.released:
        child.decref()


class RcInteger(RcObject):
    """A reference-counted signed 32-bit integer."""

    kind: ClassVar[Kind] = Kind.INTEGER
    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"RcInteger needs an int, got {type(value).__name__}")
        super().__init__()
        self._value = _wrap_int(value)

    @property
    def value(self) -> int:
        self._ensure_alive()
        return self._value

    def _add(self, other: RcObject) -> Optional[RcObject]:
        if isinstance(other, RcInteger):
            return RcInteger(self._value + other._value)
        if isinstance(other, RcFloat):
            return RcFloat(float(self._value) + other._value)
        return None

    def __repr__(self) -> str:
        return f"RcInteger({self._value}, refcount={self._refcount})"


class RcFloat(RcObject):
    """A reference-counted single-precision number."""

    kind: ClassVar[Kind] = Kind.FLOAT
    __slots__ = ("_value",)

    def __init__(self, value: float) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"RcFloat needs a number, got {type(value).__name__}")
        super().__init__()
        self._value = _to_single(float(value))

    @property
    def value(self) -> float:
        self._ensure_alive()
        return self._value

    def _add(self, other: RcObject) -> Optional[RcObject]:
        if isinstance(other, (RcInteger, RcFloat)):
            return RcFloat(self._value + float(other._value))
        return None

    def __repr__(self) -> str:
        return f"RcFloat({self._value}, refcount={self._refcount})"


class RcString(RcObject):
    """A reference-counted text string."""

    kind: ClassVar[Kind] = Kind.STRING
    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"RcString needs a str, got {type(value).__name__}")
        super().__init__()
        self._value: Optional[str] = value

    @property
    def value(self) -> str:
        self._ensure_alive()
        assert self._value is not None
        return self._value

    def __len__(self) -> int:
        return len(self.value)

    def _drop_children(self) -> None:
        self._value = None

    def _add(self, other: RcObject) -> Optional[RcObject]:
        if isinstance(other, RcString):
            return RcString(self.value + other.value)
        return None

    def __repr__(self) -> str:
        return f"RcString({self._value!r}, refcount={self._refcount})"


class RcVector(RcObject):
    """A three-component vector that holds a reference to each component."""

    kind: ClassVar[Kind] = Kind.VECTOR
    __slots__ = ("_components",)

    def __init__(self, x: RcObject, y: RcObject, z: RcObject) -> None:
        components = (x, y, z)
        for component in components:
            if not isinstance(component, RcObject):
                raise TypeError("RcVector components must be reference-counted objects")
            component._ensure_alive()
        super().__init__()
        for component in components:
            component.incref()
        self._components: tuple = components

    @property
    def x(self) -> RcObject:
        self._ensure_alive()
        return self._components[0]

    @property
    def y(self) -> RcObject:
        self._ensure_alive()
        return self._components[1]

    @property
    def z(self) -> RcObject:
        self._ensure_alive()
        return self._components[2]

    def __len__(self) -> int:
        self._ensure_alive()
        return 3

    def _drop_children(self) -> None:
        for component in self._components:
            _release_child(component)
        self._components = ()

    def _add(self, other: RcObject) -> Optional[RcObject]:
        if not isinstance(other, RcVector):
            return None
        sums = []
        try:
            for mine, theirs in zip(self._components, other._components):
                sums.append(add(mine, theirs))
            return RcVector(*sums)
        finally:
            # The vector holds its own references; drop the temporary ones.
            for partial in sums:
                partial.decref()

    def __repr__(self) -> str:
        return f"RcVector({self._components!r}, refcount={self._refcount})"


class RcArray(RcObject):
    """A fixed-size array of slots that holds a reference to each stored object."""

    kind: ClassVar[Kind] = Kind.ARRAY
    __slots__ = ("_elements",)

    def __init__(self, size: int) -> None:
        if isinstance(size, bool) or not isinstance(size, int):
            raise TypeError("RcArray size must be an int")
        if size < 0:
            raise ValueError("RcArray size must not be negative")
        super().__init__()
        self._elements: list = [None] * size

    def _check_index(self, index: int) -> None:
        self._ensure_alive()
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError("RcArray index must be an int")
        if not 0 <= index < len(self._elements):
            raise IndexError(
                f"index {index} out of range for array of size {len(self._elements)}"
            )

    def __getitem__(self, index: int) -> Optional[RcObject]:
        self._check_index(index)
        return self._elements[index]

    def __setitem__(self, index: int, value: RcObject) -> None:
        if not isinstance(value, RcObject):
            raise TypeError("only reference-counted objects can be stored in an array")
        self._check_index(index)
        value.incref()
        previous = self._elements[index]
        if previous is not None:
            previous.decref()
        self._elements[index] = value

    def __iter__(self) -> Iterator[Optional[RcObject]]:
        self._ensure_alive()
        return iter(list(self._elements))

    def __len__(self) -> int:
        self._ensure_alive()
        return len(self._elements)

    def _drop_children(self) -> None:
        for element in self._elements:
            _release_child(element)
        self._elements = []

    def _add(self, other: RcObject) -> Optional[RcObject]:
        if not isinstance(other, RcArray):
            return None
        joined = RcArray(len(self._elements) + len(other._elements))
        for index, element in enumerate([*self._elements, *other._elements]):
            if element is not None:
                joined[index] = element
        return joined

    def __repr__(self) -> str:
        return f"RcArray({self._elements!r}, refcount={self._refcount})"


def add(a: RcObject, b: RcObject) -> RcObject:
    """Add two objects into a new one, raising TypeError when their kinds do not combine."""
    if not isinstance(a, RcObject) or not isinstance(b, RcObject):
        raise TypeError("both operands must be reference-counted objects")
    a._ensure_alive()
    b._ensure_alive()
    result = a._add(b)
    if result is None:
        raise TypeError(f"cannot add {a.kind.value} and {b.kind.value}")
    return result