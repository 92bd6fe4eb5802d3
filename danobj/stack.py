"""A last-in, first-out stack of arbitrary items."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

__all__ = ["Stack"]

T = TypeVar("T")


class Stack(Generic[T]):
    """A growable LIFO stack.

    Iteration runs from the bottom of the stack to the top.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: list[T] = list(items) if items is not None else []

    def push(self, item: T) -> None:
        """Put an item on top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item; raise IndexError if the stack is empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it; raise IndexError if empty."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Whether the stack holds no items."""
        return not self._items

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __contains__(self, item: Any) -> bool:
        return any(existing is item for existing in self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"