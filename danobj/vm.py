"""A small virtual machine that tracks objects and marks those reachable from its frames."""

from __future__ import annotations

from typing import Iterator

from danobj.objects import Array, DanObject, Vector
from danobj.stack import Stack

__all__ = ["Frame", "VirtualMachine"]


def _children(obj: DanObject) -> Iterator[DanObject]:
    if isinstance(obj, Vector):
        yield obj.x
        yield obj.y
        yield obj.z
    elif isinstance(obj, Array):
        yield from (element for element in obj if element is not None)


class Frame:
    """A stack frame holding references to the objects it uses."""

    __slots__ = ("references",)

    def __init__(self) -> None:
        self.references: Stack[DanObject] = Stack()

    def reference(self, obj: DanObject) -> None:
        """Record that this frame refers to an object."""
        if not isinstance(obj, DanObject):
            raise TypeError("a frame can only reference objects")
        self.references.push(obj)

    def __repr__(self) -> str:
        return f"Frame(references={len(self.references)})"


class VirtualMachine:
    """Holds a stack of frames and every object it has been asked to track."""

    def __init__(self) -> None:
        self.frames: Stack[Frame] = Stack()
        self.objects: Stack[DanObject] = Stack()
        self._marked: dict[int, DanObject] = {}

    def new_frame(self) -> Frame:
        """Create a frame, push it onto the frame stack and return it."""
        frame = Frame()
        self.push_frame(frame)
        return frame

    def push_frame(self, frame: Frame) -> None:
        """Push an existing frame onto the frame stack."""
        if not isinstance(frame, Frame):
            raise TypeError("only frames can be pushed")
        self.frames.push(frame)

    def pop_frame(self) -> Frame:
        """Remove and return the top frame; raise IndexError if there is none."""
        return self.frames.pop()

    def track(self, obj: DanObject) -> None:
        """Add an object to the set the machine manages."""
        if not isinstance(obj, DanObject):
            raise TypeError("only objects can be tracked")
        self.objects.push(obj)

    def mark(self) -> list[DanObject]:
        """Mark every object reachable from the frames and return them in discovery order."""
        self._marked = {}
        pending: Stack[DanObject] = Stack()
        for frame in self.frames:
            for obj in frame.references:
                pending.push(obj)
        while not pending.is_empty():
            obj = pending.pop()
            if id(obj) in self._marked:
                continue
            self._marked[id(obj)] = obj
            for child in _children(obj):
                pending.push(child)
        return list(self._marked.values())

    def is_marked(self, obj: DanObject) -> bool:
        """Whether the last call to mark reached this object."""
        return self._marked.get(id(obj)) is obj