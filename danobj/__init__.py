"""A small dynamic object model with reference counting, a stack and a virtual machine that marks reachable objects."""

__version__ = "0.1.0"
__all__ = ["objects", "refcount", "stack", "vm"]