"""Opaque handle table for objects owned by foreign callers.

Handles are positive integers that are never reused within a process, so a
stale handle is detected instead of silently resolving to a newer object.
Zero is the null handle and is never allocated.

Thread-safe using threading.Lock.

Python 3.13+.
"""

import itertools
import threading

__all__ = ["NULL_HANDLE", "HandleTable"]

NULL_HANDLE: int = 0


class HandleTable[T]:
    """Thread-safe mapping from opaque handles to owned objects.

    Attributes:
        name: Label used in logs and repr
    """

    __slots__ = ("_counter", "_lock", "_objects", "name")

    def __init__(self, name: str) -> None:
        """Initialize an empty table.

        Args:
            name: Label used in logs and repr
        """
        self.name = name
        self._objects: dict[int, T] = {}
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def allocate(self, obj: T) -> int:
        """Take ownership of obj and return its new handle."""
        with self._lock:
            handle = next(self._counter)
            self._objects[handle] = obj
            return handle

    def get(self, handle: int | None) -> T | None:
        """Return the object for handle, or None for null or unknown handles."""
        if not handle:
            return None
        with self._lock:
            return self._objects.get(handle)

    def release(self, handle: int | None) -> bool:
        """Drop the object for handle.

        Returns:
            True if a live handle was released, False for null or unknown
        """
        if not handle:
            return False
        with self._lock:
            if handle not in self._objects:
                return False
            del self._objects[handle]
            return True

    def __contains__(self, handle: object) -> bool:
        with self._lock:
            return handle in self._objects

    def __len__(self) -> int:
        with self._lock:
            return len(self._objects)

    def __repr__(self) -> str:
        return f"HandleTable(name={self.name!r}, live={len(self)})"
