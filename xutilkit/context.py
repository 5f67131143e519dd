"""A thread-safe association table keyed by resource id and context."""

from __future__ import annotations

import threading
from typing import Any

__all__ = ["ContextNotFound", "ContextTable"]


class ContextNotFound(KeyError):
    """Raised when no entry exists for a resource id and context."""


class ContextTable:
    """Stores one value per ``(rid, context)`` pair.

    All operations are guarded by a re-entrant lock.
    """

    def __init__(self) -> None:
        self._entries: dict[tuple[int, int], Any] = {}
        self._lock = threading.RLock()

    def save(self, rid: int, context: int, data: Any) -> None:
        """Store ``data`` under ``(rid, context)``, replacing any earlier value."""
        with self._lock:
            self._entries[(rid, context)] = data

    def find(self, rid: int, context: int) -> Any:
        """Return the value stored under ``(rid, context)``."""
        with self._lock:
            try:
                return self._entries[(rid, context)]
            except KeyError:
                raise ContextNotFound((rid, context)) from None

    def delete(self, rid: int, context: int) -> None:
        """Remove the entry for ``(rid, context)``."""
        with self._lock:
            try:
                del self._entries[(rid, context)]
            except KeyError:
                raise ContextNotFound((rid, context)) from None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries