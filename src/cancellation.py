"""Cancellable execution context passed to every store operation.

A ``Context`` can be cancelled explicitly from another thread or expire at a
deadline. The store calls ``check()`` before each backend round trip so a
scan-then-fetch loop stops promptly instead of returning a partial result.
"""
from __future__ import annotations

import threading
import time
from typing import Optional

from exceptions import OperationCancelled


class Context:
    def __init__(self, timeout: Optional[float] = None):
        self._event = threading.Event()
        self.deadline: float | None = time.monotonic() + timeout if timeout is not None else None

    @classmethod
    def background(cls) -> "Context":
        """Context that is never cancelled and has no deadline."""
        return cls()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set() or self._expired()

    def check(self) -> None:
        if self._event.is_set():
            raise OperationCancelled("operation cancelled")
        if self._expired():
            raise OperationCancelled("deadline exceeded")

    def _expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline


__all__ = ["Context"]
