"""Key-value backend capability used by the object store.

The store only needs four primitives: ``set``, ``get``, ``keys`` (glob
pattern scan with Redis semantics) and ``delete``. ``ping``, ``flush`` and
``close`` are operational helpers for startup checks, tests and the CLI demo.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueBackend(Protocol):
    def set(self, key: str, value: bytes) -> None:
        ...

    def get(self, key: str) -> bytes | None:
        """Return the stored value, or None if ``key`` does not exist."""
        ...

    def keys(self, pattern: str) -> list[str]:
        ...

    def delete(self, key: str) -> int:
        """Remove ``key``; return the number of keys removed (0 or 1)."""
        ...

    def ping(self) -> bool:
        ...

    def flush(self) -> None:
        ...

    def close(self) -> None:
        ...


__all__ = ["KeyValueBackend"]
