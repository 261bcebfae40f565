"""Backend registry/factory."""
from __future__ import annotations

from .base import KeyValueBackend
from .memory import MemoryBackend
from .redis_backend import RedisBackend

_BACKENDS: dict[str, type] = {
    MemoryBackend.name: MemoryBackend,
    RedisBackend.name: RedisBackend,
}


def get_backend(name: str, **kwargs) -> KeyValueBackend:
    """Instantiate a backend by name; ``redis`` connects using env settings."""
    cls = _BACKENDS.get(name.lower())
    if not cls:
        raise ValueError(f"Unknown backend: {name}")
    if cls is RedisBackend:
        return RedisBackend.connect(**kwargs)
    return cls(**kwargs)


__all__ = ["get_backend", "KeyValueBackend", "MemoryBackend", "RedisBackend"]
