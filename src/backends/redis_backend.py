"""Redis backend built on redis-py.

Transport failures (connection drops, timeouts) can be retried a bounded
number of times with exponential backoff plus jitter. Retries are off by
default (``OBJDB_REDIS_MAX_RETRIES=0``); once exhausted the original redis
exception is re-raised untouched so callers see the real transport error.
"""
from __future__ import annotations

import random
import time
from typing import Any, Callable, Optional, TypeVar

import redis

from app_logging import get_logger
from config import _Settings, get_settings

T = TypeVar("T")

_RETRYABLE = (redis.ConnectionError, redis.TimeoutError)


class RedisBackend:
    name = "redis"

    def __init__(
        self,
        client: "redis.Redis",
        *,
        max_retries: int = 0,
        backoff_base: float = 0.3,
        backoff_jitter: float = 0.25,
    ):
        self._client = client
        self._max_retries = max(0, max_retries)
        self._backoff_base = backoff_base
        self._backoff_jitter = backoff_jitter
        self._log = get_logger("objdb.backends.redis")

    @classmethod
    def from_settings(cls, settings: Optional[_Settings] = None) -> "RedisBackend":
        """Build a client from settings (env by default) without connecting."""
        s = settings or get_settings()
        if s.redis_url:
            client = redis.from_url(s.redis_url, socket_timeout=s.socket_timeout)
        else:
            client = redis.Redis(
                host=s.host,
                port=s.port,
                password=s.redis_password,
                db=s.redis_db,
                socket_timeout=s.socket_timeout,
            )
        return cls(
            client,
            max_retries=s.max_retries,
            backoff_base=s.backoff_base,
            backoff_jitter=s.backoff_jitter,
        )

    @classmethod
    def connect(cls, settings: Optional[_Settings] = None) -> "RedisBackend":
        """Like ``from_settings`` but pings the server first.

        Raises:
            redis.RedisError: the server is unreachable or rejects the credentials.
        """
        backend = cls.from_settings(settings)
        backend.ping()
        backend._log.info("connected", extra={"backend": cls.name})
        return backend

    # ----------------- Capability -----------------
    def set(self, key: str, value: bytes) -> None:
        self._call(self._client.set, key, value)

    def get(self, key: str) -> bytes | None:
        return self._call(self._client.get, key)

    def keys(self, pattern: str) -> list[str]:
        raw = self._call(self._client.keys, pattern)
        return [k.decode("utf-8") if isinstance(k, bytes) else k for k in raw]

    def delete(self, key: str) -> int:
        return int(self._call(self._client.delete, key))

    def ping(self) -> bool:
        return bool(self._call(self._client.ping))

    def flush(self) -> None:
        self._call(self._client.flushdb)

    def close(self) -> None:
        self._client.close()

    # ----------------- Helpers -----------------
    def _call(self, fn: Callable[..., T], *args: Any) -> T:
        attempt = 0
        while True:
            try:
                return fn(*args)
            except _RETRYABLE as e:
                if attempt >= self._max_retries:
                    raise
                sleep_for = self._backoff_base * (2 ** attempt)
                if self._backoff_jitter:
                    sleep_for += random.random() * self._backoff_jitter
                self._log.warning(
                    "retrying",
                    extra={"attempt": attempt + 1, "max": self._max_retries + 1, "sleep": round(sleep_for, 4), "error": str(e)},
                )
                time.sleep(sleep_for)
                attempt += 1


__all__ = ["RedisBackend"]
