import os
from dataclasses import dataclass


@dataclass
class _Settings:
    redis_url: str | None = None
    redis_host: str = "127.0.0.1:6379"
    redis_password: str | None = None
    redis_db: int = 0
    socket_timeout: float = 5.0
    max_retries: int = 0
    backoff_base: float = 0.3
    backoff_jitter: float = 0.25

    @property
    def host(self) -> str:
        return self.redis_host.rsplit(":", 1)[0] if ":" in self.redis_host else self.redis_host

    @property
    def port(self) -> int:
        if ":" in self.redis_host:
            return int(self.redis_host.rsplit(":", 1)[1])
        return 6379


def get_settings() -> _Settings:
    return _Settings(
        redis_url=os.getenv("REDIS_URL") or None,
        redis_host=os.getenv("REDIS_HOST", "127.0.0.1:6379"),
        redis_password=os.getenv("REDIS_PASSWORD") or None,
        redis_db=int(os.getenv("REDIS_DB", "0")),
        socket_timeout=float(os.getenv("OBJDB_REDIS_SOCKET_TIMEOUT", "5.0")),
        max_retries=int(os.getenv("OBJDB_REDIS_MAX_RETRIES", "0")),
        backoff_base=float(os.getenv("OBJDB_REDIS_BACKOFF_BASE", "0.3")),
        backoff_jitter=float(os.getenv("OBJDB_REDIS_BACKOFF_JITTER", "0.25")),
    )

__all__ = ["get_settings", "_Settings"]
