from __future__ import annotations

import json
import logging
from io import StringIO
from unittest.mock import Mock, patch

import redis

import app_logging
from backends.redis_backend import RedisBackend


def test_backend_emits_json_logs(monkeypatch):
    monkeypatch.setenv("OBJDB_JSON_LOGS", "1")
    app_logging._LOGGER_INITIALIZED = False
    app_logging.init_logging(force=True)

    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(app_logging._JsonFormatter())
    root = logging.getLogger()
    root.handlers = [handler]

    client = Mock(spec=redis.Redis)
    client.get.side_effect = [redis.ConnectionError("blip"), b"v"]
    backend = RedisBackend(client, max_retries=1, backoff_base=0, backoff_jitter=0)
    with patch("backends.redis_backend.time.sleep"):
        assert backend.get("k") == b"v"

    lines = [json.loads(line) for line in stream.getvalue().strip().splitlines()]
    retry = [j for j in lines if j.get("msg") == "retrying"]
    assert retry, f"no retry line captured: {lines}"
    assert retry[0]["name"] == "objdb.backends.redis"
    assert retry[0]["attempt"] == 1
    assert retry[0]["error"] == "blip"
