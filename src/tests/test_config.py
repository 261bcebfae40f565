from config import get_settings


def test_defaults(monkeypatch):
    for name in ("REDIS_URL", "REDIS_HOST", "REDIS_PASSWORD", "REDIS_DB", "OBJDB_REDIS_MAX_RETRIES"):
        monkeypatch.delenv(name, raising=False)
    s = get_settings()
    assert s.redis_url is None
    assert (s.host, s.port) == ("127.0.0.1", 6379)
    assert s.redis_password is None
    assert s.redis_db == 0
    assert s.max_retries == 0


def test_from_env(monkeypatch):
    monkeypatch.setenv("REDIS_HOST", "cache")
    monkeypatch.setenv("REDIS_PASSWORD", "pw")
    monkeypatch.setenv("REDIS_DB", "3")
    monkeypatch.setenv("OBJDB_REDIS_MAX_RETRIES", "2")
    s = get_settings()
    assert (s.host, s.port) == ("cache", 6379)
    assert s.redis_password == "pw"
    assert s.redis_db == 3
    assert s.max_retries == 2
