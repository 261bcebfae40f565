import json
import logging
import os

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_LOGGER_INITIALIZED = False
# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}

class _JsonFormatter(logging.Formatter):
    def format(self, record):  # type: ignore
        data = {
            "level": record.levelname.lower(),
            "name": record.name,
            "msg": record.getMessage(),
        }
        data.update({k: v for k, v in record.__dict__.items() if k not in _RESERVED})
        return json.dumps(data, default=str)

def init_logging(force: bool = False):
    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED and not force:
        return
    json_logs = os.getenv("OBJDB_JSON_LOGS", "0").lower() in ("1", "true", "yes")
    level = getattr(logging, os.getenv("OBJDB_LOG_LEVEL", "INFO").upper(), logging.INFO)
    handler = logging.StreamHandler()
    if json_logs:
        handler.setFormatter(_JsonFormatter())
    logging.basicConfig(level=level, format=_FORMAT, handlers=[handler], force=True)
    _LOGGER_INITIALIZED = True

def get_logger(name: str):
    if not _LOGGER_INITIALIZED:
        init_logging()
    return logging.getLogger(name)

__all__ = ["get_logger", "init_logging"]
