"""Structured logging configuration for chatquery."""

import json
import logging
import re
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# Record attributes promoted to top-level JSON keys when present.
_CONTEXT_FIELDS = (
    "request_id",
    "endpoint",
    "method",
    "status_code",
    "duration_ms",
    "client_ip",
    "provider",
    "command",
)

# Query parameters that carry provider credentials.
_SECRET_PARAM = re.compile(r"\b(key|appid|username|cx)=([^&\s]+)", re.IGNORECASE)

# Scoped to the current task, so concurrent requests never see each other's id.
_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def redact(message: str) -> str:
    """Mask credential values embedded in URLs."""
    return _SECRET_PARAM.sub(r"\1=***", message)


class JSONFormatter(logging.Formatter):
    """One JSON object per record, context fields at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": redact(record.getMessage()),
            "module": record.module,
            "line": record.lineno,
        }
        for field in _CONTEXT_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)
        if record.exc_info:
            log_data["exception"] = redact(self.formatException(record.exc_info))
        return json.dumps(log_data, ensure_ascii=False)


class PlainFormatter(logging.Formatter):
    def __init__(self):
        super().__init__("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        return redact(super().format(record))


class StructuredLogger:
    """Logger wrapper that stamps every record with the current request id."""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def set_request_id(self, request_id: str) -> None:
        """Bind a request id to the current task's context."""
        _request_id.set(request_id)

    def log(self, level: int, message: str, *args, extra: Optional[Dict[str, Any]] = None, **kwargs) -> None:
        log_extra = dict(extra or {})
        request_id = _request_id.get()
        if request_id and "request_id" not in log_extra:
            log_extra["request_id"] = request_id
        self.logger.log(level, message, *args, extra=log_extra, **kwargs)

    def debug(self, message: str, *args, **kwargs) -> None:
        self.log(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs) -> None:
        self.log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs) -> None:
        self.log(logging.WARNING, message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs) -> None:
        self.log(logging.ERROR, message, *args, **kwargs)


def setup_logging(
    level: str = "INFO",
    json_format: bool = True,
    log_file: Optional[str] = None
) -> None:
    """
    Set up logging for the service.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: Emit JSON lines (True) or plain text (False)
        log_file: Optional file path to write logs to as well as stdout
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = JSONFormatter() if json_format else PlainFormatter()

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    # httpx logs full request URLs, including API keys passed as query params
    for noisy in ("httpx", "httpcore", "uvicorn", "uvicorn.access"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance."""
    return StructuredLogger(name)
