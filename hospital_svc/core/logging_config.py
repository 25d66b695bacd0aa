"""
Structured logging for the Hospital Records Service.

Every record is stamped with the current request id (or "-" outside a
request) by RequestContextFilter, so both output formats carry it.

The JSON format groups the context this service logs into named blocks:
    - "store": what Database.connection reports on failure
      (operation, constraint, db_path, error)
    - "validation": what the entity validators report on rejection
      (field, value, reason, allowed)
Anything else passed through ``extra={...}`` lands under "extra".

Log Structure (JSON):
{
    "timestamp": "2025-09-15T10:30:00.123Z",
    "level": "WARNING",
    "logger": "repositories.base",
    "message": "Integrity constraint violated",
    "request_id": "abc12345",
    "store": {"operation": "insert into Patient",
              "constraint": "UNIQUE constraint failed: Patient.phone"}
}

Usage:
    from core.logging_config import setup_logging

    setup_logging()                   # JSON, for the API
    setup_logging(json_format=False)  # text, for seed_db.py
"""

import json
import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

NO_REQUEST_ID = "-"

FIELD_GROUPS: Dict[str, tuple] = {
    "store": ("operation", "constraint", "db_path", "error"),
    "validation": ("field", "value", "reason", "allowed"),
}

# Attributes every LogRecord carries, plus the ones the filter adds
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message", "asctime", "request_id",
}

APP_LOGGERS = ("core", "api", "services", "repositories", "seed_db")

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(request_id)s | %(name)s | %(message)s"


def get_request_id() -> Optional[str]:
    """Get the current request ID from context."""
    return request_id_var.get()


def set_request_id(request_id: str) -> None:
    request_id_var.set(request_id)


def clear_request_id() -> None:
    request_id_var.set(None)


class RequestContextFilter(logging.Filter):
    """Stamp ``record.request_id`` from the request context."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or NO_REQUEST_ID
        return True


class JSONFormatter(logging.Formatter):
    """Single-line JSON with the service's context fields grouped."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, timezone.utc)
        log_entry: Dict[str, Any] = {
            "timestamp": timestamp.strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        request_id = getattr(record, "request_id", None) or get_request_id()
        if request_id and request_id != NO_REQUEST_ID:
            log_entry["request_id"] = request_id

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        for group, keys in FIELD_GROUPS.items():
            block = {key: extra.pop(key) for key in keys if key in extra}
            if block:
                log_entry[group] = block
        if extra:
            log_entry["extra"] = extra

        return json.dumps(log_entry, default=str, ensure_ascii=False)


def setup_logging(level: str = "INFO", json_format: bool = True) -> None:
    """
    Route the application and uvicorn loggers through one stdout handler.

    Environment Variables:
        LOG_LEVEL: Override the log level
        LOG_FORMAT: Override format ("json" or "text")
    """
    level = os.environ.get("LOG_LEVEL", level).upper()
    json_format = os.environ.get("LOG_FORMAT", "json" if json_format else "text").lower() == "json"

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestContextFilter())
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    for logger_name in APP_LOGGERS + ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logger = logging.getLogger(logger_name)
        logger.handlers = []
        logger.propagate = True
        if logger_name in APP_LOGGERS:
            logger.setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured",
        extra={"level": level, "format": "json" if json_format else "text"}
    )
