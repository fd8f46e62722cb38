"""
Structured logging configuration for the application.

Provides JSON-formatted logs with request IDs for production and plain text
for development.
"""

import logging
import sys
import time
import uuid
from contextvars import ContextVar
from typing import Any, Dict
from datetime import datetime, timezone
from fastapi import Request
from pythonjsonlogger import jsonlogger

# Set per request by log_requests; "-" outside a request
request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

access_logger = logging.getLogger("app.access")


class RequestIdFilter(logging.Filter):
    """Attach the current request id to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """
    Custom JSON formatter that adds standard fields to all log records.
    """

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['request_id'] = getattr(record, 'request_id', '-')

        if record.levelno >= logging.WARNING:
            log_record['module'] = record.module
            log_record['function'] = record.funcName
            log_record['line'] = record.lineno


def setup_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configure the root logger once at startup.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL (unknown names mean INFO)
        json_logs: JSON lines for production, human-readable text otherwise
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.addFilter(RequestIdFilter())

    if json_logs:
        formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(logger)s %(message)s')
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    console_handler.setFormatter(formatter)

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root_logger.addHandler(console_handler)

    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.ERROR)
    logging.getLogger("multipart").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


async def log_requests(request: Request, call_next):
    """
    HTTP middleware: tag the request with an id, log method, path, status and
    duration, and echo the id back in X-Request-ID.
    """
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    token = request_id_var.set(request_id)
    started = time.perf_counter()
    try:
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms"
        )
        response.headers["X-Request-ID"] = request_id
        return response
    finally:
        request_id_var.reset(token)
