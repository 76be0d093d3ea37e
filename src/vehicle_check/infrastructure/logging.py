"""Structured JSON logging configuration for the vehicle check workflow."""

import logging
import logging.handlers
import json
import sys
import uuid
from datetime import datetime
from typing import Any, Optional, TYPE_CHECKING
from contextvars import ContextVar
from pathlib import Path

if TYPE_CHECKING:
    from src.vehicle_check.config import Settings


# Context variable for correlation ID tracking across async calls
correlation_id_context: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)

_RESERVED_RECORD_KEYS = {
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename',
    'module', 'lineno', 'funcName', 'created', 'msecs', 'relativeCreated',
    'thread', 'threadName', 'processName', 'process', 'message', 'exc_info',
    'exc_text', 'stack_info', 'correlation_id', 'taskName'
}


class CorrelationIDFilter(logging.Filter):
    """Add correlation ID to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Add correlation ID to the log record."""
        record.correlation_id = correlation_id_context.get() or "unknown"
        return True


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, service_name: str = "vehicle-check"):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry: dict[str, Any] = {
            "timestamp": datetime.utcnow().isoformat() + "Z",
            "level": record.levelname,
            "service": self.service_name,
            "logger": record.name,
            "message": record.getMessage(),
            "correlation_id": getattr(record, 'correlation_id', 'unknown'),
        }

        if record.module:
            log_entry["module"] = record.module
        if record.funcName and record.funcName != '<module>':
            log_entry["function"] = record.funcName
        if record.lineno:
            log_entry["line"] = record.lineno

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info)
            }

        extra_fields = {
            key: value for key, value in record.__dict__.items()
            if key not in _RESERVED_RECORD_KEYS
        }
        if extra_fields:
            log_entry["extra"] = extra_fields

        return json.dumps(log_entry, default=str, ensure_ascii=False)


class LoggingConfig:
    """Root logger setup: JSON lines on stdout and, optionally, a rotating file."""

    def __init__(self,
                 log_level: str = "INFO",
                 service_name: str = "vehicle-check",
                 log_file: Optional[str] = None,
                 enable_console: bool = True):
        self.log_level = getattr(logging, log_level.upper())
        self.service_name = service_name
        self.log_file = Path(log_file) if log_file else None
        self.enable_console = enable_console

    def setup_logging(self) -> None:
        """Replace the root handlers with JSON handlers."""
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
        root_logger.setLevel(self.log_level)

        handlers: list[logging.Handler] = []
        if self.enable_console:
            handlers.append(logging.StreamHandler(sys.stdout))
        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.handlers.RotatingFileHandler(
                filename=self.log_file,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding='utf-8'
            ))

        correlation_filter = CorrelationIDFilter()
        json_formatter = JSONFormatter(service_name=self.service_name)
        for handler in handlers:
            handler.setLevel(self.log_level)
            handler.addFilter(correlation_filter)
            handler.setFormatter(json_formatter)
            root_logger.addHandler(handler)

        # Keep client and server libraries quiet unless they warn
        for name in ('httpx', 'httpcore', 'uvicorn.access'):
            logging.getLogger(name).setLevel(logging.WARNING)


def generate_correlation_id() -> str:
    """Generate a new correlation ID."""
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str) -> None:
    """Set correlation ID for the current context."""
    correlation_id_context.set(correlation_id)


def get_correlation_id() -> Optional[str]:
    """Get current correlation ID."""
    return correlation_id_context.get()


def clear_correlation_id() -> None:
    """Clear correlation ID from current context."""
    correlation_id_context.set(None)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name."""
    return logging.getLogger(name)


def setup_logging(settings: "Settings") -> LoggingConfig:
    """Setup logging from application settings."""
    config = LoggingConfig(
        log_level=settings.log_level,
        service_name=settings.service_name,
        log_file=settings.log_file
    )
    config.setup_logging()
    return config


def log_with_extra(logger: logging.Logger, level: int, message: str, **extra) -> None:
    """Log a message with extra fields."""
    logger.log(level, message, extra=extra)


def log_api_call(logger: logging.Logger, method: str, url: str, status_code: Optional[int],
                 duration_ms: float, **extra) -> None:
    """Log an outgoing call to the check API."""
    level = logging.INFO if status_code is not None and status_code < 400 else logging.WARNING
    log_with_extra(
        logger,
        level,
        f"API call: {method} {url} -> {status_code} ({duration_ms:.2f}ms)",
        request_method=method,
        request_url=url,
        response_status=status_code,
        response_duration_ms=duration_ms,
        **extra
    )


def log_submission_outcome(logger: logging.Logger, vehicle_id: str, outcome: str, **extra) -> None:
    """Log the outcome of a check submission."""
    level = logging.INFO if outcome == "succeeded" else logging.ERROR
    log_with_extra(
        logger,
        level,
        f"Check submission {outcome} for vehicle '{vehicle_id}'",
        vehicle_id=vehicle_id,
        submission_outcome=outcome,
        **extra
    )


def log_validation_failure(logger: logging.Logger, vehicle_id: str, messages: list[str], **extra) -> None:
    """Log a check rejected with field-level validation errors."""
    log_with_extra(
        logger,
        logging.WARNING,
        f"Check for vehicle '{vehicle_id}' rejected: {'; '.join(messages)}",
        vehicle_id=vehicle_id,
        validation_errors=messages,
        **extra
    )
