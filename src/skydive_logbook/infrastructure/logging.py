"""Structured JSON logging configuration for the Skydive Logbook."""

import logging
import logging.handlers
import json
import sys
import uuid
from datetime import datetime, timezone
from typing import List, Optional
from contextvars import ContextVar
from pathlib import Path


SERVICE_NAME = "skydive-logbook"

# Correlation ID tracked across async requests
correlation_id_context: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)

_RESERVED_ATTRIBUTES = {
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

    def __init__(self, service_name: str = SERVICE_NAME):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
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
            if key not in _RESERVED_ATTRIBUTES
        }
        if extra_fields:
            log_entry["extra"] = extra_fields

        return json.dumps(log_entry, default=str, ensure_ascii=False)


class LoggingConfig:
    """Root logger setup: JSON lines to stdout and, optionally, rotating files."""

    QUIET_LOGGERS = (
        'sqlalchemy.engine', 'sqlalchemy.pool', 'uvicorn.access', 'httpx', 'httpcore',
    )

    def __init__(self,
                 log_level: str = "INFO",
                 service_name: str = SERVICE_NAME,
                 log_dir: Optional[str] = None,
                 max_file_size: int = 10 * 1024 * 1024,
                 backup_count: int = 5,
                 enable_console: bool = True,
                 enable_file: bool = False):
        """
        Args:
            log_level: Level name applied to the root logger and every handler
            service_name: Value of the "service" field and stem of the log file names
            log_dir: Directory for log files, logs/ under the working directory by default
            max_file_size: Rotation size per file in bytes
            backup_count: Rotated files kept per log
            enable_console: Emit to stdout
            enable_file: Emit to {service}.log, plus errors only to {service}-errors.log
        """
        self.log_level = logging.getLevelName(log_level.upper())
        if not isinstance(self.log_level, int):
            raise ValueError(f"Unknown log level: {log_level}")
        self.service_name = service_name
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.enable_console = enable_console
        self.enable_file = enable_file
        self.log_dir = Path(log_dir) if log_dir else Path.cwd() / "logs"

    def build_handlers(self) -> List[logging.Handler]:
        """Create the configured handlers, all sharing the JSON formatter and correlation filter."""
        handlers: List[logging.Handler] = []
        if self.enable_console:
            handlers.append(logging.StreamHandler(sys.stdout))

        if self.enable_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            handlers.append(self._rotating_handler(f"{self.service_name}.log"))
            handlers.append(self._rotating_handler(f"{self.service_name}-errors.log", logging.ERROR))

        formatter = JSONFormatter(service_name=self.service_name)
        correlation_filter = CorrelationIDFilter()
        for handler in handlers:
            if handler.level == logging.NOTSET:
                handler.setLevel(self.log_level)
            handler.addFilter(correlation_filter)
            handler.setFormatter(formatter)
        return handlers

    def setup_logging(self) -> None:
        """Replace the root logger handlers with the configured ones."""
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        root_logger.setLevel(self.log_level)
        for handler in self.build_handlers():
            root_logger.addHandler(handler)

        for name in self.QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    def _rotating_handler(self, filename: str, level: int = logging.NOTSET) -> logging.Handler:
        handler = logging.handlers.RotatingFileHandler(
            filename=self.log_dir / filename,
            maxBytes=self.max_file_size,
            backupCount=self.backup_count,
            encoding='utf-8'
        )
        handler.setLevel(level)
        return handler


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


def log_with_extra(logger: logging.Logger, level: int, message: str, **extra) -> None:
    """Log a message with extra fields."""
    logger.log(level, message, extra=extra)


def log_database_operation(logger: logging.Logger, operation: str, table: str, **extra) -> None:
    """Log a database operation."""
    log_with_extra(
        logger,
        logging.DEBUG,
        f"Database {operation}: {table}",
        db_operation=operation,
        db_table=table,
        **extra
    )


def log_authentication_attempt(logger: logging.Logger, license_number: str, success: bool, **extra) -> None:
    """Log an authentication attempt."""
    level = logging.INFO if success else logging.WARNING
    status = "successful" if success else "failed"
    log_with_extra(
        logger,
        level,
        f"Authentication attempt {status} for licence {license_number}",
        auth_license=license_number,
        auth_success=success,
        **extra
    )


def log_business_rule_violation(logger: logging.Logger, rule: str, details: str, **extra) -> None:
    """Log a business rule violation."""
    log_with_extra(
        logger,
        logging.WARNING,
        f"Business rule violation: {rule} - {details}",
        business_rule=rule,
        violation_details=details,
        **extra
    )


def log_weather_fetch(logger: logging.Logger, latitude: float, longitude: float, source: str, **extra) -> None:
    """Log a weather observation lookup."""
    log_with_extra(
        logger,
        logging.DEBUG,
        f"Weather fetched for ({latitude}, {longitude}) from {source}",
        weather_latitude=latitude,
        weather_longitude=longitude,
        weather_source=source,
        **extra
    )
