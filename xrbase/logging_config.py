"""Logging configuration for xr-base.

This module provides the logging setup shared by every xr-base component:
- Console output, optionally rotated file output
- JSON formatting for structured logging
- Request ID tracking
"""
import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

import pytz
from pythonjsonlogger import jsonlogger


class RequestIdFilter(logging.Filter):
    """Add request_id to log records if available in the context."""

    def __init__(self, default_request_id: str = "system") -> None:
        super().__init__()
        self.default_request_id = default_request_id

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, 'request_id'):
            record.request_id = self.default_request_id
        return True


class JsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that includes additional fields."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord,
                   message_dict: Dict[str, Any]) -> None:
        """Add custom fields to the log record."""
        super().add_fields(log_record, record, message_dict)

        # ISO timestamp with timezone
        log_record['@timestamp'] = datetime.now(pytz.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['file'] = f"{record.filename}:{record.lineno}"
        log_record['thread'] = record.thread
        log_record['process'] = record.process
        log_record['request_id'] = getattr(record, 'request_id', 'system')

        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)


def setup_logging(
    service_name: str,
    *,
    log_level: str = "INFO",
    log_to_file: bool = False,
    enable_json: bool = False,
    log_dir: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """Configure logging for a service.

    Args:
        service_name: Name of the service (also the logger name)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to log to ``<log_dir>/<service_name>/<service_name>.log``
        enable_json: Whether to use JSON format for logs
        log_dir: Base log directory, defaults to ``AppConfig.LOG_DIR``

    Returns:
        Configured logger instance
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(service_name)
    logger.setLevel(level)

    # Don't propagate to root logger to avoid duplicate logs
    logger.propagate = False

    # Clear existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    if enable_json:
        formatter: logging.Formatter = JsonFormatter(
            '%(asctime)s %(levelname)s %(name)s %(message)s',
            timestamp=True
        )
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(request_id)s - '
            '[%(filename)s:%(lineno)d] - %(message)s'
        )

    request_filter = RequestIdFilter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(request_filter)
    logger.addHandler(console_handler)

    if log_to_file:
        if log_dir is None:
            from xrbase.config import get_app_config

            log_dir = get_app_config().LOG_DIR
        service_dir = Path(log_dir) / service_name
        service_dir.mkdir(parents=True, exist_ok=True)

        # 10MB per file, keep 5 backups
        file_handler = logging.handlers.RotatingFileHandler(
            service_dir / f"{service_name}.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding='utf-8',
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(request_filter)
        logger.addHandler(file_handler)

    logger.addFilter(request_filter)

    return logger


def setup_logging_from_config(service_name: Optional[str] = None) -> logging.Logger:
    """Configure logging from ``AppConfig`` (LOG_LEVEL, LOG_TO_FILE, LOG_JSON, LOG_DIR)."""
    from xrbase.config import get_app_config

    config = get_app_config()
    return setup_logging(
        service_name or "xrbase",
        log_level=config.LOG_LEVEL,
        log_to_file=config.LOG_TO_FILE,
        enable_json=config.LOG_JSON,
        log_dir=config.LOG_DIR,
    )


def get_logger(name: str, request_id: Optional[str] = None) -> Union[logging.Logger, logging.LoggerAdapter]:
    """Get a logger with the given name and optional request ID.

    Args:
        name: Logger name (usually __name__)
        request_id: Optional request ID for request tracing

    Returns:
        Logger instance, wrapped in a LoggerAdapter when a request ID is given
    """
    logger = logging.getLogger(name)

    if request_id is not None:
        return logging.LoggerAdapter(logger, {'request_id': request_id})

    return logger
