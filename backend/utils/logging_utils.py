"""
Logging Utilities

Root logger setup plus helpers for attaching request-scoped context
(request id, user id, operation) to log records.
"""

import inspect
import logging
import sys
from contextvars import ContextVar
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE_NAME = 'user_service.log'

# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

# Marks handlers installed by configure_logging so repeated calls replace them
_HANDLER_FLAG = '_user_service_handler'


def configure_logging(level: str = 'INFO', log_dir: Optional[str] = None) -> Optional[Path]:
    """
    Configure the root logger with a console handler and, when log_dir is
    given, a rotating file handler (10MB per file, 5 backups).

    Safe to call more than once; handlers from a previous call are replaced.

    Returns:
        Path of the log file, or None when logging only to the console
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    log_formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    setattr(console_handler, _HANDLER_FLAG, True)
    root_logger.addHandler(console_handler)

    log_file = None
    if log_dir:
        log_path = Path(log_dir).expanduser()
        log_path.mkdir(parents=True, exist_ok=True)
        log_file = log_path / LOG_FILE_NAME

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        setattr(file_handler, _HANDLER_FLAG, True)
        root_logger.addHandler(file_handler)

    return log_file


class StructuredLogger:
    """
    Wrapper around standard logger that merges the current logging
    context into every record's extra fields.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("User deleted", extra={"user_id": 7})
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.warning(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


def get_logging_context() -> Dict[str, Any]:
    """Return a copy of the current logging context."""
    return _logging_context.get().copy()


def set_logging_context(**kwargs):
    """
    Add key-value pairs to the logging context for the current request.

    Example:
        set_logging_context(request_id="abc-123")
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


def log_operation(operation_name: str):
    """
    Decorator that logs start, completion and failure of an operation.

    A user_id keyword argument, when present, is added to the context.
    Exceptions are logged and re-raised unchanged.

    Example:
        @log_operation("get_user")
        def get_user(user_id: int): ...
    """
    def decorator(func):
        def _context(kwargs) -> Dict[str, Any]:
            context = {"operation": operation_name}
            if "user_id" in kwargs:
                context["user_id"] = kwargs["user_id"]
            return context

        def _failed(logger: StructuredLogger, context: Dict[str, Any], e: Exception):
            context["error"] = str(e)
            context["error_type"] = type(e).__name__
            logger.warning(f"Failed {operation_name}: {type(e).__name__}", extra=context)

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context = _context(kwargs)
            logger.info(f"Starting {operation_name}", extra=context)
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                _failed(logger, context, e)
                raise
            logger.info(f"Completed {operation_name}", extra=context)
            return result

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context = _context(kwargs)
            logger.info(f"Starting {operation_name}", extra=context)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _failed(logger, context, e)
                raise
            logger.info(f"Completed {operation_name}", extra=context)
            return result

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
