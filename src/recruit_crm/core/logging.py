"""Structured logging configuration."""

import logging
import sys
import time
from typing import Any, Dict, Optional
from datetime import datetime, timezone
from contextlib import contextmanager

import structlog
from structlog.stdlib import LoggerFactory

from .config import Settings, settings as default_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structured logging for the application."""
    settings = settings or default_settings

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if settings.environment == "production"
            else structlog.dev.ConsoleRenderer(colors=True),
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
    )

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.log_level == "DEBUG" else logging.WARNING
    )
    # google-cloud clients are chatty at INFO
    logging.getLogger("google").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return structlog.get_logger(name)


class PerformanceLogger:
    """Logger for tracking request handler timings."""

    def __init__(self, logger_name: str = "performance"):
        self.logger = get_logger(logger_name)

    @contextmanager
    def log_operation_time(
        self,
        operation: str,
        **context: Any
    ):
        """Context manager to log operation execution time.

        Args:
            operation: Name of the operation being timed
            **context: Additional context for logging
        """
        start_time = time.time()

        self.logger.debug("Operation started", operation=operation, **context)

        try:
            yield

            duration = time.time() - start_time
            self.logger.info(
                "Operation completed",
                operation=operation,
                duration_seconds=round(duration, 3),
                **context
            )

        except Exception as e:
            duration = time.time() - start_time
            self.logger.warning(
                "Operation failed",
                operation=operation,
                duration_seconds=round(duration, 3),
                error_type=type(e).__name__,
                **context
            )
            raise


class ErrorLogger:
    """Logger for detailed error tracking and debugging."""

    def __init__(self, logger_name: str = "error"):
        self.logger = get_logger(logger_name)

    def log_error_with_context(
        self,
        error: Exception,
        operation: str,
        tenant_id: Optional[str] = None,
        request_data: Optional[Dict[str, Any]] = None,
        **context: Any
    ):
        """Log an unexpected error with the context needed to debug it.

        The full error text stays in the logs; API responses only carry
        a fixed message.
        """
        self.logger.error(
            "Unexpected error",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
            tenant_id=tenant_id,
            request_data=request_data,
            timestamp=datetime.now(timezone.utc).isoformat(),
            exc_info=error,
            **context
        )

    def log_validation_error(
        self,
        field: str,
        error_message: str,
        **context: Any
    ):
        """Log validation errors with field details."""
        self.logger.warning(
            "Validation error",
            field=field,
            error_message=error_message,
            **context
        )


# Global logger instances
performance_logger = PerformanceLogger()
error_logger = ErrorLogger()
