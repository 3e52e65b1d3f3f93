"""
Tonal Structured Logging
Centralized logging configuration using loguru.
"""
import sys
import threading
from typing import Dict, Any, Optional

from loguru import logger

from tonal.config import config


# Extra keys never written to the log sink
REDACTED_KEYS = frozenset({
    "bot_token",
    "token",
    "password",
    "secret",
    "authorization",
    "cookie",
    "init_data",
})


def sanitize_extra(extra: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Drop sensitive keys (case-insensitive) from structured log extras."""
    if not extra:
        return {}
    return {key: value for key, value in extra.items() if key.lower() not in REDACTED_KEYS}


class StructuredLogger:
    """Structured logger for the Tonal palette engine."""

    def __init__(self):
        """Initialize structured logger."""
        self._configure_logger()

    def _configure_logger(self):
        """Configure loguru logger with structured format."""
        logger.remove()
        logger.add(
            sys.stdout,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message} | {extra}",
            level=config.LOG_LEVEL,
            serialize=False  # Set to True for JSON output
        )

    def _log(self, level: str, message: str, extra: Optional[Dict[str, Any]]):
        clean = sanitize_extra(extra)
        if clean:
            logger.bind(**clean).log(level, message)
        else:
            logger.log(level, message)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with optional extra data."""
        self._log("INFO", message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with optional extra data."""
        self._log("WARNING", message, extra)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with optional extra data."""
        self._log("DEBUG", message, extra)


# Global logger instance
_logger: Optional[StructuredLogger] = None
_logger_lock = threading.Lock()


def get_logger() -> StructuredLogger:
    """Get or create global logger instance."""
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                _logger = StructuredLogger()
    return _logger
