"""Structured logging for botdoc operations."""

import json
import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Optional

# Configure the package logger
logger = logging.getLogger("botdoc")
logger.setLevel(logging.INFO)

# Prevent duplicate handlers
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


class BotdocLogger:
    """Structured logger emitting one JSON document per record."""

    def __init__(self, name: str = "botdoc", verbose: bool = False):
        self.logger = logging.getLogger(name)
        if verbose:
            self.logger.setLevel(logging.DEBUG)
        else:
            self.logger.setLevel(logging.INFO)

    def _log_structured(self, level: int, message: str, **kwargs: Any) -> None:
        """Log a structured message with optional context."""
        if not self.logger.isEnabledFor(level):
            return

        log_entry: Dict[str, Any] = {
            "message": message,
            "timestamp": time.time(),
            "level": logging.getLevelName(level),
        }
        if kwargs:
            log_entry["context"] = kwargs

        self.logger.log(level, json.dumps(log_entry, default=str))

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log_structured(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        self._log_structured(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log_structured(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        self._log_structured(logging.ERROR, message, **kwargs)

    @contextmanager
    def operation(self, operation_name: str, **context: Any):
        """Context manager for logging operation start/stop."""
        start_time = time.time()
        self.debug(f"Starting {operation_name}", operation=operation_name, **context)

        try:
            yield self
        except Exception as e:
            duration = time.time() - start_time
            self.error(
                f"Operation {operation_name} failed",
                operation=operation_name,
                error=str(e),
                duration_ms=duration * 1000,
                **context
            )
            raise
        else:
            duration = time.time() - start_time
            self.debug(
                f"Completed {operation_name}",
                operation=operation_name,
                duration_ms=duration * 1000,
                **context
            )

    def config_fingerprint(self, config: Dict[str, Any]) -> None:
        """Log the effective configuration."""
        self.debug("Configuration loaded", config_fingerprint=config)


# Global logger instance
_botdoc_logger: Optional[BotdocLogger] = None


def get_logger(name: str = "botdoc", verbose: bool = False) -> BotdocLogger:
    """Get or create the global botdoc logger."""
    global _botdoc_logger
    if _botdoc_logger is None:
        _botdoc_logger = BotdocLogger(name, verbose)
    return _botdoc_logger


def set_verbose(verbose: bool) -> None:
    """Set verbose logging mode."""
    logger = get_logger()
    if verbose:
        logger.logger.setLevel(logging.DEBUG)
    else:
        logger.logger.setLevel(logging.INFO)


def log_config_fingerprint(config: Dict[str, Any]) -> None:
    """Log configuration fingerprint."""
    get_logger().config_fingerprint(config)
