"""Observability module for botdoc operations."""

from .logging import (
    BotdocLogger,
    get_logger,
    set_verbose,
    log_config_fingerprint,
)

__all__ = [
    "BotdocLogger",
    "get_logger",
    "set_verbose",
    "log_config_fingerprint",
]
