from __future__ import annotations

from typing import Sequence


class BotdocError(Exception):
    """Base exception for botdoc."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class ConfigError(BotdocError):
    pass


class ProcessingError(BotdocError):
    pass


class MalformedTokenError(ProcessingError):
    """Raised when a word carries a forced line break that does not split it in two."""

    def __init__(self, token: str, segments: Sequence[str]) -> None:
        super().__init__(
            f"forced line break must split a word into 2 segments, got {len(segments)}: {token!r}"
        )
        self.token = token
        self.segments = list(segments)


EXIT_CODES: dict[type[BotdocError], int] = {
    BotdocError: 1,
    ConfigError: 2,
    ProcessingError: 5,
    MalformedTokenError: 5,
}


def get_exit_code(exc: BotdocError) -> int:
    for cls in exc.__class__.__mro__:
        if cls in EXIT_CODES:
            return EXIT_CODES[cls]  # type: ignore[index]
    return 1


__all__ = [
    "BotdocError",
    "ConfigError",
    "ProcessingError",
    "MalformedTokenError",
    "EXIT_CODES",
    "get_exit_code",
]
