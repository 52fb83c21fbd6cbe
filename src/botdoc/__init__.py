"""botdoc

Normalizes Telegram Bot API reference fragments for a Go code generator:
- processing: HTML to comment prose or plain text, line wrapping, type mapping, identifier names
- config, observability, sdk, core (errors)
"""

__all__ = [
    "config",
    "core",
    "observability",
    "processing",
    "sdk",
]
