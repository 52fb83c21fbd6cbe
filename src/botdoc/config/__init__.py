from .loader import load_config, parse_set_overrides
from .models import BotdocConfig, LinksConfig, WrapConfig

__all__ = [
    "BotdocConfig",
    "LinksConfig",
    "WrapConfig",
    "load_config",
    "parse_set_overrides",
]
