from .client import DocNormalizer

__all__ = ["DocNormalizer"]
