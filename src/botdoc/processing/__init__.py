"""Conversions from harvested Bot API documentation to Go source fragments."""

from .names import (
    ACRONYM_RULES,
    AcronymRule,
    correct_acronyms,
    first_to_lower,
    first_to_upper,
    flip_leading_case,
    snake_to_pascal,
    to_identifier,
)
from .patterns import DEFAULT_PATTERNS, PatternSet, compile_patterns
from .text import (
    LINK_RESOLUTION_ORDER,
    LinkKind,
    RewriteStage,
    build_prose_pipeline,
    html_to_prose,
    html_to_text,
    normalize_text,
    prepare_pattern,
    remove_newlines,
    run_pipeline,
    split_lines,
)
from .types import map_type
from .wrapping import Token, fit_to_lines, tokenize, wrap, wrap_tokens

__all__ = [
    "ACRONYM_RULES",
    "AcronymRule",
    "correct_acronyms",
    "first_to_lower",
    "first_to_upper",
    "flip_leading_case",
    "snake_to_pascal",
    "to_identifier",
    "DEFAULT_PATTERNS",
    "PatternSet",
    "compile_patterns",
    "LINK_RESOLUTION_ORDER",
    "LinkKind",
    "RewriteStage",
    "build_prose_pipeline",
    "html_to_prose",
    "html_to_text",
    "normalize_text",
    "prepare_pattern",
    "remove_newlines",
    "run_pipeline",
    "split_lines",
    "map_type",
    "Token",
    "fit_to_lines",
    "tokenize",
    "wrap",
    "wrap_tokens",
]
