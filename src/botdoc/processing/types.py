from __future__ import annotations

from typing import Dict, Tuple

from ..observability.logging import get_logger
from .patterns import DEFAULT_PATTERNS, PatternSet
from .text import html_to_text


ARRAY_PREFIXES: Tuple[str, ...] = ("Array of ", "array of ")
ARRAY_MARKER = "[]"
OPTIONAL_MARKER = "*"

# Documented type -> Go type
TYPE_TABLE: Dict[str, str] = {
    "String": "string",
    "Integer": "int",
    "Int": "int",
    "Float number": "float64",
    "Float": "float64",
    "Boolean": "bool",
    "True": "bool",
    "Integer or String": "ChatID",
}

# Unions that still take a pointer when the field is optional
OPTIONAL_UNIONS: Dict[str, str] = {
    "InputFile or String": "InputFile",
}


def map_type(text: str, optional: bool = False, patterns: PatternSet = DEFAULT_PATTERNS) -> str:
    """Map a documented type such as ``"Array of <a href="#user">User</a>"`` to a Go type.

    Every ``Array of`` adds one ``[]`` level; array elements are never
    optional. Names missing from :data:`TYPE_TABLE` are taken to be Go type
    names already, pointer-wrapped when ``optional``.
    """
    text = html_to_text(text, patterns)

    if text in TYPE_TABLE:
        return TYPE_TABLE[text]
    if text in OPTIONAL_UNIONS:
        target = OPTIONAL_UNIONS[text]
        return OPTIONAL_MARKER + target if optional else target

    for prefix in ARRAY_PREFIXES:
        if text.startswith(prefix):
            return ARRAY_MARKER + map_type(text[len(prefix) :], False, patterns)

    get_logger().debug("Passing type through unmapped", type_name=text, optional=optional)
    if optional:
        return OPTIONAL_MARKER + text
    return text


__all__ = ["map_type", "TYPE_TABLE", "OPTIONAL_UNIONS"]
