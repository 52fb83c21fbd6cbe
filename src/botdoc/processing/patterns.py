from __future__ import annotations

import re
from dataclasses import dataclass


LINK_PATTERN = r'<a.+?href="(.+?)".*?>(.+?)</a>'

EXTERNAL_URL_PATTERN = r"--(https?://.+?)--"
INTERNAL_URL_PATTERN = r"--(/.+?)--"
ANCHOR_URL_PATTERN = r"--(#.+?)--"

IMAGE_PATTERN = r'<img.+?alt="(.+?)".*?>'

BLOCK_TAG_PATTERN = r"<(?:p|div|li|blockquote|br)\b.*?>"
TAG_PATTERN = r"<.+?>"

TAG_ELEMENT_PATTERN = r"<.+?>(.+?)</.+?>"

MULTI_SPACE_PATTERN = r"(\s)\s+"


@dataclass(frozen=True)
class PatternSet:
    """Compiled matchers shared by every conversion.

    Build one with :func:`compile_patterns` at startup and hand it to the
    converters; instances are immutable and safe to share between threads.
    """

    link: re.Pattern[str]
    external_url: re.Pattern[str]
    internal_url: re.Pattern[str]
    anchor_url: re.Pattern[str]
    image: re.Pattern[str]
    block_tag: re.Pattern[str]
    tag: re.Pattern[str]
    tag_element: re.Pattern[str]
    multi_space: re.Pattern[str]


def compile_patterns() -> PatternSet:
    return PatternSet(
        link=re.compile(LINK_PATTERN),
        external_url=re.compile(EXTERNAL_URL_PATTERN),
        internal_url=re.compile(INTERNAL_URL_PATTERN),
        anchor_url=re.compile(ANCHOR_URL_PATTERN),
        image=re.compile(IMAGE_PATTERN),
        block_tag=re.compile(BLOCK_TAG_PATTERN),
        tag=re.compile(TAG_PATTERN),
        tag_element=re.compile(TAG_ELEMENT_PATTERN),
        # ASCII only: an unescaped &nbsp; is text, not a breakable space
        multi_space=re.compile(MULTI_SPACE_PATTERN, re.ASCII),
    )


DEFAULT_PATTERNS = compile_patterns()


__all__ = ["PatternSet", "compile_patterns", "DEFAULT_PATTERNS"]
