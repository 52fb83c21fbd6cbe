from __future__ import annotations

import enum
from dataclasses import dataclass
from html import unescape
from typing import Callable, List, Sequence, Tuple

from .patterns import DEFAULT_PATTERNS, PatternSet


class LinkKind(enum.Enum):
    EXTERNAL = "external"
    INTERNAL = "internal"
    ANCHOR = "anchor"


# External before internal: "--/path--" must never swallow a "--https://...--" marker
LINK_RESOLUTION_ORDER: Tuple[LinkKind, ...] = (LinkKind.EXTERNAL, LinkKind.INTERNAL, LinkKind.ANCHOR)


@dataclass(frozen=True)
class RewriteStage:
    """One named ``str -> str`` step of the prose pipeline."""

    name: str
    apply: Callable[[str], str]

    def __call__(self, text: str) -> str:
        return self.apply(text)


def normalize_text(text: str, patterns: PatternSet = DEFAULT_PATTERNS) -> str:
    """Trim and collapse every whitespace run down to its first character.

    ``"a \\n\\n b"`` becomes ``"a b"`` while ``"a\\n\\n b"`` becomes ``"a\\nb"``:
    a run that starts with a newline survives as a single line break.
    """
    return patterns.multi_space.sub(r"\1", text.strip())


def _resolve_links(kind: LinkKind, patterns: PatternSet, prefix: str) -> Callable[[str], str]:
    matcher = {
        LinkKind.EXTERNAL: patterns.external_url,
        LinkKind.INTERNAL: patterns.internal_url,
        LinkKind.ANCHOR: patterns.anchor_url,
    }[kind]

    def apply(text: str) -> str:
        return matcher.sub(lambda m: f"({prefix}{m.group(1)})", text)

    return apply


def build_prose_pipeline(
    base_url: str,
    docs_url: str,
    patterns: PatternSet = DEFAULT_PATTERNS,
) -> Tuple[RewriteStage, ...]:
    """Return the ordered stages turning an HTML fragment into prose.

    Links are rewritten to ``text --href--`` first; the ``--href--`` markers
    are then resolved in :data:`LINK_RESOLUTION_ORDER`. Block tags become
    newlines before the remaining tags are stripped, and entities are
    unescaped only once no tag is left to be confused with ``&lt;``.
    """
    prefixes = {
        LinkKind.EXTERNAL: "",
        LinkKind.INTERNAL: base_url,
        LinkKind.ANCHOR: docs_url,
    }
    stages: List[RewriteStage] = [
        RewriteStage("images", lambda t: patterns.image.sub(r"\1", t)),
        RewriteStage("links", lambda t: patterns.link.sub(r"\2 --\1--", t)),
    ]
    for kind in LINK_RESOLUTION_ORDER:
        stages.append(RewriteStage(f"{kind.value}_urls", _resolve_links(kind, patterns, prefixes[kind])))
    stages.extend(
        [
            RewriteStage("block_tags", lambda t: patterns.block_tag.sub("\n", t)),
            RewriteStage("tags", lambda t: patterns.tag.sub("", t)),
            RewriteStage("entities", unescape),
            RewriteStage("whitespace", lambda t: normalize_text(t, patterns)),
        ]
    )
    return tuple(stages)


def run_pipeline(text: str, stages: Sequence[RewriteStage]) -> str:
    for stage in stages:
        text = stage(text)
    return text


def html_to_prose(
    html: str,
    *,
    base_url: str,
    docs_url: str,
    patterns: PatternSet = DEFAULT_PATTERNS,
) -> str:
    return run_pipeline(html, build_prose_pipeline(base_url, docs_url, patterns))


def html_to_text(html: str, patterns: PatternSet = DEFAULT_PATTERNS) -> str:
    # crude HTML to text: unwrap one element level, drop leftover tags, unescape
    text = patterns.tag_element.sub(r"\1", html)
    text = patterns.tag.sub("", text)
    return unescape(text)


def split_lines(text: str) -> List[str]:
    return text.split("\n")


def remove_newlines(text: str) -> str:
    return text.replace("\n", "")


def prepare_pattern(pattern: str) -> str:
    """Join a regular expression written over several indented lines into one line."""
    return "".join(line.strip() for line in split_lines(pattern))


__all__ = [
    "LinkKind",
    "LINK_RESOLUTION_ORDER",
    "RewriteStage",
    "build_prose_pipeline",
    "run_pipeline",
    "html_to_prose",
    "html_to_text",
    "normalize_text",
    "split_lines",
    "remove_newlines",
    "prepare_pattern",
]
