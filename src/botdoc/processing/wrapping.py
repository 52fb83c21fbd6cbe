from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..core.errors import MalformedTokenError


@dataclass(frozen=True)
class Token:
    """A word to place on a line.

    ``continuation`` is set when the word ends its line: ``text`` closes the
    current line and ``continuation`` opens the next one.
    """

    text: str
    continuation: Optional[str] = None

    @property
    def breaks_line(self) -> bool:
        return self.continuation is not None


def tokenize(text: str) -> List[Token]:
    tokens: List[Token] = []
    for word in text.split(" "):
        if not word:
            continue
        if "\n" not in word:
            tokens.append(Token(word))
            continue
        segments = word.split("\n")
        if len(segments) != 2:
            raise MalformedTokenError(word, segments)
        tokens.append(Token(segments[0], segments[1]))
    return tokens


def wrap_tokens(tokens: Iterable[Token], max_width: int) -> List[str]:
    lines: List[str] = []
    cur_parts: List[str] = []
    # every placed word is counted with the space that follows it
    cur_len = 0

    def place(word: str) -> None:
        nonlocal cur_parts, cur_len
        if not word:
            return
        if cur_parts and cur_len + len(word) + 1 > max_width:
            lines.append(" ".join(cur_parts))
            cur_parts = []
            cur_len = 0
        cur_parts.append(word)
        cur_len += len(word) + 1

    for token in tokens:
        place(token.text)
        if token.breaks_line:
            # the line is closed even when it still has room
            lines.append(" ".join(cur_parts))
            cur_parts = []
            cur_len = 0
            place(token.continuation or "")

    if cur_parts:
        lines.append(" ".join(cur_parts))

    return lines


def wrap(text: str, max_width: int) -> List[str]:
    """Greedily pack the words of ``text`` into lines shorter than ``max_width`` characters.

    Each word is budgeted together with one following space, so a line of
    several words holds at most ``max_width - 1`` characters. A newline
    inside a word forces a line break at that point. Words are never split,
    so a single word that does not fit gets a line of its own.

    Raises:
        MalformedTokenError: a word contains more than one newline.
    """
    return wrap_tokens(tokenize(text), max_width)


def fit_to_lines(text: str, delimiter: str, max_width: int) -> str:
    # the delimiter counts toward the first line only
    lines = wrap(delimiter + text, max_width)
    return ("\n" + delimiter).join(lines)


__all__ = ["Token", "tokenize", "wrap_tokens", "wrap", "fit_to_lines"]
