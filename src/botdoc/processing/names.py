from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Sequence, Tuple


@dataclass(frozen=True)
class AcronymRule:
    pattern: str
    replacement: str
    # replacement of the earlier rule this one partially undoes
    reverts: Optional[str] = None

    def apply(self, text: str) -> str:
        return text.replace(self.pattern, self.replacement)


# Order matters: the trailing undo rules repair lower-camel names such as
# "uRL"/"iPAddress" that first_to_lower produces from already-corrected names.
ACRONYM_RULES: Tuple[AcronymRule, ...] = (
    AcronymRule("Id ", "ID "),
    AcronymRule("Id\n", "ID\n"),
    AcronymRule(" id\n", " ID\n"),
    AcronymRule("Id)", "ID)"),
    AcronymRule("Ids", "IDs"),
    AcronymRule("Id,", "ID,"),
    AcronymRule("Id{", "ID{"),
    AcronymRule(" id ", " ID "),
    AcronymRule("Url ", "URL "),
    AcronymRule(" url ", " URL "),
    AcronymRule(" url's ", " URL's "),
    AcronymRule("url\n", "URL\n"),
    AcronymRule("IpAddress", "IPAddress"),
    AcronymRule("Botfather", "BotFather"),
    AcronymRule("@channelusername", "@channel_username"),
    AcronymRule("@supergroupusername", "@supergroup_username"),
    AcronymRule("uRL", "url", reverts="URL "),
    AcronymRule("iPAddress", "ipAddress", reverts="IPAddress"),
)


def snake_to_pascal(text: str) -> str:
    result = []
    next_upper = True
    for ch in text:
        if ch == "_":
            next_upper = True
            continue
        if next_upper:
            next_upper = False
            result.append(ch.upper())
        else:
            result.append(ch)
    return "".join(result)


def flip_leading_case(text: str, case: Literal["lower", "upper"]) -> str:
    if not text:
        return text
    head = text[0].lower() if case == "lower" else text[0].upper()
    return head + text[1:]


def first_to_lower(text: str) -> str:
    return flip_leading_case(text, "lower")


def first_to_upper(text: str) -> str:
    return flip_leading_case(text, "upper")


def correct_acronyms(text: str, rules: Sequence[AcronymRule] = ACRONYM_RULES) -> str:
    """Fix the casing of known acronyms in generated source text.

    Most rules need a trailing context character (space, newline, comma, ...)
    so that ``Id`` inside a longer word such as ``Identity`` is left alone.
    """
    for rule in rules:
        text = rule.apply(text)
    return text


def to_identifier(name: str, rules: Sequence[AcronymRule] = ACRONYM_RULES) -> str:
    """``chat_id`` -> ``ChatID``; the bare name gets a trailing space as rule context."""
    return correct_acronyms(snake_to_pascal(name) + " ", rules)[:-1]


__all__ = [
    "AcronymRule",
    "ACRONYM_RULES",
    "snake_to_pascal",
    "flip_leading_case",
    "first_to_lower",
    "first_to_upper",
    "correct_acronyms",
    "to_identifier",
]
