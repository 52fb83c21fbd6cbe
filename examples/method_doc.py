#!/usr/bin/env python3
"""Render one Bot API method row the way a Go generator template consumes it."""

from __future__ import annotations

from botdoc.sdk import DocNormalizer

DESCRIPTION = (
    '<p>Use this method to send text messages. On success, the sent '
    '<a href="#message">Message</a> is returned.</p>'
)

PARAMETERS = [
    ("chat_id", "Integer or String", False,
     "Unique identifier for the target chat or username of the target channel (in the format <code>@channelusername</code>)"),
    ("text", "String", False, "Text of the message to be sent, 1-4096 characters after entities parsing"),
    ("entities", 'Array of <a href="#messageentity">MessageEntity</a>', True,
     "A JSON-serialized list of special entities that appear in message text"),
    ("reply_to_message_id", "Integer", True, "If the message is a reply, ID of the original message"),
]


def main() -> None:
    normalizer = DocNormalizer.from_config()

    print(normalizer.comment(DESCRIPTION))
    print(f"type {normalizer.identifier('send_message')}Params struct {{")
    for name, doc_type, optional, description in PARAMETERS:
        print(normalizer.comment(description, delimiter="\t// "))
        print(f"\t{normalizer.identifier(name)} {normalizer.type_of(doc_type, optional)}")
    print("}")


if __name__ == "__main__":
    main()
