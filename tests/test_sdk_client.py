import os
import tempfile
import unittest

from botdoc.config.models import BotdocConfig, LinksConfig, WrapConfig
from botdoc.core.errors import ConfigError, MalformedTokenError
from botdoc.sdk import DocNormalizer


EXAMPLE = '<p>See <a href="/docs/x">here</a> for --http://example.com/y--.</p>'


class TestDocNormalizer(unittest.TestCase):
    def setUp(self):
        self.normalizer = DocNormalizer(
            BotdocConfig(links=LinksConfig(base_url="https://t.me"), wrap=WrapConfig(max_line_len=30))
        )

    def test_prose_and_comment(self):
        self.assertEqual(
            self.normalizer.prose(EXAMPLE),
            "See here (https://t.me/docs/x) for (http://example.com/y).",
        )
        self.assertEqual(
            self.normalizer.comment(EXAMPLE),
            "// See here\n// (https://t.me/docs/x) for\n// (http://example.com/y).",
        )
        self.assertEqual(
            self.normalizer.comment("<p>Short</p>", delimiter="# "),
            "# Short",
        )

    def test_comment_propagates_malformed_breaks(self):
        with self.assertRaises(MalformedTokenError):
            self.normalizer.comment("<li>a</li><li>b</li><li>c</li>")

    def test_plain_and_wrap(self):
        self.assertEqual(self.normalizer.plain("<em>Optional</em>. Caption"), "Optional. Caption")
        self.assertEqual(self.normalizer.wrap("aaa bbb"), ["aaa bbb"])
        self.assertEqual(self.normalizer.with_width(3).wrap("aaa bbb"), ["aaa", "bbb"])

    def test_fluent_overrides_do_not_mutate(self):
        narrow = self.normalizer.with_width(10).with_delimiter("/// ")
        self.assertEqual(narrow.config.wrap.max_line_len, 10)
        self.assertEqual(narrow.config.wrap.delimiter, "/// ")
        self.assertEqual(self.normalizer.config.wrap.max_line_len, 30)
        self.assertEqual(self.normalizer.config.wrap.delimiter, "// ")
        with self.assertRaises(ConfigError):
            self.normalizer.with_width(0)
        with self.assertRaises(ConfigError):
            self.normalizer.with_delimiter("")

    def test_types_and_names(self):
        self.assertEqual(self.normalizer.type_of("Array of Array of Integer"), "[][]int")
        self.assertEqual(self.normalizer.type_of("InputFile or String", optional=True), "*InputFile")
        self.assertEqual(self.normalizer.identifier("chat_id"), "ChatID")
        self.assertEqual(self.normalizer.field_name("file_unique_id"), "fileUniqueID")
        self.assertEqual(self.normalizer.field_name("url"), "url")
        self.assertEqual(self.normalizer.field_name("ip_address"), "ipAddress")
        self.assertEqual(self.normalizer.correct("ChatId int\n"), "ChatID int\n")
        self.assertEqual(self.normalizer.leading_case("chat", "upper"), "Chat")

    def test_stages_use_configured_urls(self):
        self.assertEqual(self.normalizer.stages[0].name, "images")
        self.assertEqual(
            self.normalizer.prose('<a href="#chat">Chat</a>'),
            "Chat (https://core.telegram.org/bots/api#chat)",
        )

    def test_from_config(self):
        fd, path = tempfile.mkstemp(suffix=".yaml")
        os.close(fd)
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write("wrap:\n  max_line_len: 12\n")
            normalizer = DocNormalizer.from_config(path, set_overrides=["wrap.delimiter='# '"])
            self.assertEqual(normalizer.config.wrap.max_line_len, 12)
            self.assertEqual(normalizer.comment("one two three"), "# one two\n# three")
        finally:
            os.unlink(path)


if __name__ == "__main__":
    unittest.main()
