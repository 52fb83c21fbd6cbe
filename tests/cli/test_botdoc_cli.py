"""Tests for the botdoc CLI."""

from unittest.mock import patch

from typer.testing import CliRunner

from botdoc.cli import app


class TestBotdocCLI:
    """Test the botdoc CLI."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_app_help(self):
        result = self.runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Normalize Telegram Bot API" in result.output
        for command in ("prose", "plain", "type", "name"):
            assert command in result.output

    def test_version(self):
        result = self.runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert result.output.strip()

    def test_prose_wraps_into_comment(self):
        html = '<p>See <a href="/docs/x">here</a></p>'
        result = self.runner.invoke(app, ["prose", html, "--set", "links.base_url=https://t.me"])
        assert result.exit_code == 0, result.output
        assert result.output == "// See here (https://t.me/docs/x)\n"

    def test_prose_width_and_delimiter(self):
        result = self.runner.invoke(app, ["prose", "one two three", "-w", "12", "-d", "# "])
        assert result.exit_code == 0, result.output
        assert result.output == "# one two\n# three\n"

    def test_prose_raw_from_stdin(self):
        result = self.runner.invoke(app, ["prose", "--raw"], input="<p>a &amp; b</p>")
        assert result.exit_code == 0, result.output
        assert result.output == "a & b\n"

    def test_prose_from_file(self, tmp_path):
        fragment = tmp_path / "fragment.html"
        fragment.write_text("<p>From <b>file</b></p>", encoding="utf-8")
        result = self.runner.invoke(app, ["prose", "--file", str(fragment)])
        assert result.exit_code == 0, result.output
        assert result.output == "// From file\n"

    def test_missing_file(self, tmp_path):
        result = self.runner.invoke(app, ["plain", "--file", str(tmp_path / "missing.html")])
        assert result.exit_code == 1
        assert "cannot read" in result.output

    def test_plain(self):
        result = self.runner.invoke(app, ["plain", "<td><em>Optional</em></td>"])
        assert result.exit_code == 0, result.output
        assert result.output == "Optional\n"

    def test_type(self):
        result = self.runner.invoke(app, ["type", "Array of Array of Integer"])
        assert result.exit_code == 0, result.output
        assert result.output == "[][]int\n"

        result = self.runner.invoke(app, ["type", "InputFile or String", "--optional"])
        assert result.output == "*InputFile\n"

    def test_name(self):
        result = self.runner.invoke(app, ["name", "chat_id"])
        assert result.exit_code == 0, result.output
        assert result.output == "ChatID\n"

        result = self.runner.invoke(app, ["name", "ip_address", "--lower"])
        assert result.output == "ipAddress\n"

    def test_malformed_break_exits_with_processing_code(self):
        result = self.runner.invoke(app, ["prose", "<li>a</li><li>b</li><li>c</li>"])
        assert result.exit_code == 5
        assert "forced line break" in result.output

    def test_invalid_config_exits_with_config_code(self):
        result = self.runner.invoke(app, ["prose", "x", "--set", "wrap.max_line_len=0"])
        assert result.exit_code == 2

    @patch("botdoc.cli.DocNormalizer")
    def test_config_path_is_forwarded(self, mock_normalizer_class):
        mock_normalizer = mock_normalizer_class.from_config.return_value
        mock_normalizer.plain.return_value = "ok"

        result = self.runner.invoke(app, ["plain", "<b>x</b>", "-c", "custom.yaml", "--set", "wrap.max_line_len=90"])

        assert result.exit_code == 0, result.output
        mock_normalizer_class.from_config.assert_called_once_with("custom.yaml", set_overrides=["wrap.max_line_len=90"])
        mock_normalizer.plain.assert_called_once_with("<b>x</b>")
