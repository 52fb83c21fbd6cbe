from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

import typer
from typer import Argument, Option

from .core.errors import BotdocError, get_exit_code
from .observability.logging import get_logger, set_verbose
from .sdk import DocNormalizer

# Create Typer app
app = typer.Typer(
    name="botdoc",
    help="botdoc - Normalize Telegram Bot API docs for Go code generation",
    no_args_is_help=True,
    add_completion=False,
)


def _read_input(text: Optional[str], file: Optional[Path]) -> str:
    if file is not None:
        try:
            return file.read_text(encoding="utf-8")
        except OSError as e:
            typer.echo(f"Error: cannot read '{file}': {e}", err=True)
            raise typer.Exit(1)
    if text is not None and text != "-":
        return text
    return sys.stdin.read()


def _normalizer(config: Optional[str], set_overrides: Optional[List[str]], verbose: bool) -> DocNormalizer:
    set_verbose(verbose)
    return DocNormalizer.from_config(config, set_overrides=set_overrides)


def _fail(exc: BotdocError) -> typer.Exit:
    get_logger().error("Command failed", error=exc.message, error_type=type(exc).__name__)
    typer.echo(f"Error: {exc.message}", err=True)
    return typer.Exit(get_exit_code(exc))


@app.command("prose")
def prose(
    text: Optional[str] = Argument(None, help="HTML fragment; read from stdin when omitted or '-'"),
    file: Optional[Path] = Option(None, "-f", "--file", help="Read the HTML fragment from a file"),
    delimiter: Optional[str] = Option(None, "-d", "--delimiter", help="Comment prefix of every line"),
    width: Optional[int] = Option(None, "-w", "--width", help="Maximum line width"),
    raw: bool = Option(False, "--raw", help="Print unwrapped prose"),
    # Common options
    config: Optional[str] = Option(None, "-c", "--config", help="Path to botdoc config file"),
    set_overrides: Optional[List[str]] = Option(None, "--set", help="Override a config key (key.path=value)"),
    verbose: bool = Option(False, "-v", "--verbose", help="Enable verbose output"),
) -> None:
    """Convert an HTML fragment into a wrapped comment block."""
    try:
        normalizer = _normalizer(config, set_overrides, verbose)
        if width is not None:
            normalizer = normalizer.with_width(width)
        html = _read_input(text, file)
        if raw:
            typer.echo(normalizer.prose(html))
        else:
            typer.echo(normalizer.comment(html, delimiter))
    except BotdocError as e:
        raise _fail(e)


@app.command("plain")
def plain(
    text: Optional[str] = Argument(None, help="HTML fragment; read from stdin when omitted or '-'"),
    file: Optional[Path] = Option(None, "-f", "--file", help="Read the HTML fragment from a file"),
    config: Optional[str] = Option(None, "-c", "--config", help="Path to botdoc config file"),
    set_overrides: Optional[List[str]] = Option(None, "--set", help="Override a config key (key.path=value)"),
    verbose: bool = Option(False, "-v", "--verbose", help="Enable verbose output"),
) -> None:
    """Strip all markup from an HTML fragment."""
    try:
        normalizer = _normalizer(config, set_overrides, verbose)
        typer.echo(normalizer.plain(_read_input(text, file)))
    except BotdocError as e:
        raise _fail(e)


@app.command("type")
def type_(
    text: str = Argument(..., help="Documented type, e.g. 'Array of String'"),
    optional: bool = Option(False, "--optional", help="Field is optional"),
    verbose: bool = Option(False, "-v", "--verbose", help="Enable verbose output"),
) -> None:
    """Map a documented type to a Go type."""
    try:
        normalizer = _normalizer(None, None, verbose)
        typer.echo(normalizer.type_of(text, optional))
    except BotdocError as e:
        raise _fail(e)


@app.command("name")
def name(
    text: str = Argument(..., help="snake_case name, e.g. 'chat_id'"),
    lower: bool = Option(False, "--lower", help="Lower the first letter (unexported Go name)"),
    verbose: bool = Option(False, "-v", "--verbose", help="Enable verbose output"),
) -> None:
    """Convert a snake_case name to a Go identifier."""
    try:
        normalizer = _normalizer(None, None, verbose)
        typer.echo(normalizer.field_name(text) if lower else normalizer.identifier(text))
    except BotdocError as e:
        raise _fail(e)


# Main entry point
def main() -> None:
    """Main entry point for the botdoc CLI."""
    app()


# Version command
@app.callback(invoke_without_command=True)
def version_callback(
    ctx: typer.Context,
    version: bool = Option(False, "-V", "--version", help="Show version and exit"),
) -> None:
    """botdoc CLI - Normalize Bot API documentation fragments."""
    if version:
        import importlib.metadata as importlib_metadata

        try:
            version_str = importlib_metadata.version("botdoc")
        except importlib_metadata.PackageNotFoundError:
            version_str = "0.0.0+local"
        typer.echo(version_str)
        raise typer.Exit(0)

    if ctx.invoked_subcommand is None:
        typer.echo("botdoc CLI - Normalize Bot API documentation fragments")
        typer.echo("Use 'botdoc --help' to see available commands.")


if __name__ == "__main__":
    main()
