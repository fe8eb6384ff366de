"""CLI command implementations"""

from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdblockkit.config import Settings, load_config
from mdblockkit.core.convert.walker import Converter, UnsupportedNodeError
from mdblockkit.core.parse import decode_source, parse_text, read_source
from mdblockkit.logging_utils import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _version() -> str:
    try:
        return package_version("mdblockkit")
    except PackageNotFoundError:
        return "dev"


def version_callback(value: bool) -> None:
    """Print version info and exit when --version is given."""
    if value:
        typer.echo(f"mdblockkit {_version()}")
        raise typer.Exit()


def convert_cmd(
    path: Annotated[Optional[Path], typer.Argument(
        exists=True, dir_okay=False, readable=True, help="Markdown file; reads stdin when omitted",
    )] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Log the tree traversal to stderr")] = False,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    indent: Annotated[Optional[int], typer.Option("--indent", help="Indent JSON output by N spaces")] = None,
    ):
    """Convert markdown into a Block Kit layout JSON payload."""
    settings = _settings(overrides={
        "parser_config": parser, "json_indent": indent,
        "log_level": "DEBUG" if debug else None,
    })
    configure_logging(settings.log_level, trace_mode=debug)

    source = read_source(path) if path else decode_source(typer.get_binary_stream("stdin").read())
    try:
        tree = parse_text(source, settings.parser_config)
    except ValueError as e:
        _fail(str(e))
    try:
        layout = Converter(trace=debug).convert(tree)
    except UnsupportedNodeError as e:
        _fail("Conversion failed", e)

    typer.echo(layout.to_json(indent=settings.json_indent))
