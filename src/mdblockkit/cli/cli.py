"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated

import typer

from mdblockkit.cli.commands import convert_cmd, version_callback


app = typer.Typer(name="mdblockkit", no_args_is_help=True, help="Markdown to Slack Block Kit layout converter")


@app.callback()
def main(
    version: Annotated[bool, typer.Option(
        "--version", callback=version_callback, is_eager=True, help="Show version info and exit",
    )] = False,
    ):
    """Markdown to Slack Block Kit layout converter."""


app.command(name="convert")(convert_cmd)
