"""Root Typer app — global options and command registration."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.logging import RichHandler

from ignition_signer import __version__
from ignition_signer.commands import config_cmd, resource
from ignition_signer.errors import err_console

app = typer.Typer(
    name="ignition-signer",
    help="Compute and refresh signatures of Ignition project resources.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"ignition-signer {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr."),
) -> None:
    """Ignition resource signer — digest, update, and verify project resources."""
    configure_logging(verbose)


# Register commands
app.command()(resource.update)
app.command()(resource.signature)
app.command()(resource.verify)
app.command()(resource.show)
app.add_typer(config_cmd.app, name="config")


def main() -> None:
    app()
