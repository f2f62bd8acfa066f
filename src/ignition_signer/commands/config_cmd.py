"""Config commands — inspect and change CLI settings."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.prompt import Confirm

from ignition_signer.config.manager import ConfigManager
from ignition_signer.errors import error_handler
from ignition_signer.output.formatter import output

app = typer.Typer(name="config", help="Manage CLI configuration.", no_args_is_help=True)
console = Console()


def _get_manager() -> ConfigManager:
    return ConfigManager()


@app.command()
@error_handler
def show(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """Show the effective configuration."""
    mgr = _get_manager()
    output(mgr.resolve_settings().model_dump(), fmt, title="Configuration")


@app.command("set")
@error_handler
def set_value(
    key: Annotated[str, typer.Argument(help="Setting name (default_format, manifest_name)")],
    value: Annotated[str, typer.Argument(help="New value")],
) -> None:
    """Change a setting and save it to the config file."""
    mgr = _get_manager()
    config = mgr.set_value(key, value)
    console.print(f"[green]Set {key} = {getattr(config, key)}.[/]")


@app.command()
@error_handler
def path() -> None:
    """Print the config file location."""
    console.print(str(_get_manager().config_path), highlight=False, soft_wrap=True)


@app.command()
@error_handler
def reset(
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
) -> None:
    """Delete the config file and return to defaults."""
    if not force:
        if not Confirm.ask("Reset configuration to defaults?"):
            console.print("Cancelled.")
            return
    if _get_manager().reset():
        console.print("[green]Configuration reset.[/]")
    else:
        console.print("[yellow]No config file to remove.[/]")
