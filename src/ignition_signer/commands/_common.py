"""Shared helpers for CLI commands — option aliases and settings resolution."""

from __future__ import annotations

from typing import Annotated

import typer

from ignition_signer.config.manager import ConfigManager
from ignition_signer.config.models import CLIConfig

# Shared Typer option type aliases
PathArg = Annotated[
    str,
    typer.Argument(help="Resource directory containing the manifest"),
]
ManifestOpt = Annotated[
    str | None,
    typer.Option("--manifest", "-m", help="Manifest file name override"),
]
FormatOpt = Annotated[
    str | None,
    typer.Option("--format", "-f", help="Document format (json or yaml)"),
]


def _get_manager() -> ConfigManager:
    return ConfigManager()


def resolve_settings(
    fmt: str | None = None,
    manifest_name: str | None = None,
) -> CLIConfig:
    """Resolve settings from CLI options, env vars, or the config file."""
    return _get_manager().resolve_settings(fmt=fmt, manifest_name=manifest_name)
