"""Resource commands.

update, signature, verify, show.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from ignition_signer.commands._common import (
    FormatOpt,
    ManifestOpt,
    PathArg,
    resolve_settings,
)
from ignition_signer.errors import SignatureMismatchError, error_handler
from ignition_signer.loader import load_resource, save_manifest
from ignition_signer.models.manifest import LastModification
from ignition_signer.models.resource import ProjectResource
from ignition_signer.output.formatter import output

console = Console()


@error_handler
def update(
    path: PathArg,
    actor: Annotated[str, typer.Argument(help="Actor recorded as the last modifier")],
    write: Annotated[
        bool,
        typer.Option("--write", "-w", help="Save the updated manifest back to disk"),
    ] = False,
    fmt: FormatOpt = None,
    manifest: ManifestOpt = None,
) -> None:
    """Stamp a resource with a new modification record and re-sign it."""
    if not actor.strip():
        raise ValueError("Actor must not be empty.")
    settings = resolve_settings(fmt, manifest)
    resource = load_resource(path, settings.manifest_name)
    updated = resource.update(LastModification.now(actor))
    if write:
        save_manifest(updated, path, settings.manifest_name)
    output(updated.manifest, settings.default_format)


@error_handler
def signature(
    path: PathArg,
    manifest: ManifestOpt = None,
) -> None:
    """Print the signature computed from the resource's current content."""
    settings = resolve_settings(manifest_name=manifest)
    resource = load_resource(path, settings.manifest_name)
    console.print(resource.get_signature(), highlight=False)


@error_handler
def verify(
    path: PathArg,
    manifest: ManifestOpt = None,
) -> None:
    """Check the stored signature against the resource's content."""
    settings = resolve_settings(manifest_name=manifest)
    resource = load_resource(path, settings.manifest_name)
    computed = resource.get_signature()
    if resource.signature != computed:
        raise SignatureMismatchError(resource.signature, computed)
    console.print(f"[green]Signature OK:[/] {computed}", highlight=False, soft_wrap=True)


def _summary(path: str, resource: ProjectResource) -> dict[str, Any]:
    manifest = resource.manifest
    modification = manifest.attributes.last_modification
    computed = resource.get_signature()
    summary: dict[str, Any] = {
        "path": str(Path(path)),
        "scope": f"{manifest.scope.code} ({manifest.scope.name})",
        "version": manifest.version,
        "documentation": manifest.documentation,
        "locked": manifest.locked,
        "restricted": manifest.restricted,
        "overridable": manifest.overridable,
        "files": list(manifest.files),
        "actor": modification.actor,
        "timestamp": modification.model_dump(mode="json")["timestamp"],
        "signature": resource.signature,
        "computed": computed,
        "verified": resource.signature == computed,
    }
    extensions = manifest.attributes.extensions
    if extensions:
        summary["attributes"] = sorted(extensions)
    return summary


@error_handler
def show(
    path: PathArg,
    fmt: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format (table, json or yaml)"),
    ] = "table",
    manifest: ManifestOpt = None,
) -> None:
    """Show a summary of the resource and whether its signature checks out."""
    settings = resolve_settings(manifest_name=manifest)
    resource = load_resource(path, settings.manifest_name)
    output(_summary(path, resource), fmt, title=f"Resource: {Path(path).name or path}")
