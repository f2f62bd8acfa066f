"""Read project resources from disk and write their manifests back."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from ignition_signer.config.constants import DEFAULT_MANIFEST_NAME
from ignition_signer.errors import (
    ManifestParseError,
    MissingResourceFileError,
    ResourceLoadError,
)
from ignition_signer.models.manifest import ResourceManifest
from ignition_signer.models.resource import ProjectResource

logger = logging.getLogger(__name__)


def load_resource(
    path: str | Path,
    manifest_name: str = DEFAULT_MANIFEST_NAME,
) -> ProjectResource:
    """Load the resource directory at *path*.

    Every file listed in the manifest is read eagerly; a missing file fails
    the whole load.
    """
    root = Path(path)
    manifest_path = root / manifest_name
    try:
        raw = manifest_path.read_bytes()
    except OSError as exc:
        raise ResourceLoadError(
            f"Cannot read manifest {manifest_path}: {exc.strerror or exc}"
        ) from exc

    try:
        manifest = ResourceManifest.from_json(raw)
    except ValidationError as exc:
        raise ManifestParseError(f"Invalid manifest {manifest_path}: {exc}") from exc

    data: dict[str, bytes] = {}
    for name in manifest.files:
        if Path(name).is_absolute() or ".." in Path(name).parts:
            raise ResourceLoadError(
                f"Referenced file '{name}' points outside the resource directory"
            )
        try:
            data[name] = (root / name).read_bytes()
        except OSError as exc:
            raise MissingResourceFileError(name, exc.strerror or str(exc)) from exc
        logger.debug("Read %s (%d bytes)", name, len(data[name]))

    logger.debug("Loaded resource %s with %d file(s)", root, len(data))
    return ProjectResource(manifest=manifest, data=data)


def save_manifest(
    resource: ProjectResource,
    path: str | Path,
    manifest_name: str = DEFAULT_MANIFEST_NAME,
) -> Path:
    """Write the resource's manifest to *path*, replacing the existing one.

    Only the manifest is written; referenced files are left as they are.
    """
    manifest_path = Path(path) / manifest_name
    # Atomic write: write to temp file, then rename
    temp = manifest_path.with_suffix(".tmp")
    temp.write_text(resource.manifest.to_json(), encoding="utf-8")
    os.replace(temp, manifest_path)
    logger.debug("Wrote %s", manifest_path)
    return manifest_path
