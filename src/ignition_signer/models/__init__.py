"""Pydantic data models for project resources."""

from ignition_signer.models.manifest import (
    LAST_MODIFICATION,
    LAST_MODIFICATION_SIGNATURE,
    Attributes,
    LastModification,
    ResourceManifest,
)
from ignition_signer.models.resource import ProjectResource
from ignition_signer.models.scope import ApplicationScope

__all__ = [
    "LAST_MODIFICATION",
    "LAST_MODIFICATION_SIGNATURE",
    "ApplicationScope",
    "Attributes",
    "LastModification",
    "ProjectResource",
    "ResourceManifest",
]
