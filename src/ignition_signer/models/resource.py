"""Project resource: a manifest plus the bytes of every file it lists."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ignition_signer.models.manifest import LastModification, ResourceManifest
from ignition_signer.signing.digest import calculate_content_digest

logger = logging.getLogger(__name__)


class ProjectResource(BaseModel):
    """An immutable resource value.

    ``update`` never modifies the instance it is called on; it returns a new
    resource carrying the new modification record and signature.
    Use ``with_manifest`` and ``with_data`` to derive modified copies.
    """

    model_config = ConfigDict(frozen=True)

    manifest: ResourceManifest
    data: Mapping[str, bytes] = Field(default_factory=dict)

    @field_validator("data")
    @classmethod
    def freeze_data(cls, v: Mapping[str, bytes]) -> Mapping[str, bytes]:
        return MappingProxyType(dict(v))

    @property
    def signature(self) -> str | None:
        """The signature stored in the manifest, if any."""
        return self.manifest.signature

    def with_manifest(self, manifest: ResourceManifest) -> ProjectResource:
        return ProjectResource(manifest=manifest, data=self.data)

    def with_data(self, data: Mapping[str, bytes]) -> ProjectResource:
        return ProjectResource(manifest=self.manifest, data=data)

    def get_signature(self) -> str:
        """Digest of the resource with its stored signature left out."""
        return calculate_content_digest(self.manifest.without_signature(), self.data)

    def verify(self) -> bool:
        """True when the stored signature matches the current content."""
        stored = self.signature
        return stored is not None and stored == self.get_signature()

    def update(self, modification: LastModification) -> ProjectResource:
        """Stamp the resource with *modification* and re-sign it."""
        attributes = self.manifest.attributes.stamped(modification)
        unsigned = self.manifest.with_attributes(attributes)
        signature = calculate_content_digest(unsigned, self.data)
        logger.debug(
            "Resource updated by %s at %s",
            modification.actor,
            modification.timestamp.isoformat(),
        )
        return self.with_manifest(unsigned.with_attributes(attributes.signed(signature)))
