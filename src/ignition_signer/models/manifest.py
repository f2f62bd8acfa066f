"""Pydantic models for the resource manifest (resource.json)."""

from __future__ import annotations

import copy
import json
from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    Strict,
    field_serializer,
    field_validator,
    model_serializer,
)

from ignition_signer.models.scope import ApplicationScope

LAST_MODIFICATION = "lastModification"
LAST_MODIFICATION_SIGNATURE = "lastModificationSignature"
RESERVED_ATTRIBUTES = frozenset({LAST_MODIFICATION, LAST_MODIFICATION_SIGNATURE})

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class LastModification(BaseModel):
    """Who last touched a resource, and when (UTC, whole seconds)."""

    model_config = ConfigDict(frozen=True)

    actor: str
    timestamp: datetime

    @field_validator("timestamp")
    @classmethod
    def normalize_timestamp(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            v = v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc).replace(microsecond=0)

    @field_serializer("timestamp")
    def serialize_timestamp(self, v: datetime) -> str:
        return v.isoformat(timespec="seconds").replace("+00:00", "Z")

    @classmethod
    def now(cls, actor: str) -> LastModification:
        return cls(actor=actor, timestamp=datetime.now(timezone.utc))


class Attributes(BaseModel):
    """The manifest's attribute bag.

    ``lastModification`` and ``lastModificationSignature`` are typed fields;
    every other key is kept as an extra and flattened next to them when the
    manifest is written.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    last_modification: LastModification = Field(alias=LAST_MODIFICATION)
    last_modification_signature: str | None = Field(
        default=None, alias=LAST_MODIFICATION_SIGNATURE, strict=True,
    )

    @model_serializer(mode="wrap")
    def _omit_missing_signature(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo,
    ) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        if self.last_modification_signature is None:
            key = LAST_MODIFICATION_SIGNATURE if info.by_alias else "last_modification_signature"
            data.pop(key, None)
        return data

    @property
    def extensions(self) -> dict[str, Any]:
        """Extension attributes, excluding the two reserved keys."""
        return copy.deepcopy(dict(self.model_extra or {}))

    @classmethod
    def build(
        cls,
        last_modification: LastModification,
        signature: str | None = None,
        /,
        **extensions: Any,
    ) -> Attributes:
        """Build from typed values; every keyword becomes an extension key."""
        values: dict[str, Any] = {**extensions, LAST_MODIFICATION: last_modification}
        if signature is not None:
            values[LAST_MODIFICATION_SIGNATURE] = signature
        return cls.model_validate(values)

    def sorted_entries(self) -> list[tuple[str, Any]]:
        """All attributes as (key, JSON value) pairs in key order.

        Reserved keys sort together with the extension keys; the signature
        is only present when set.
        """
        entries = self.extensions
        entries[LAST_MODIFICATION] = self.last_modification.model_dump(mode="json")
        if self.last_modification_signature is not None:
            entries[LAST_MODIFICATION_SIGNATURE] = self.last_modification_signature
        return sorted(entries.items())

    def stamped(self, modification: LastModification) -> Attributes:
        """Copy with a new modification record and no signature.

        Extension values are deep-copied, so the copy shares no mutable state.
        """
        return self.model_copy(
            deep=True,
            update={
                "last_modification": modification,
                "last_modification_signature": None,
            },
        )

    def signed(self, signature: str | None) -> Attributes:
        return self.model_copy(update={"last_modification_signature": signature})


class ResourceManifest(BaseModel):
    """Resource metadata (resource.json)."""

    model_config = ConfigDict(frozen=True)

    scope: ApplicationScope
    version: int = Field(strict=True, ge=INT32_MIN, le=INT32_MAX)
    documentation: str | None = Field(default=None, strict=True)
    locked: bool = Field(default=False, strict=True)
    restricted: bool = Field(default=False, strict=True)
    overridable: bool = Field(default=False, strict=True)
    files: tuple[Annotated[str, Strict()], ...]
    attributes: Attributes

    @field_validator("scope", mode="before")
    @classmethod
    def parse_scope(cls, v: Any) -> Any:
        if isinstance(v, str):
            return ApplicationScope.from_code(v)
        return v

    @field_validator("files")
    @classmethod
    def unique_files(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        duplicates = sorted({name for name in v if v.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate file names: {', '.join(duplicates)}")
        return v

    @field_serializer("scope")
    def serialize_scope(self, v: ApplicationScope) -> str:
        return v.code

    @model_serializer(mode="wrap")
    def _omit_defaults(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        if self.documentation is None:
            data.pop("documentation", None)
        if not self.locked:
            data.pop("locked", None)
        return data

    @property
    def signature(self) -> str | None:
        return self.attributes.last_modification_signature

    def with_attributes(self, attributes: Attributes) -> ResourceManifest:
        return self.model_copy(update={"attributes": attributes})

    def without_signature(self) -> ResourceManifest:
        """Copy with ``lastModificationSignature`` cleared."""
        return self.with_attributes(self.attributes.signed(None))

    def to_document(self) -> dict[str, Any]:
        """The manifest as a JSON-ready dict with on-disk key names."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_document(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, raw: str | bytes) -> ResourceManifest:
        return cls.model_validate_json(raw)
