"""Pydantic models for CLI configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from ignition_signer.config.constants import (
    DEFAULT_FORMAT,
    DEFAULT_MANIFEST_NAME,
    DOCUMENT_FORMATS,
)


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_format: str = Field(
        default=DEFAULT_FORMAT, description="Output format for manifest documents",
    )
    manifest_name: str = Field(
        default=DEFAULT_MANIFEST_NAME, description="Manifest file name inside a resource",
    )

    @field_validator("default_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        v = v.lower()
        if v not in DOCUMENT_FORMATS:
            raise ValueError(f"Format must be one of: {', '.join(DOCUMENT_FORMATS)}")
        return v

    @field_validator("manifest_name")
    @classmethod
    def validate_manifest_name(cls, v: str) -> str:
        if not v or "/" in v or "\\" in v or v in (".", ".."):
            raise ValueError("Manifest name must be a plain file name")
        return v
