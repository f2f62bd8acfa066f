"""Canonical digest engine."""

from ignition_signer.signing.canonical import canonical_dumps
from ignition_signer.signing.digest import calculate_content_digest, digest_segments

__all__ = [
    "calculate_content_digest",
    "canonical_dumps",
    "digest_segments",
]
