"""Canonical content digest of a resource manifest and its file data.

The digest is SHA-256 over the following segments, concatenated without
separators:

1. scope as a 32-bit big-endian integer
2. documentation as UTF-8, or nothing when absent
3. version as a 32-bit big-endian integer
4. ``locked``, ``restricted`` and ``overridable`` as one byte each (1/0)
5. for each file name in sorted order: the UTF-8 name, then the raw content
6. for each attribute key in sorted order (reserved and extension keys
   together): the UTF-8 key, then the canonical JSON of its value

An absent documentation string and an empty one hash identically. Existing
signatures depend on that, so it stays.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from ignition_signer.errors import MissingResourceDataError
from ignition_signer.signing.canonical import canonical_dumps

if TYPE_CHECKING:
    from ignition_signer.models.manifest import ResourceManifest

logger = logging.getLogger(__name__)


def _int32(value: int) -> bytes:
    return value.to_bytes(4, "big", signed=True)


def _flag(value: bool) -> bytes:
    return b"\x01" if value else b"\x00"


def digest_segments(
    manifest: ResourceManifest,
    data: Mapping[str, bytes],
) -> Iterator[bytes]:
    """Yield the byte segments fed to the hash, in order."""
    yield manifest.scope.digest_bytes()

    if manifest.documentation is not None:
        yield manifest.documentation.encode("utf-8")

    yield _int32(manifest.version)
    yield _flag(manifest.locked)
    yield _flag(manifest.restricted)
    yield _flag(manifest.overridable)

    for name in sorted(manifest.files):
        if name not in data:
            raise MissingResourceDataError(name)
        yield name.encode("utf-8")
        yield bytes(data[name])

    for key, value in manifest.attributes.sorted_entries():
        yield key.encode("utf-8")
        yield canonical_dumps(value).encode("utf-8")


def calculate_content_digest(
    manifest: ResourceManifest,
    data: Mapping[str, bytes],
) -> str:
    """Return the lowercase hex SHA-256 digest of *manifest* and *data*."""
    hasher = hashlib.sha256()
    for segment in digest_segments(manifest, data):
        hasher.update(segment)
    digest = hasher.hexdigest()
    logger.debug("Digest over %d file(s): %s", len(manifest.files), digest)
    return digest
