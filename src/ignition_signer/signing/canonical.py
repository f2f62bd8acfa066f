"""Canonical JSON rendering for digested attribute values."""

from __future__ import annotations

import json
from typing import Any


def canonical_dumps(value: Any) -> str:
    """Render *value* as compact JSON with object keys sorted at every level.

    Non-ASCII text is emitted as-is (UTF-8 once encoded) and NaN/Infinity are
    rejected, so the same value always renders to the same bytes.
    """
    return json.dumps(
        value,
        separators=(",", ":"),
        sort_keys=True,
        ensure_ascii=False,
        allow_nan=False,
    )
