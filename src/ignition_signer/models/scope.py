"""Application scope flags."""

from __future__ import annotations

import enum


class ApplicationScope(enum.IntFlag):
    """Which Ignition applications may access a resource.

    Serialized in ``resource.json`` as a short code: the letters of the
    individual flags in alphabetical order, ``N`` for no scope and ``A``
    for all of them.
    """

    NONE = 0
    GATEWAY = 1
    DESIGNER = 2
    DESIGNER_GATEWAY = 3
    CLIENT = 4
    CLIENT_GATEWAY = 5
    CLIENT_DESIGNER = 6
    ALL = 7

    @property
    def code(self) -> str:
        return _CODES[int(self)]

    @classmethod
    def from_code(cls, code: str) -> ApplicationScope:
        try:
            return cls(_VALUES[code])
        except KeyError:
            valid = ", ".join(_VALUES)
            raise ValueError(f"Unknown scope code '{code}' (expected one of {valid})") from None

    def digest_bytes(self) -> bytes:
        """Fixed-width 32-bit big-endian encoding used by the digest."""
        return int(self).to_bytes(4, "big", signed=True)


_CODES = {
    0: "N",
    1: "G",
    2: "D",
    3: "DG",
    4: "C",
    5: "CG",
    6: "CD",
    7: "A",
}
_VALUES = {code: value for value, code in _CODES.items()}
