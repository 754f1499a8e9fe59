"""Fixed-width integer kinds.

An IntKind describes the width and signedness of an encoded integer and
derives its byte size and inclusive bounds from them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import KindError


class IntKind(BaseModel):
    """Width and signedness of a fixed-width integer.

    Attributes:
        name: Canonical name (e.g. "uint16")
        bits: Width in bits, a whole number of bytes
        signed: Whether values use two's complement

    Example:
        >>> UINT16.size, UINT16.min_value, UINT16.max_value
        (2, 0, 65535)
        >>> INT32.min_value
        -2147483648
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    bits: int = Field(ge=8, le=64)
    signed: bool = False

    @field_validator("bits")
    @classmethod
    def check_whole_bytes(cls, value: int) -> int:
        if value % 8:
            raise ValueError(f"bits must be a multiple of 8, got {value}")
        return value

    @property
    def size(self) -> int:
        """Encoded length in bytes."""
        return self.bits // 8

    @property
    def short_name(self) -> str:
        """Short name such as "u16" or "i32"."""
        return f"{'i' if self.signed else 'u'}{self.bits}"

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Return True if value lies within this kind's bounds."""
        return self.min_value <= value <= self.max_value


UINT16 = IntKind(name="uint16", bits=16, signed=False)
INT16 = IntKind(name="int16", bits=16, signed=True)
UINT32 = IntKind(name="uint32", bits=32, signed=False)
INT32 = IntKind(name="int32", bits=32, signed=True)

KINDS: tuple[IntKind, ...] = (UINT16, INT16, UINT32, INT32)

_BY_NAME: dict[str, IntKind] = {}
for _kind in KINDS:
    _BY_NAME[_kind.name] = _kind
    _BY_NAME[_kind.short_name] = _kind


def get_kind(kind: IntKind | str) -> IntKind:
    """Look up a kind by name.

    Args:
        kind: IntKind instance, canonical name ("uint16") or short name ("u16").
            Names are case-insensitive.

    Returns:
        Matching IntKind

    Raises:
        KindError: If the name is not a supported kind
    """
    if isinstance(kind, IntKind):
        return kind
    if isinstance(kind, str):
        found = _BY_NAME.get(kind.strip().lower())
        if found is not None:
            return found
    supported = ", ".join(k.name for k in KINDS)
    raise KindError(f"Unknown integer kind: {kind!r}. Supported: {supported}")
