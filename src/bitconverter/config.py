"""Codec configuration.

This module provides the configuration model accepted by FixedWidthCodec.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .byteorder import DEFAULT_ORDER, ByteOrder, resolve_order
from .exceptions import ByteOrderError


class CodecConfig(BaseModel):
    """Configuration for a FixedWidthCodec.

    Attributes:
        order: Byte order used when a call does not pass one (default little).
            May also be given as ``endianness``. Strings "little"/"big" are
            accepted in any case.

    Examples:
        ```python
        from bitconverter import CodecConfig, FixedWidthCodec

        config = CodecConfig(endianness="big")
        codec = FixedWidthCodec(config)
        codec.decode_u16(b"\\x01\\x00")  # 256
        ```
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    order: ByteOrder = Field(default=DEFAULT_ORDER, alias="endianness")

    @field_validator("order", mode="before")
    @classmethod
    def coerce_order(cls, value: object) -> ByteOrder:
        try:
            return resolve_order(value)  # type: ignore[arg-type]
        except ByteOrderError as e:
            # pydantic turns ValueError into a ValidationError
            raise ValueError(str(e)) from e
