# multibasekit/registry/descriptors.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from ..codecs.base import BaseCodec
from ..exceptions import DescriptorValidationError

__all__ = ["CodecDescriptor"]

_MAX_LEN = 64
_LABEL_RE = re.compile(r"^[a-z0-9_]+$")


def _validate_label(value: str, field: str) -> str:
    """
    Validate an encoding or family id.

    Rules:
    - must be a string
    - non-empty, length <= 64
    - allowed characters: a-z, 0-9, underscore (_)
    """
    if not isinstance(value, str):
        raise DescriptorValidationError(f"{field} must be a string (got {type(value)!r})")
    if not value:
        raise DescriptorValidationError(f"{field} cannot be empty")
    if len(value) > _MAX_LEN:
        raise DescriptorValidationError(f"{field} too long (> {_MAX_LEN})")
    if not _LABEL_RE.match(value):
        raise DescriptorValidationError(f"{field} contains illegal characters: {value!r}")
    return value


@dataclass(frozen=True, slots=True)
class CodecDescriptor:
    """
    One row of the multibase table: identifier, single-byte prefix, family and bound codec.

    Prefixes are limited to ``0x00..0x7f``; multi-byte (varint) codes are not supported.
    """

    encoding_id: str
    prefix: bytes
    family_id: str
    codec: BaseCodec

    def __post_init__(self) -> None:
        _validate_label(self.encoding_id, "encoding_id")
        _validate_label(self.family_id, "family_id")
        if not isinstance(self.prefix, bytes) or len(self.prefix) != 1:
            raise DescriptorValidationError(
                f"prefix for {self.encoding_id!r} must be exactly one byte (got {self.prefix!r})"
            )
        if self.prefix[0] > 0x7F:
            raise DescriptorValidationError(
                f"prefix for {self.encoding_id!r} must be in 0x00..0x7f (got {self.prefix!r})"
            )
        if not isinstance(self.codec, BaseCodec):
            raise DescriptorValidationError(
                f"codec for {self.encoding_id!r} must be a BaseCodec (got {type(self.codec).__name__})"
            )

    @property
    def prefix_byte(self) -> int:
        return self.prefix[0]

    @property
    def encode_op(self) -> Callable[[bytes], bytes]:
        return self.codec.encode

    @property
    def decode_op(self) -> Callable[[bytes], bytes]:
        return self.codec.decode

    def __repr__(self) -> str:  # pragma: no cover
        return f"CodecDescriptor({self.encoding_id}, prefix={self.prefix!r}, family={self.family_id})"
