from typing import ClassVar

from ..exceptions import InvalidPayloadError
from .base import TextCodec


class Base2Codec(TextCodec):
    """Eight ``0``/``1`` symbols per byte, most significant bit first."""

    name: ClassVar[str] = "base2"

    def encode_str(self, data: bytes) -> str:
        return "".join(format(byte, "08b") for byte in data)

    def decode_str(self, text: str) -> bytes:
        if len(text) % 8:
            raise InvalidPayloadError(f"base2 payload length must be a multiple of 8 (got {len(text)})")
        if text.strip("01"):
            bad = next(char for char in text if char not in "01")
            raise InvalidPayloadError(f"non-alphabet digit found for base2: {bad!r}")
        return bytes(int(text[i : i + 8], 2) for i in range(0, len(text), 8))
