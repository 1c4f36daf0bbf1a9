from typing import ClassVar

from .base import BaseCodec, ensure_bytes


class IdentityCodec(BaseCodec):
    """Pass-through codec: the payload is the data itself."""

    name: ClassVar[str] = "identity"

    def encode(self, data: bytes) -> bytes:
        return ensure_bytes(data)

    def decode(self, payload: bytes) -> bytes:
        return ensure_bytes(payload, "payload")
