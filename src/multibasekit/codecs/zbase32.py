"""z-base-32: human-oriented base32 alphabet, unpadded, 5 bits per symbol, MSB first."""

from typing import ClassVar

from ..exceptions import InvalidPayloadError
from .base import TextCodec

ALPHABET = "ybndrfg8ejkmcpqxot1uwisza345h769"
_INDEX = {char: i for i, char in enumerate(ALPHABET)}


class ZBase32Codec(TextCodec):
    name: ClassVar[str] = "base32_z"

    def encode_str(self, data: bytes) -> str:
        out: list[str] = []
        acc = 0
        bits = 0
        for byte in data:
            acc = (acc << 8) | byte
            bits += 8
            while bits >= 5:
                bits -= 5
                out.append(ALPHABET[(acc >> bits) & 0x1F])
            acc &= (1 << bits) - 1
        if bits:
            out.append(ALPHABET[(acc << (5 - bits)) & 0x1F])
        return "".join(out)

    def decode_str(self, text: str) -> bytes:
        # every full byte needs 8 bits; a 1, 3 or 6 symbol tail cannot come from encode_str
        if len(text) % 8 in (1, 3, 6):
            raise InvalidPayloadError(f"invalid {self.name} payload length: {len(text)}")

        out = bytearray()
        acc = 0
        bits = 0
        for char in text:
            try:
                value = _INDEX[char]
            except KeyError:
                raise InvalidPayloadError(f"non-alphabet character found for z-base-32: {char!r}") from None
            acc = (acc << 5) | value
            bits += 5
            if bits >= 8:
                bits -= 8
                out.append((acc >> bits) & 0xFF)
                acc &= (1 << bits) - 1
        if acc:
            raise InvalidPayloadError(f"non-zero trailing bits in {self.name} payload")
        return bytes(out)
