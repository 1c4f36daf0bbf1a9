# multibasekit/codecs/base1.py
"""
Unary (base1) codec.

Byte strings are numbered bijectively, all shorter strings first and then by
big-endian value (``b""`` -> 0, ``b"\\x00"`` -> 1, ``b"\\xff"`` -> 256,
``b"\\x00\\x00"`` -> 257, ...). The payload is that many ``"1"`` symbols.

Output size follows the *value* of the data, not its length: anything past a
couple of bytes is enormous. A warning is logged above
``UNARY_WARN_THRESHOLD``; no limit is enforced.
"""

import logging
from typing import ClassVar

from ..conf import settings
from ..exceptions import InvalidPayloadError
from .base import TextCodec

logger = logging.getLogger(__name__)


def _shorter_than(length: int) -> int:
    """Number of byte strings shorter than ``length``."""
    return ((1 << (8 * length)) - 1) // 255


def unary_length(data: bytes) -> int:
    """Number of symbols the unary encoding of ``data`` will have."""
    return _shorter_than(len(data)) + int.from_bytes(data, "big")


class Base1Codec(TextCodec):
    name: ClassVar[str] = "base1"

    def encode_str(self, data: bytes) -> str:
        size = unary_length(data)
        threshold = settings["UNARY_WARN_THRESHOLD"]
        if size > threshold:
            logger.warning(
                "base1 payload of %d bytes expands to %d symbols (threshold %d)",
                len(data),
                size,
                threshold,
            )
        return "1" * size

    def decode_str(self, text: str) -> bytes:
        if text.strip("1"):
            bad = next(char for char in text if char != "1")
            raise InvalidPayloadError(f"non-alphabet digit found for base1: {bad!r}")

        count = len(text)
        length = 0
        while _shorter_than(length + 1) <= count:
            length += 1
        return (count - _shorter_than(length)).to_bytes(length, "big")
