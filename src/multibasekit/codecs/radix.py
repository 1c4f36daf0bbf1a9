# multibasekit/codecs/radix.py
"""
Byte buffer <-> digit string conversion in a small radix (8 or 10).

The buffer is read as a big-endian unsigned integer. Leading ``0x00`` bytes
carry no numeric value, so they are tracked separately:

* ``padding=True``: each leading zero byte becomes one leading ``"0"`` digit
  and decoding turns each leading ``"0"`` back into a zero byte. Round-trips
  are exact.
* ``padding=False``: leading zero bytes collapse. Shorter output, but their
  count cannot be recovered.

Examples::

    >>> encode10(b"hello")
    '448378203247'
    >>> encode8(b"\\x00\\x00hello", padding=True)
    '006414533066157'
    >>> decode8("006414533066157", padding=True)
    b'\\x00\\x00hello'
"""

from __future__ import annotations

from typing import ClassVar

from ..exceptions import InvalidPayloadError
from .base import TextCodec, ensure_bytes

__all__ = [
    "RADIXES",
    "RadixCodec",
    "decode10",
    "decode8",
    "decode_radix",
    "encode10",
    "encode8",
    "encode_radix",
]

RADIXES = (8, 10)

_ALPHABETS: dict[int, frozenset[str]] = {
    8: frozenset("01234567"),
    10: frozenset("0123456789"),
}

# Decimal work is done in fixed-width chunks: str(int)/int(str) refuse very
# long decimal strings (sys.get_int_max_str_digits), octal is not limited.
_DEC_CHUNK = 18
_DEC_BASE = 10**_DEC_CHUNK


def _check_radix(radix: int) -> None:
    if radix not in _ALPHABETS:
        raise ValueError(f"radix must be one of {RADIXES} (got {radix!r})")


def _render(value: int, radix: int) -> str:
    if radix == 8:
        return format(value, "o")

    parts: list[str] = []
    while value >= _DEC_BASE:
        value, rem = divmod(value, _DEC_BASE)
        parts.append(f"{rem:0{_DEC_CHUNK}d}")
    parts.append(str(value))
    return "".join(reversed(parts))


def _parse(digits: str, radix: int) -> int:
    if radix == 8:
        return int(digits, 8)

    head = len(digits) % _DEC_CHUNK or _DEC_CHUNK
    value = int(digits[:head])
    for i in range(head, len(digits), _DEC_CHUNK):
        value = value * _DEC_BASE + int(digits[i : i + _DEC_CHUNK])
    return value


def encode_radix(data: bytes, radix: int, *, padding: bool = False) -> str:
    """Render ``data`` as a digit string in ``radix``."""
    _check_radix(radix)
    data = ensure_bytes(data)
    if not data:
        return ""

    body = data.lstrip(b"\x00")
    zeros = len(data) - len(body)
    digits = _render(int.from_bytes(body, "big"), radix) if body else ""
    if padding:
        return "0" * zeros + digits
    return digits or "0"


def decode_radix(text: str, radix: int, *, padding: bool = False) -> bytes:
    """Parse a digit string in ``radix`` back into bytes.

    :raises InvalidPayloadError: if any character is outside the radix alphabet.
    """
    _check_radix(radix)
    if not isinstance(text, str):
        raise TypeError(f"text must be a str (got {type(text).__name__})")
    if not text:
        return b""
    if text == "0":
        return b"\x00"

    alphabet = _ALPHABETS[radix]
    for char in text:
        if char not in alphabet:
            raise InvalidPayloadError(f"non-alphabet digit found for base{radix}: {char!r}")

    body = text.lstrip("0")
    zeros = len(text) - len(body)
    if body:
        value = _parse(body, radix)
        decoded = value.to_bytes((value.bit_length() + 7) // 8, "big")
    else:
        decoded = b""

    if padding:
        return b"\x00" * zeros + decoded
    return decoded or b"\x00"


def encode8(data: bytes, *, padding: bool = False) -> str:
    return encode_radix(data, 8, padding=padding)


def decode8(text: str, *, padding: bool = False) -> bytes:
    return decode_radix(text, 8, padding=padding)


def encode10(data: bytes, *, padding: bool = False) -> str:
    return encode_radix(data, 10, padding=padding)


def decode10(text: str, *, padding: bool = False) -> bytes:
    return decode_radix(text, 10, padding=padding)


class RadixCodec(TextCodec):
    """Base8/base10 codec with its padding mode fixed at construction."""

    name: ClassVar[str] = "radix"

    def __init__(self, radix: int, *, padding: bool = True) -> None:
        _check_radix(radix)
        self.radix = radix
        self.padding = bool(padding)
        self.name = f"base{radix}"

    def encode_str(self, data: bytes) -> str:
        return encode_radix(data, self.radix, padding=self.padding)

    def decode_str(self, text: str) -> bytes:
        return decode_radix(text, self.radix, padding=self.padding)

    def __repr__(self) -> str:  # pragma: no cover
        return f"RadixCodec(radix={self.radix}, padding={self.padding})"
