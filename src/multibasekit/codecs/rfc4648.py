# multibasekit/codecs/rfc4648.py
"""RFC 4648 codecs (base16, base32, base32hex, base64, base64url) over the stdlib ``base64`` module."""

import base64
import binascii
from typing import Callable, ClassVar

from ..exceptions import InvalidPayloadError
from .base import Case, TextCodec, check_case, validate_case


def _repad(text: str, block: int, name: str) -> str:
    if "=" in text:
        raise InvalidPayloadError(f"{name} payload must not be padded")
    return text + "=" * (-len(text) % block)


def _check_padded(text: str, block: int, name: str) -> None:
    if len(text) % block:
        raise InvalidPayloadError(f"{name} payload length must be a multiple of {block}")


def _check_canonical(codec: TextCodec, text: str, data: bytes) -> bytes:
    # the stdlib decoders ignore the unused bits of the last symbol
    if codec.encode_str(data) != text:
        raise InvalidPayloadError(f"non-zero trailing bits in {codec.name} payload")
    return data


class Base16Codec(TextCodec):
    name: ClassVar[str] = "base16"

    def __init__(self, *, case: Case = "lower") -> None:
        self.case = validate_case(case)

    def encode_str(self, data: bytes) -> str:
        text = base64.b16encode(data).decode("ascii")
        return text.lower() if self.case == "lower" else text

    def decode_str(self, text: str) -> bytes:
        check_case(text, self.case, self.name)
        try:
            return base64.b16decode(text.upper())
        except binascii.Error as err:
            raise InvalidPayloadError(f"invalid {self.name} payload", reason=str(err)) from err


class Base32Codec(TextCodec):
    name: ClassVar[str] = "base32"
    _encoder: ClassVar[Callable[[bytes], bytes]] = staticmethod(base64.b32encode)
    _decoder: ClassVar[Callable[[str], bytes]] = staticmethod(base64.b32decode)

    def __init__(self, *, case: Case = "lower", padding: bool = False) -> None:
        self.case = validate_case(case)
        self.padding = bool(padding)

    def encode_str(self, data: bytes) -> str:
        text = self._encoder(data).decode("ascii")
        if not self.padding:
            text = text.rstrip("=")
        return text.lower() if self.case == "lower" else text

    def decode_str(self, text: str) -> bytes:
        check_case(text, self.case, self.name)
        padded = text
        if self.padding:
            _check_padded(text, 8, self.name)
        else:
            padded = _repad(text, 8, self.name)
        try:
            data = self._decoder(padded.upper())
        except binascii.Error as err:
            raise InvalidPayloadError(f"invalid {self.name} payload", reason=str(err)) from err
        return _check_canonical(self, text, data)


class Base32HexCodec(Base32Codec):
    """RFC 4648 "extended hex" alphabet (``0-9A-V``)."""

    name: ClassVar[str] = "base32hex"
    _encoder = staticmethod(base64.b32hexencode)
    _decoder = staticmethod(base64.b32hexdecode)


class Base64Codec(TextCodec):
    name: ClassVar[str] = "base64"
    _altchars: ClassVar[bytes | None] = None
    _foreign: ClassVar[str] = "-_"

    def __init__(self, *, padding: bool = False) -> None:
        self.padding = bool(padding)

    def encode_str(self, data: bytes) -> str:
        text = base64.b64encode(data, altchars=self._altchars).decode("ascii")
        return text if self.padding else text.rstrip("=")

    def decode_str(self, text: str) -> bytes:
        for char in self._foreign:
            if char in text:
                raise InvalidPayloadError(f"{self.name} payload contains illegal character {char!r}")
        padded = text
        if self.padding:
            _check_padded(text, 4, self.name)
        else:
            padded = _repad(text, 4, self.name)
        try:
            data = base64.b64decode(padded, altchars=self._altchars, validate=True)
        except binascii.Error as err:
            raise InvalidPayloadError(f"invalid {self.name} payload", reason=str(err)) from err
        return _check_canonical(self, text, data)


class Base64UrlCodec(Base64Codec):
    """URL and filename safe alphabet (``-`` and ``_`` instead of ``+`` and ``/``)."""

    name: ClassVar[str] = "base64url"
    _altchars = b"-_"
    _foreign = "+/"


__all__ = [
    "Base16Codec",
    "Base32Codec",
    "Base32HexCodec",
    "Base64Codec",
    "Base64UrlCodec",
]
