from .base import BaseCodec, TextCodec
from .base1 import Base1Codec
from .base2 import Base2Codec
from .base58 import Base58Codec
from .identity import IdentityCodec
from .radix import (
    RadixCodec,
    decode10,
    decode8,
    decode_radix,
    encode10,
    encode8,
    encode_radix,
)
from .rfc4648 import Base16Codec, Base32Codec, Base32HexCodec, Base64Codec, Base64UrlCodec
from .zbase32 import ZBase32Codec

__all__ = [
    "BaseCodec",
    "TextCodec",
    "IdentityCodec",
    "RadixCodec",
    "Base1Codec",
    "Base2Codec",
    "Base16Codec",
    "Base32Codec",
    "Base32HexCodec",
    "ZBase32Codec",
    "Base58Codec",
    "Base64Codec",
    "Base64UrlCodec",
    "encode_radix",
    "decode_radix",
    "encode8",
    "decode8",
    "encode10",
    "decode10",
]
