# multibasekit/registry/table.py
"""Canonical multibase table. Declaration order is the order ``encodings()`` reports."""

from ..codecs import (
    Base1Codec,
    Base2Codec,
    Base16Codec,
    Base32Codec,
    Base32HexCodec,
    Base58Codec,
    Base64Codec,
    Base64UrlCodec,
    IdentityCodec,
    RadixCodec,
    ZBase32Codec,
)
from .base import CodecRegistry
from .descriptors import CodecDescriptor

__all__ = ["DESCRIPTORS", "default_registry"]

DESCRIPTORS: tuple[CodecDescriptor, ...] = (
    CodecDescriptor("identity", b"\x00", "identity", IdentityCodec()),
    CodecDescriptor("base1", b"1", "base1", Base1Codec()),
    CodecDescriptor("base2", b"0", "base2", Base2Codec()),
    CodecDescriptor("base8", b"7", "base8", RadixCodec(8, padding=True)),
    CodecDescriptor("base10", b"9", "base10", RadixCodec(10, padding=True)),
    CodecDescriptor("base16_upper", b"F", "base16", Base16Codec(case="upper")),
    CodecDescriptor("base16_lower", b"f", "base16", Base16Codec(case="lower")),
    # base32hex unpadded lives in the base16 family, padded in base32
    CodecDescriptor("base32_hex_upper", b"V", "base16", Base32HexCodec(case="upper", padding=False)),
    CodecDescriptor("base32_hex_lower", b"v", "base16", Base32HexCodec(case="lower", padding=False)),
    CodecDescriptor("base32_hex_pad_upper", b"T", "base32", Base32HexCodec(case="upper", padding=True)),
    CodecDescriptor("base32_hex_pad_lower", b"t", "base32", Base32HexCodec(case="lower", padding=True)),
    CodecDescriptor("base32_upper", b"B", "base32", Base32Codec(case="upper", padding=False)),
    CodecDescriptor("base32_lower", b"b", "base32", Base32Codec(case="lower", padding=False)),
    CodecDescriptor("base32_pad_upper", b"C", "base32", Base32Codec(case="upper", padding=True)),
    CodecDescriptor("base32_pad_lower", b"c", "base32", Base32Codec(case="lower", padding=True)),
    CodecDescriptor("base32_z", b"h", "base32", ZBase32Codec()),
    CodecDescriptor("base58_flickr", b"Z", "base58", Base58Codec(alphabet="flickr")),
    CodecDescriptor("base58_btc", b"z", "base58", Base58Codec(alphabet="btc")),
    CodecDescriptor("base64", b"m", "base64", Base64Codec(padding=False)),
    CodecDescriptor("base64_pad", b"M", "base64", Base64Codec(padding=True)),
    CodecDescriptor("base64_url", b"u", "base64", Base64UrlCodec(padding=False)),
    CodecDescriptor("base64_url_pad", b"U", "base64", Base64UrlCodec(padding=True)),
)

default_registry = CodecRegistry(DESCRIPTORS)
