"""
multibasekit: self-describing base encodings (Multibase).

A multibase string is one prefix byte naming the encoding, followed by the
payload in that encoding::

    >>> import multibasekit
    >>> multibasekit.encode(b"hello", "base16_lower")
    b'f68656c6c6f'
    >>> multibasekit.codec_decode(b"f68656c6c6f")
    (b'hello', 'base16_lower')

Import Guidelines:
------------------
- Use the module-level functions (bound to the built-in table) for everyday work.
- Use `multibasekit.dispatch.Dispatcher` with your own `CodecRegistry` for a custom table.
- Use `multibasekit.codecs` for the individual codecs, including the
  standalone base8/base10 converter (`encode8`, `decode10`, ...).
- Every failure is a `multibasekit.exceptions.MultibaseError`; each raising
  operation has a `try_*` twin returning a `Result`.
"""

from importlib.metadata import PackageNotFoundError, version

from .dispatch import Dispatcher, default_dispatcher
from .exceptions import (
    InvalidPayloadError,
    MissingEncodingError,
    MultibaseError,
    UnsupportedEncodingError,
    UnsupportedPrefixError,
)
from .registry import CodecDescriptor, CodecRegistry, default_registry
from .result import Result

try:
    __version__ = version("multibasekit")
except PackageNotFoundError:  # pragma: no cover - running from a source tree
    __version__ = "0.0.0"

encode = default_dispatcher.encode
try_encode = default_dispatcher.try_encode
decode = default_dispatcher.decode
try_decode = default_dispatcher.try_decode
codec_decode = default_dispatcher.codec_decode
try_codec_decode = default_dispatcher.try_codec_decode
codec = default_dispatcher.codec
try_codec = default_dispatcher.try_codec
is_encoded = default_dispatcher.is_encoded
prefix = default_dispatcher.prefix
try_prefix = default_dispatcher.try_prefix
multibase = default_dispatcher.multibase
try_multibase = default_dispatcher.try_multibase
encodings = default_dispatcher.encodings
encoding_families = default_dispatcher.encoding_families
encodings_for = default_dispatcher.encodings_for
try_encodings_for = default_dispatcher.try_encodings_for
encoding_family = default_dispatcher.encoding_family
try_encoding_family = default_dispatcher.try_encoding_family

__all__ = [
    "CodecDescriptor",
    "CodecRegistry",
    "Dispatcher",
    "InvalidPayloadError",
    "MissingEncodingError",
    "MultibaseError",
    "Result",
    "UnsupportedEncodingError",
    "UnsupportedPrefixError",
    "default_dispatcher",
    "default_registry",
    "codec",
    "codec_decode",
    "decode",
    "encode",
    "encoding_families",
    "encoding_family",
    "encodings",
    "encodings_for",
    "is_encoded",
    "multibase",
    "prefix",
    "try_codec",
    "try_codec_decode",
    "try_decode",
    "try_encode",
    "try_encoding_family",
    "try_encodings_for",
    "try_multibase",
    "try_prefix",
]
