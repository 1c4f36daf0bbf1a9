# multibasekit/exceptions.py
"""Multibase exceptions"""

from typing import ClassVar

__all__ = [
    "MultibaseError",
    "UnsupportedEncodingError",
    "MissingEncodingError",
    "UnsupportedPrefixError",
    "InvalidPayloadError",
    "RegistryError",
    "RegistryDuplicateError",
    "RegistryCollisionError",
    "RegistryFrozenError",
    "DescriptorValidationError",
]


class MultibaseError(Exception):
    """Base for all multibasekit exceptions."""

    code: ClassVar[str] = "multibase_error"


# ----------------------------------------------------------------------------
# Dispatch errors
# ----------------------------------------------------------------------------
class UnsupportedEncodingError(MultibaseError, LookupError):
    """Requested encoding id or family id has no descriptor."""

    code = "unsupported_encoding"

    def __init__(self, encoding_id: object, *, kind: str = "encoding id") -> None:
        super().__init__(f"Unsupported encoding - no encodings for {kind}: {encoding_id!r}")
        self.encoding_id = encoding_id


class MissingEncodingError(MultibaseError, ValueError):
    """Empty input: there is no prefix byte to dispatch on."""

    code = "missing_encoding"

    def __init__(self, message: str = "Invalid data. No multibase encoding information found.") -> None:
        super().__init__(message)


class UnsupportedPrefixError(MultibaseError, LookupError):
    """The first byte of the input matches no descriptor."""

    code = "unsupported_prefix"

    def __init__(self, prefix: bytes) -> None:
        super().__init__(f"Unsupported prefix - no encoding registered for prefix {prefix!r}")
        self.prefix = prefix


class InvalidPayloadError(MultibaseError, ValueError):
    """The prefix matched but the payload is not valid for that codec.

    ``reason`` keeps the underlying codec's complaint when one was given.
    """

    code = "invalid_payload"

    def __init__(
        self,
        message: str,
        *,
        encoding_id: str | None = None,
        reason: str | None = None,
    ) -> None:
        super().__init__(message)
        self.encoding_id = encoding_id
        self.reason = reason if reason is not None else message


# ----------------------------------------------------------------------------
# Registry errors
# ----------------------------------------------------------------------------
class RegistryError(MultibaseError): ...


class RegistryDuplicateError(RegistryError):
    """Two descriptors declare the same encoding id."""


class RegistryCollisionError(RegistryError):
    """Two descriptors declare the same prefix byte."""


class RegistryFrozenError(RuntimeError, RegistryError): ...


class DescriptorValidationError(RegistryError, ValueError):
    """Raised when a descriptor is malformed (bad id, prefix, or codec)."""
