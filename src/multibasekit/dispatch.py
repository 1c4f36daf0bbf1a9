# multibasekit/dispatch.py
"""
Prefix dispatch over a :class:`~multibasekit.registry.CodecRegistry`.

Every operation exists twice: the plain name returns the value and raises a
:class:`~multibasekit.exceptions.MultibaseError` subclass on failure, and the
``try_`` name returns a :class:`~multibasekit.result.Result` instead. The
``try_`` forms are derived from the raising ones via :func:`capture`.

``codec``/``is_encoded`` only look at the prefix byte. A string can have a
known prefix and still fail to decode.
"""

from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import ContextManager

from .codecs.base import ensure_bytes
from .conf import settings
from .exceptions import InvalidPayloadError, MissingEncodingError, UnsupportedPrefixError
from .registry import CodecDescriptor, CodecRegistry, default_registry
from .result import Result, capture
from .tracing import codec_span

logger = logging.getLogger(__name__)

__all__ = ["Dispatcher", "default_dispatcher"]


def _as_encoded(value: object) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return ensure_bytes(value, "string")


class Dispatcher:
    """Public multibase operations bound to one registry."""

    def __init__(self, registry: CodecRegistry | None = None) -> None:
        self.registry = registry if registry is not None else default_registry

    # ---- helpers ----------------------------------------------------------
    def _span(self, name: str, descriptor: CodecDescriptor, size: int) -> ContextManager[object]:
        if not settings["TRACING_ENABLED"]:
            return nullcontext()
        return codec_span(
            name,
            attributes={
                "multibase.encoding": descriptor.encoding_id,
                "multibase.family": descriptor.family_id,
                "multibase.input_size": size,
            },
        )

    def _split(self, string: object) -> tuple[CodecDescriptor, bytes]:
        raw = _as_encoded(string)
        if not raw:
            raise MissingEncodingError()
        return self.registry.lookup_by_prefix(raw[:1]), raw[1:]

    def _decode(self, string: object, span_name: str) -> tuple[bytes, CodecDescriptor]:
        descriptor, payload = self._split(string)
        with self._span(span_name, descriptor, len(payload)):
            try:
                return descriptor.decode_op(payload), descriptor
            except ValueError as err:
                logger.debug("multibase decode failed for %s: %s", descriptor.encoding_id, err)
                reason = getattr(err, "reason", None) or str(err)
                raise InvalidPayloadError(
                    f"Invalid {descriptor.encoding_id} payload: {reason}",
                    encoding_id=descriptor.encoding_id,
                    reason=reason,
                ) from err

    # ---- encode -----------------------------------------------------------
    def encode(self, data: bytes, encoding_id: str) -> bytes:
        """
        Encode ``data`` with ``encoding_id`` and tag it with that encoding's prefix.

        :raises UnsupportedEncodingError: if the encoding id is unknown.
        """
        data = ensure_bytes(data)
        descriptor = self.registry.lookup_by_id(encoding_id)
        with self._span("multibase.encode", descriptor, len(data)):
            return descriptor.prefix + descriptor.encode_op(data)

    def try_encode(self, data: bytes, encoding_id: str) -> Result[bytes]:
        return capture(self.encode, data, encoding_id)

    # ---- decode -----------------------------------------------------------
    def decode(self, string: bytes | str) -> bytes:
        """
        Decode a multibase string back into the encoded bytes.

        :raises MissingEncodingError: if ``string`` is empty.
        :raises UnsupportedPrefixError: if the first byte matches no encoding.
        :raises InvalidPayloadError: if the payload is malformed for that encoding.
        """
        return self._decode(string, "multibase.decode")[0]

    def try_decode(self, string: bytes | str) -> Result[bytes]:
        return capture(self.decode, string)

    def codec_decode(self, string: bytes | str) -> tuple[bytes, str]:
        """Like :meth:`decode`, also returning the encoding id that was used."""
        data, descriptor = self._decode(string, "multibase.codec_decode")
        return data, descriptor.encoding_id

    def try_codec_decode(self, string: bytes | str) -> Result[tuple[bytes, str]]:
        return capture(self.codec_decode, string)

    # ---- detection --------------------------------------------------------
    def codec(self, string: bytes | str) -> str:
        """
        Encoding id named by the prefix of ``string``. The payload is not validated.

        :raises MissingEncodingError: if ``string`` is empty.
        :raises UnsupportedPrefixError: if the first byte matches no encoding.
        """
        return self._split(string)[0].encoding_id

    def try_codec(self, string: bytes | str) -> Result[str]:
        return capture(self.codec, string)

    def is_encoded(self, string: bytes | str) -> bool:
        """True if ``string`` starts with a known prefix (see :meth:`codec`)."""
        try:
            self._split(string)
        except (MissingEncodingError, UnsupportedPrefixError):
            return False
        return True

    # ---- prefixes ---------------------------------------------------------
    def prefix(self, encoding_id: str) -> bytes:
        return self.registry.lookup_by_id(encoding_id).prefix

    def try_prefix(self, encoding_id: str) -> Result[bytes]:
        return capture(self.prefix, encoding_id)

    def multibase(self, data: bytes | str, encoding_id: str) -> bytes:
        """
        Tag already-encoded ``data`` with the prefix of ``encoding_id``.

        ``data`` is not re-encoded or checked; it is the caller's job to have
        encoded it with the matching codec.
        """
        return self.prefix(encoding_id) + _as_encoded(data)

    def try_multibase(self, data: bytes | str, encoding_id: str) -> Result[bytes]:
        return capture(self.multibase, data, encoding_id)

    # ---- table queries ----------------------------------------------------
    def encodings(self) -> tuple[str, ...]:
        return self.registry.all_ids()

    def encoding_families(self) -> frozenset[str]:
        return self.registry.all_families()

    def encodings_for(self, family_id: str) -> tuple[str, ...]:
        return self.registry.ids_in_family(family_id)

    def try_encodings_for(self, family_id: str) -> Result[tuple[str, ...]]:
        return capture(self.encodings_for, family_id)

    def encoding_family(self, encoding_id: str) -> str:
        return self.registry.family_of(encoding_id)

    def try_encoding_family(self, encoding_id: str) -> Result[str]:
        return capture(self.encoding_family, encoding_id)


default_dispatcher = Dispatcher(default_registry)
