# multibasekit/codecs/base.py

from abc import ABC, abstractmethod
from typing import ClassVar, Literal

from ..exceptions import InvalidPayloadError

Case = Literal["upper", "lower"]

_CASES = ("upper", "lower")


class BaseCodec(ABC):
    """Encode/decode capability bound to one set of options.

    Options (case, padding, alphabet) are fixed when the codec is built; the
    dispatcher only ever calls ``encode``/``decode`` with data.
    """

    name: ClassVar[str] = "codec"

    @abstractmethod
    def encode(self, data: bytes) -> bytes:
        """Encode raw bytes into the payload bytes."""

    @abstractmethod
    def decode(self, payload: bytes) -> bytes:
        """Decode payload bytes, raising ``InvalidPayloadError`` (or ``ValueError``) when malformed."""

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}()"


class TextCodec(BaseCodec, ABC):
    """Codec whose payload is an ASCII string."""

    @abstractmethod
    def encode_str(self, data: bytes) -> str: ...

    @abstractmethod
    def decode_str(self, text: str) -> bytes: ...

    def encode(self, data: bytes) -> bytes:
        return self.encode_str(data).encode("ascii")

    def decode(self, payload: bytes) -> bytes:
        try:
            text = payload.decode("ascii")
        except UnicodeDecodeError as err:
            raise InvalidPayloadError(f"{self.name} payload must be ASCII", reason=str(err)) from err
        return self.decode_str(text)


def validate_case(case: str) -> Case:
    if case not in _CASES:
        raise ValueError(f"case must be one of {_CASES} (got {case!r})")
    return case  # type: ignore[return-value]


def check_case(text: str, case: Case, name: str) -> None:
    """Reject text written in the opposite case of a case-bound codec."""
    if case == "lower" and text != text.lower():
        raise InvalidPayloadError(f"{name} payload must be lowercase")
    if case == "upper" and text != text.upper():
        raise InvalidPayloadError(f"{name} payload must be uppercase")


def ensure_bytes(data: object, field: str = "data") -> bytes:
    """Return ``data`` as ``bytes``; only bytes-like input is accepted."""
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"{field} must be bytes-like (got {type(data).__name__})")
