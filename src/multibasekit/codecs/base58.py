# multibasekit/codecs/base58.py

from typing import ClassVar, Literal

import base58 as _base58

from ..exceptions import InvalidPayloadError
from .base import TextCodec

Alphabet = Literal["btc", "flickr"]

ALPHABETS: dict[str, bytes] = {
    "btc": _base58.BITCOIN_ALPHABET,
    "flickr": b"123456789abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ",
}


class Base58Codec(TextCodec):
    """Base58 over the Bitcoin or Flickr alphabet; leading zero bytes map to the alphabet's first symbol."""

    name: ClassVar[str] = "base58"

    def __init__(self, *, alphabet: Alphabet = "btc") -> None:
        if alphabet not in ALPHABETS:
            raise ValueError(f"alphabet must be one of {tuple(ALPHABETS)} (got {alphabet!r})")
        self.alphabet = alphabet
        self._symbols = ALPHABETS[alphabet]
        self._allowed = frozenset(self._symbols.decode("ascii"))

    def encode_str(self, data: bytes) -> str:
        return _base58.b58encode(data, alphabet=self._symbols).decode("ascii")

    def decode_str(self, text: str) -> bytes:
        # b58decode tolerates surrounding whitespace; payloads must be exact
        for char in text:
            if char not in self._allowed:
                raise InvalidPayloadError(f"invalid base58 character {char!r} for {self.alphabet} alphabet")
        try:
            return _base58.b58decode(text, alphabet=self._symbols)
        except ValueError as err:
            raise InvalidPayloadError(f"invalid {self.name} payload", reason=str(err)) from err

    def __repr__(self) -> str:  # pragma: no cover
        return f"Base58Codec(alphabet={self.alphabet!r})"
