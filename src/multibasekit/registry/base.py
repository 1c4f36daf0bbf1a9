# multibasekit/registry/base.py


import logging
from threading import RLock
from types import MappingProxyType
from typing import Iterable

from .descriptors import CodecDescriptor
from ..exceptions import (
    RegistryCollisionError,
    RegistryDuplicateError,
    RegistryFrozenError,
    UnsupportedEncodingError,
    UnsupportedPrefixError,
)

logger = logging.getLogger(__name__)


class CodecRegistry:
    """Multibase descriptor table with lookups by encoding id, prefix byte and family.

    The registry is populated from a descriptor list and frozen at the end of
    construction. Once frozen it is never mutated, so lookups take no lock and
    may run from any thread.
    """

    def __init__(self, descriptors: Iterable[CodecDescriptor] = (), *, freeze: bool = True) -> None:
        self._lock = RLock()
        self._by_id: dict[str, CodecDescriptor] = {}
        self._by_prefix: dict[bytes, CodecDescriptor] = {}
        self._families: dict[str, list[str]] = {}
        self._frozen = False

        for descriptor in descriptors:
            self.register(descriptor)
        if freeze:
            self.freeze()

    # --- registration ---

    def register(self, descriptor: CodecDescriptor) -> None:
        """
        Add a descriptor to the table.

        :param descriptor: The descriptor to add.
        :raises RegistryFrozenError: if the registry has been frozen.
        :raises RegistryDuplicateError: if the encoding id is already taken.
        :raises RegistryCollisionError: if another descriptor owns the prefix byte.
        """
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError("Registry is frozen")
            if descriptor.encoding_id in self._by_id:
                raise RegistryDuplicateError(f"Encoding already registered: {descriptor.encoding_id}")
            owner = self._by_prefix.get(descriptor.prefix)
            if owner is not None:
                raise RegistryCollisionError(
                    f"Prefix {descriptor.prefix!r} for {descriptor.encoding_id} "
                    f"already registered to {owner.encoding_id}"
                )
            self._by_id[descriptor.encoding_id] = descriptor
            self._by_prefix[descriptor.prefix] = descriptor
            self._families.setdefault(descriptor.family_id, []).append(descriptor.encoding_id)

    def freeze(self) -> None:
        """
        Mark the registry as frozen (no further mutations).
        """
        with self._lock:
            if self._frozen:
                return
            self._by_id = MappingProxyType(self._by_id)  # type: ignore[assignment]
            self._by_prefix = MappingProxyType(self._by_prefix)  # type: ignore[assignment]
            self._families = MappingProxyType(  # type: ignore[assignment]
                {family: tuple(ids) for family, ids in self._families.items()}
            )
            self._frozen = True
        logger.debug(
            "codec registry frozen: %d encodings in %d families",
            len(self._by_id),
            len(self._families),
        )

    @property
    def frozen(self) -> bool:
        return self._frozen

    # --- retrieval ---

    def lookup_by_id(self, encoding_id: str) -> CodecDescriptor:
        """
        Return the descriptor for ``encoding_id``.

        :raises UnsupportedEncodingError: if no descriptor has that id.
        """
        try:
            return self._by_id[encoding_id]
        except (KeyError, TypeError) as err:
            raise UnsupportedEncodingError(encoding_id) from err

    def lookup_by_prefix(self, prefix: bytes | int) -> CodecDescriptor:
        """
        Return the descriptor owning ``prefix`` (a one-byte ``bytes`` or an int byte value).

        :raises UnsupportedPrefixError: if no descriptor owns that byte.
        """
        if isinstance(prefix, int):
            prefix = bytes((prefix,)) if 0 <= prefix <= 0xFF else b""
        try:
            return self._by_prefix[prefix]
        except (KeyError, TypeError) as err:
            raise UnsupportedPrefixError(prefix) from err

    def try_get(self, encoding_id: str) -> CodecDescriptor | None:
        """Like :meth:`lookup_by_id` but returns None when the encoding id is unknown."""
        try:
            return self.lookup_by_id(encoding_id)
        except UnsupportedEncodingError:
            return None

    # --- families ---

    def ids_in_family(self, family_id: str) -> tuple[str, ...]:
        """
        Encoding ids of ``family_id`` in declaration order.

        :raises UnsupportedEncodingError: if the family is unknown.
        """
        try:
            return tuple(self._families[family_id])
        except (KeyError, TypeError) as err:
            raise UnsupportedEncodingError(family_id, kind="encoding family id") from err

    def family_of(self, encoding_id: str) -> str:
        return self.lookup_by_id(encoding_id).family_id

    # --- enumerate all entries ---

    def all_ids(self) -> tuple[str, ...]:
        """All encoding ids in declaration order."""
        return tuple(self._by_id)

    def all_families(self) -> frozenset[str]:
        return frozenset(self._families)

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, encoding_id: object) -> bool:
        try:
            return encoding_id in self._by_id
        except TypeError:
            return False
