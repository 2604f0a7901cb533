"""
Container facade composing identifier parsing with the bucket store.

Every keyed operation parses the identifier first and then scans only the
single inner sequence it addresses.
"""

from __future__ import annotations

from typing import Iterator, Optional

from loguru import logger

from itemstore.data.items import Item
from itemstore.reporting.listing import format_listing

from .buckets import Bucket, BucketStore
from .errors import DuplicateIdentifier, InvalidIdentifier, NotFound
from .identifiers import parse_identifier


def _find_index(sequence: Bucket, identifier: str) -> Optional[int]:
    for position, candidate in enumerate(sequence):
        if candidate.identifier == identifier:
            return position
    return None


class ItemContainer:
    """
    In-memory associative container of :class:`Item` values.

    Lookups of malformed or absent identifiers return ``None``; inserts and
    removals raise :class:`InvalidIdentifier`, :class:`DuplicateIdentifier`
    or :class:`NotFound` and leave the container unchanged on failure.
    """

    def __init__(self) -> None:
        self._store = BucketStore()

    def count(self) -> int:
        return self._store.count()

    def __len__(self) -> int:
        return self.count()

    def get(self, identifier: Optional[str]) -> Optional[Item]:
        address = parse_identifier(identifier)
        if address is None:
            return None
        sequence = self._store.bucket(address)
        if sequence is None:
            return None
        position = _find_index(sequence, identifier)
        if position is None:
            return None
        return sequence[position]

    def __contains__(self, identifier: object) -> bool:
        if not isinstance(identifier, str):
            return False
        return self.get(identifier) is not None

    def add(self, item: Item) -> None:
        """Store ``item`` at the front of its bucket."""
        identifier = item.identifier
        address = parse_identifier(identifier)
        if address is None:
            raise InvalidIdentifier(identifier)

        existing = self._store.bucket(address)
        if existing is not None and _find_index(existing, identifier) is not None:
            raise DuplicateIdentifier(identifier)

        if not self._store.has_outer(address.outer_key):
            logger.debug("Allocating outer bucket '{}'", address.outer_key)
        sequence = self._store.bucket(address, create=True)
        sequence.appendleft(item)
        logger.debug(
            "Inserted '{}' at bucket ({}, {})",
            identifier,
            address.outer_key,
            address.inner_index,
        )

    def __iadd__(self, item: Item) -> "ItemContainer":
        self.add(item)
        return self

    def remove(self, identifier: Optional[str]) -> None:
        """Remove the item stored under ``identifier``."""
        address = parse_identifier(identifier)
        if address is None:
            raise InvalidIdentifier(identifier)

        sequence = self._store.bucket(address)
        if sequence is None:
            raise NotFound(identifier)
        position = _find_index(sequence, identifier)
        if position is None:
            raise NotFound(identifier)

        del sequence[position]
        logger.debug("Removed '{}'", identifier)
        if not sequence and self._store.is_outer_empty(address.outer_key):
            logger.debug("Outer bucket '{}' is now empty", address.outer_key)

    def __isub__(self, identifier: str) -> "ItemContainer":
        self.remove(identifier)
        return self

    def enumerate_items(self) -> Iterator[Item]:
        """Iterate stored items; the container may be modified during iteration."""
        return self._store.iter_items()

    def __iter__(self) -> Iterator[Item]:
        return self.enumerate_items()

    def outer_keys(self) -> list[str]:
        return self._store.outer_keys()

    def __str__(self) -> str:
        return format_listing(self)
