"""
Two-level bucket storage.

A sparse outer mapping keyed by letter owns a dense array of 26 ordered
sequences. Outer entries are created lazily and never removed, even once all
of their sequences are empty.
"""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from itemstore.data.items import Item

from .identifiers import ALPHABET_SIZE, BucketAddress

Bucket = deque


class BucketStore:
    """Storage backing :class:`~itemstore.storage.container.ItemContainer`."""

    def __init__(self) -> None:
        self._outer: dict[str, list[Bucket]] = {}

    def bucket(self, address: BucketAddress, *, create: bool = False) -> Optional[Bucket]:
        """
        Return the inner sequence at ``address``.

        When the outer entry is missing, ``None`` is returned unless ``create``
        is set, in which case the entry is allocated with all 26 sequences.
        """
        inner = self._outer.get(address.outer_key)
        if inner is None:
            if not create:
                return None
            inner = [deque() for _ in range(ALPHABET_SIZE)]
            self._outer[address.outer_key] = inner
        return inner[address.inner_index]

    def has_outer(self, outer_key: str) -> bool:
        return outer_key in self._outer

    def outer_keys(self) -> list[str]:
        return sorted(self._outer)

    def is_outer_empty(self, outer_key: str) -> bool:
        inner = self._outer.get(outer_key)
        if inner is None:
            return True
        return all(not sequence for sequence in inner)

    def count(self) -> int:
        return sum(
            len(sequence) for inner in self._outer.values() for sequence in inner
        )

    def iter_items(self) -> Iterator[Item]:
        """
        Yield items by ascending outer key, inner index 0-25, then storage order.

        Each inner sequence is copied before it is walked, so removing items
        while iterating is allowed.
        """
        for outer_key in self.outer_keys():
            for sequence in self._outer[outer_key]:
                yield from list(sequence)
