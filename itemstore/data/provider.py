"""
Item providers that fabricate :class:`Item` values on demand.

The container never depends on a provider directly; drivers and tests inject
one, so any object implementing :class:`ItemProvider` can stand in.
"""

from __future__ import annotations

import random
from typing import Iterable, Optional, Protocol, Sequence

from loguru import logger

from itemstore.storage.errors import ItemStoreError

from .items import Item

DEFAULT_CATALOG: tuple[str, ...] = (
    "Absolute Zero",
    "Alice Blue",
    "Antique Brass",
    "Baby Blue",
    "Banana Mania",
    "Burnt Orange",
    "Cadet Blue",
    "Cafe Noir",
    "Cafe Au Lait",
    "Dark Coral",
    "Desert Sand",
    "Electric Lime",
    "Fern Green",
    "Forest Green",
    "Ghost White",
    "Hunter Green",
    "Indian Red",
    "Jazzberry Jam",
    "Khaki Web",
    "Lemon Chiffon",
    "Light Coral",
    "Mint Cream",
    "Navy Blue",
    "Old Lace",
    "Olive Drab",
    "Pale Violet",
    "Powder Blue",
    "Queen Blue",
    "Royal Purple",
    "Sandy Brown",
    "Sea Green",
    "Tiffany Blue",
    "Tea Rose",
    "Ultra Pink",
    "Vivid Tangerine",
    "Wild Strawberry",
    "Yellow Orange",
    "Zinnwaldite Brown",
)

MAX_CODE = 2**32 - 1
SECONDS_PER_DAY = 24 * 60 * 60


class ProviderUnavailable(ItemStoreError):
    """The provider has no such item or cannot respond."""


class ItemProvider(Protocol):
    """Anything able to fabricate items by identifier or at random."""

    def fetch_item(self, identifier: Optional[str] = None) -> Item:
        """
        Return the item named ``identifier``, or an arbitrary one when omitted.

        Raises :class:`ProviderUnavailable` when no such item exists or the
        provider cannot respond.
        """
        ...


class CatalogItemProvider:
    """
    Provider backed by a fixed catalog of identifiers.

    Parameters
    ----------
    catalog:
        Identifiers the provider knows about (default: colour names).
    seed:
        Seed for the internal random generator so sessions are reproducible.
    """

    def __init__(
        self,
        catalog: Iterable[str] | None = None,
        *,
        seed: Optional[int] = None,
    ) -> None:
        entries = tuple(catalog) if catalog is not None else DEFAULT_CATALOG
        self._catalog: Sequence[str] = entries
        self._known = frozenset(entries)
        self._rng = random.Random(seed)

    def __len__(self) -> int:
        return len(self._catalog)

    def fetch_item(self, identifier: Optional[str] = None) -> Item:
        if identifier is None:
            if not self._catalog:
                raise ProviderUnavailable("Provider catalog is empty.")
            identifier = self._rng.choice(self._catalog)
        elif identifier not in self._known:
            raise ProviderUnavailable(f"Provider has no item named '{identifier}'.")

        item = Item(
            identifier=identifier,
            code=self._rng.randint(0, MAX_CODE),
            timestamp=self._make_timestamp(),
        )
        logger.debug("Provider fabricated '{}' (code={})", item.identifier, item.code)
        return item

    def _make_timestamp(self) -> str:
        seconds = self._rng.randrange(SECONDS_PER_DAY)
        hours, remainder = divmod(seconds, 3600)
        minutes, seconds = divmod(remainder, 60)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
