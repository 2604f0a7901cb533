"""Exception hierarchy raised by the container and item providers."""

from __future__ import annotations


class ItemStoreError(Exception):
    """Base class for every failure surfaced by the item store."""


class InvalidIdentifier(ItemStoreError):
    """The identifier does not follow the ``"Word1 Word2"`` format."""

    def __init__(self, identifier: str | None) -> None:
        super().__init__(f"Invalid identifier: {identifier!r}")
        self.identifier = identifier


class DuplicateIdentifier(ItemStoreError):
    """An item with the same identifier is already stored."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Item '{identifier}' already exists")
        self.identifier = identifier


class NotFound(ItemStoreError):
    """A well-formed identifier has no stored item."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Item '{identifier}' not found")
        self.identifier = identifier
