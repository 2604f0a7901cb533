"""Item value type stored by the container."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional

NULL_IDENTIFIER_TEXT = "(null)"


@dataclass(frozen=True)
class Item:
    """
    Immutable record keyed by a two-word identifier.

    Parameters
    ----------
    identifier:
        Key string such as ``"Cafe Noir"``. ``None`` is tolerated so raw
        provider records can be represented, but such items are never accepted
        by the container.
    code:
        Unsigned integer payload, opaque to the container.
    timestamp:
        Free-form time string, opaque to the container.

    Equality and hashing only consider the identifier.
    """

    identifier: Optional[str]
    code: int = field(default=0, compare=False)
    timestamp: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if self.code < 0:
            raise ValueError(f"Item code must be unsigned, got {self.code}.")

    def __str__(self) -> str:
        if self.identifier is None:
            return NULL_IDENTIFIER_TEXT
        return self.identifier

    def copy(self) -> "Item":
        return replace(self)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Item":
        """Build an item from a raw provider record, ignoring any ``next`` link."""
        return cls(
            identifier=record.get("identifier"),
            code=int(record.get("code", 0)),
            timestamp=str(record.get("timestamp", "")),
        )
