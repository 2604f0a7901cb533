"""Plain-text rendering of container contents."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, TextIO

if TYPE_CHECKING:
    from itemstore.data.items import Item


def format_listing(items: Iterable[Item]) -> str:
    """
    Render one line per item, in the order given.

    Each line holds the item identifier, or ``(null)`` when the identifier is
    missing, and is newline-terminated.
    """
    return "".join(f"{item}\n" for item in items)


def write_listing(items: Iterable[Item], stream: TextIO) -> int:
    """Write the listing to ``stream`` and return the number of lines written."""
    lines = 0
    for item in items:
        stream.write(f"{item}\n")
        lines += 1
    return lines
