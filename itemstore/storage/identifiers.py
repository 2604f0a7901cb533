"""
Identifier parsing that maps ``"Word1 Word2"`` strings onto bucket coordinates.

The first letter of the first word selects the outer bucket and the first
letter of the second word selects one of its 26 inner sequences. Only ASCII
uppercase letters participate; nothing is trimmed or case folded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

FIRST_LETTER = "A"
LAST_LETTER = "Z"
ALPHABET_SIZE = ord(LAST_LETTER) - ord(FIRST_LETTER) + 1
WORD_SEPARATOR = " "


@dataclass(frozen=True)
class BucketAddress:
    """Outer key letter plus the 0-25 inner index derived from an identifier."""

    outer_key: str
    inner_index: int


def _is_bucket_letter(char: str) -> bool:
    return FIRST_LETTER <= char <= LAST_LETTER


def parse_identifier(identifier: Optional[str]) -> Optional[BucketAddress]:
    """
    Validate ``identifier`` and derive its bucket address.

    Returns ``None`` when the identifier is empty, does not start with an
    uppercase letter, has no space, or when the character after the first
    space is missing or not an uppercase letter. Any remaining characters are
    accepted as-is.
    """
    if not identifier:
        return None

    outer_key = identifier[0]
    if not _is_bucket_letter(outer_key):
        return None

    separator = identifier.find(WORD_SEPARATOR)
    if separator < 0 or separator + 1 >= len(identifier):
        return None

    second_initial = identifier[separator + 1]
    if not _is_bucket_letter(second_initial):
        return None

    return BucketAddress(
        outer_key=outer_key,
        inner_index=ord(second_initial) - ord(FIRST_LETTER),
    )


def is_valid_identifier(identifier: Optional[str]) -> bool:
    return parse_identifier(identifier) is not None
