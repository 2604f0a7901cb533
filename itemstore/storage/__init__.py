"""Bucketed storage core: identifier parsing, bucket store, and container facade."""

from .buckets import BucketStore  # noqa: F401
from .container import ItemContainer  # noqa: F401
from .errors import (  # noqa: F401
    DuplicateIdentifier,
    InvalidIdentifier,
    ItemStoreError,
    NotFound,
)
from .identifiers import BucketAddress, is_valid_identifier, parse_identifier  # noqa: F401
