"""Item value type and the providers that fabricate items."""

from .items import Item  # noqa: F401
from .provider import (  # noqa: F401
    CatalogItemProvider,
    DEFAULT_CATALOG,
    ItemProvider,
    ProviderUnavailable,
)
