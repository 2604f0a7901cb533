"""Utility helpers shared across modules."""

from .config import (  # noqa: F401
    DEFAULT_CONFIG,
    apply_overrides,
    get_by_dotted_path,
    load_config,
    set_by_dotted_path,
)
from .logging import configure_logging  # noqa: F401
