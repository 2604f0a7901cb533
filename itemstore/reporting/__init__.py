"""Helpers that render container contents for display."""

from .listing import format_listing, write_listing  # noqa: F401
