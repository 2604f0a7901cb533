"""Drivers that exercise the container end to end."""

from .session import SessionReport, build_provider, run_session  # noqa: F401
