"""
Scripted container session.

Fills a container from an item provider, applies the configured named inserts
and removals, and summarises the outcome. Failures of individual operations
are recorded and logged rather than aborting the session.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from loguru import logger

from itemstore.data import CatalogItemProvider, ItemProvider
from itemstore.reporting import format_listing
from itemstore.storage import ItemContainer, ItemStoreError
from itemstore.utils import get_by_dotted_path


@dataclass
class SessionReport:
    container: ItemContainer
    inserted: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    failures: list[tuple[str, str, str]] = field(default_factory=list)

    @property
    def count(self) -> int:
        return self.container.count()

    @property
    def listing(self) -> str:
        return format_listing(self.container)


def _identifier_list(config: Mapping[str, Any], dotted_key: str) -> Optional[list[str]]:
    """Read a list of identifiers, accepting a single string as a one-item list."""
    value = get_by_dotted_path(config, dotted_key)
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise ValueError(
            f"{dotted_key} must be a list of identifiers, got {type(value).__name__}."
        )
    return [str(identifier) for identifier in value]


def build_provider(config: Mapping[str, Any]) -> CatalogItemProvider:
    return CatalogItemProvider(
        _identifier_list(config, "provider.catalog"),
        seed=get_by_dotted_path(config, "provider.seed"),
    )


def _insert(
    report: SessionReport,
    provider: ItemProvider,
    identifier: Optional[str],
) -> None:
    label = identifier if identifier is not None else "<random>"
    try:
        item = provider.fetch_item(identifier)
        report.container.add(item)
    except ItemStoreError as exc:
        logger.warning("Insert of {} failed: {}", label, exc)
        report.failures.append(("insert", label, type(exc).__name__))
        return
    report.inserted.append(item.identifier)


def run_session(
    config: Mapping[str, Any],
    provider: Optional[ItemProvider] = None,
) -> SessionReport:
    """
    Run the configured session and return its report.

    Parameters
    ----------
    config:
        Mapping with a ``session`` section (``random_items``, ``insert``,
        ``remove``) and optionally a ``provider`` section.
    provider:
        Item source; built from ``config`` when omitted.
    """
    if provider is None:
        provider = build_provider(config)

    random_items = int(get_by_dotted_path(config, "session.random_items", 0) or 0)
    if random_items < 0:
        raise ValueError("session.random_items must not be negative.")
    named_inserts = _identifier_list(config, "session.insert") or []
    removals = _identifier_list(config, "session.remove") or []

    report = SessionReport(container=ItemContainer())

    logger.info("Inserting {} random items", random_items)
    for _ in range(random_items):
        _insert(report, provider, None)

    for identifier in named_inserts:
        _insert(report, provider, identifier)

    for identifier in removals:
        try:
            report.container.remove(identifier)
        except ItemStoreError as exc:
            logger.warning("Removal of '{}' failed: {}", identifier, exc)
            report.failures.append(("remove", identifier, type(exc).__name__))
            continue
        report.removed.append(identifier)

    logger.info(
        "Session finished | items={} inserted={} removed={} failures={}",
        report.count,
        len(report.inserted),
        len(report.removed),
        len(report.failures),
    )
    return report
