from typing import Optional

import pytest

from itemstore.data import Item, ProviderUnavailable
from itemstore.pipelines import run_session
from itemstore.utils import apply_overrides, load_config, set_by_dotted_path


class ScriptedProvider:
    """Test double returning queued random items and known named ones."""

    def __init__(self, random_identifiers: list[str], known: set[str]) -> None:
        self._queue = list(random_identifiers)
        self._known = known

    def fetch_item(self, identifier: Optional[str] = None) -> Item:
        if identifier is None:
            if not self._queue:
                raise ProviderUnavailable("queue exhausted")
            return Item(self._queue.pop(0), code=1, timestamp="00:00:00")
        if identifier not in self._known:
            raise ProviderUnavailable(f"unknown {identifier}")
        return Item(identifier, code=2, timestamp="00:00:00")


def test_run_session_records_inserts_removals_and_failures():
    config = load_config()
    set_by_dotted_path(config, "session.random_items", 4)
    set_by_dotted_path(config, "session.insert", ["Cafe Noir", "Unknown Thing", "bad id"])
    set_by_dotted_path(config, "session.remove", ["Banana Apple", "Banana Apple", "nospace"])
    provider = ScriptedProvider(
        ["Banana Apple", "Avocado Zebra", "Banana Apple", "Avocado Apple"],
        known={"Cafe Noir", "bad id"},
    )

    report = run_session(config, provider)

    assert report.inserted == ["Banana Apple", "Avocado Zebra", "Avocado Apple", "Cafe Noir"]
    assert report.removed == ["Banana Apple"]
    assert report.failures == [
        ("insert", "<random>", "DuplicateIdentifier"),
        ("insert", "Unknown Thing", "ProviderUnavailable"),
        ("insert", "bad id", "InvalidIdentifier"),
        ("remove", "Banana Apple", "NotFound"),
        ("remove", "nospace", "InvalidIdentifier"),
    ]
    assert report.count == 3
    assert report.listing == "Avocado Apple\nAvocado Zebra\nCafe Noir\n"
    assert report.container.outer_keys() == ["A", "B", "C"]


def test_run_session_with_catalog_provider_is_reproducible():
    config = load_config()
    set_by_dotted_path(config, "provider.seed", 11)
    set_by_dotted_path(config, "session.random_items", 8)

    first = run_session(config)
    second = run_session(config)

    assert first.listing == second.listing
    assert first.count == len(first.inserted)
    assert first.count + sum(1 for op, _, _ in first.failures if op == "insert") == 8


def test_run_session_treats_single_string_override_as_one_identifier():
    config = load_config()
    apply_overrides(
        config,
        ["session.random_items=0", "session.insert=Cafe Noir", "session.remove=Sea Green"],
    )
    provider = ScriptedProvider([], known={"Cafe Noir"})

    report = run_session(config, provider)

    assert report.inserted == ["Cafe Noir"]
    assert report.failures == [("remove", "Sea Green", "NotFound")]
    assert report.count == 1


def test_run_session_catalog_override_accepts_single_identifier():
    config = load_config()
    apply_overrides(config, ["provider.catalog=Cafe Noir", "provider.seed=5", "session.random_items=2"])

    report = run_session(config)

    assert report.inserted == ["Cafe Noir"]
    assert report.failures == [("insert", "<random>", "DuplicateIdentifier")]


@pytest.mark.parametrize(
    "override",
    ["session.insert=3", "session.remove={Cafe: Noir}", "provider.catalog=true"],
)
def test_run_session_rejects_non_list_identifier_settings(override):
    config = load_config()
    apply_overrides(config, ["session.random_items=0", override])

    with pytest.raises(ValueError):
        run_session(config)
