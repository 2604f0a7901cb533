"""Configuration loading and dotted-path override helpers."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Iterable, Mapping, MutableMapping, Sequence

import yaml

DEFAULT_CONFIG: Mapping[str, Any] = {
    "logging": {"level": "INFO"},
    "provider": {"seed": None, "catalog": None},
    "session": {"random_items": 10, "insert": [], "remove": []},
}


def _merge(base: MutableMapping[str, Any], updates: Mapping[str, Any]) -> None:
    for key, value in updates.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), MutableMapping):
            _merge(base[key], value)
        else:
            base[key] = copy.deepcopy(value)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """
    Parse a YAML configuration file and layer it over :data:`DEFAULT_CONFIG`.

    Passing ``None`` returns a copy of the defaults.
    """
    config = copy.deepcopy(dict(DEFAULT_CONFIG))
    if config_path is None:
        return config

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, Mapping):
        raise ValueError(f"Configuration root must be a mapping: {config_path}")

    _merge(config, loaded)
    return config


def set_by_dotted_path(
    config: MutableMapping[str, Any],
    dotted_key: str,
    value: Any,
) -> None:
    """
    Assign a value inside a nested mapping using dotted-path syntax.

    Examples
    --------
    >>> cfg = {"session": {"random_items": 10}}
    >>> set_by_dotted_path(cfg, "session.random_items", 3)
    >>> cfg["session"]["random_items"]
    3
    """
    keys: Sequence[str] = dotted_key.split(".")
    current: MutableMapping[str, Any] = config
    for key in keys[:-1]:
        if key not in current or not isinstance(current[key], MutableMapping):
            current[key] = {}
        current = current[key]  # type: ignore[assignment]
    current[keys[-1]] = value


def get_by_dotted_path(config: Mapping[str, Any], dotted_key: str, default: Any = None) -> Any:
    """Fetch a value from a nested mapping using dotted-path syntax."""
    current: Any = config
    for key in dotted_key.split("."):
        if not isinstance(current, Mapping) or key not in current:
            return default
        current = current[key]
    return current


def apply_overrides(config: MutableMapping[str, Any], overrides: Iterable[str]) -> None:
    """Apply ``key.path=value`` overrides, parsing each value as YAML."""
    for override in overrides:
        dotted_key, sep, raw_value = override.partition("=")
        if not sep or not dotted_key:
            raise ValueError(f"Override must look like 'key.path=value', got '{override}'")
        set_by_dotted_path(config, dotted_key.strip(), yaml.safe_load(raw_value))
