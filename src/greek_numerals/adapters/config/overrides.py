"""Per-invocation configuration from ``--set SECTION.KEY=VALUE``.

A value is read as JSON when it parses (``42``, ``true``, ``[1, 2]``) and
kept as text otherwise, so ``--set greek_numerals.case=upper`` needs no
quoting. Overrides sit above every configuration layer, environment included.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """``greek_numerals.case=upper`` split into section, key path and value."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def coerce_value(raw: str) -> CoercedValue:
    """Decode ``raw`` as JSON, or hand it back unchanged.

    Examples:
        >>> coerce_value("false"), coerce_value("8192"), coerce_value("upper")
        (False, 8192, 'upper')
    """
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Parse one ``--set`` argument; only the first ``=`` separates the value.

    Raises:
        ValueError: On a missing ``=``, a key without a section, or an empty
            dotted component.

    Example:
        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192")
        ConfigOverride(section='lib_log_rich', key_path=('payload_limits', 'max_chars'), value=8192)
    """
    dotted, has_value, value = raw.partition("=")
    if not has_value:
        raise ValueError(f"--set {raw!r} must contain '=' (SECTION.KEY=VALUE)")
    section, *key_path = dotted.split(".")
    if not key_path:
        raise ValueError(f"--set {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"--set {raw!r}: section name is empty")
    if not all(key_path):
        raise ValueError(f"--set {raw!r}: key path has an empty component")
    return ConfigOverride(section, tuple(key_path), coerce_value(value))


def _merge_tree(overrides: Iterable[ConfigOverride]) -> dict[str, Any]:
    """Build the nested mapping for ``Config.with_overrides``; later assignments win."""
    tree: dict[str, Any] = {}
    for override in overrides:
        *parents, leaf = (override.section, *override.key_path)
        node = tree
        for name in parents:
            node = node.setdefault(name, {})
            if not isinstance(node, dict):
                raise ValueError(f"Cannot set {'.'.join(parents)}.{leaf}: {name!r} already holds a value")
        node[leaf] = override.value
    return tree


def apply_overrides(config: Config, raw_overrides: Iterable[str]) -> Config:
    """Return ``config`` with every ``--set`` argument deep-merged on top.

    ``config`` itself comes back when there is nothing to apply.

    Raises:
        ValueError: If any argument is malformed.

    Example:
        >>> base = Config({"greek_numerals": {"case": "lower", "format": "human"}}, {})
        >>> dict(apply_overrides(base, ["greek_numerals.case=upper"])["greek_numerals"])
        {'case': 'upper', 'format': 'human'}
    """
    overrides = [parse_override(raw) for raw in raw_overrides]
    if not overrides:
        return config
    return config.with_overrides(_merge_tree(overrides))


__all__ = ["CoercedValue", "ConfigOverride", "apply_overrides", "coerce_value", "parse_override"]
