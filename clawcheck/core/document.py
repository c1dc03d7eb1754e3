"""Read-only view over a loosely typed configuration mapping.

Values come straight from JSON or YAML, so any key may be missing or hold an
unexpected type. Accessors here return defaults instead of raising.
"""
from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

_TRUE_STRINGS = {"true", "1", "yes", "on", "enabled"}
_FALSE_STRINGS = {"false", "0", "no", "off", "disabled", ""}


class ConfigDocument(Mapping):
    """Immutable configuration snapshot shared by every rule in a run."""

    def __init__(self, data: Mapping | None = None, source: Path | None = None) -> None:
        self._data: Mapping[str, Any] = _freeze(dict(data or {}))
        self.source = source

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ConfigDocument({dict(self._data)!r}, source={self.source!r})"

    def lookup(self, dotted_key: str, default: Any = None) -> Any:
        """Traverse nested mappings using a dotted key path."""
        current: Any = self._data
        for k in dotted_key.split("."):
            if not isinstance(current, Mapping):
                return default
            current = current.get(k)
            if current is None:
                return default
        return current

    def first(self, *dotted_keys: str, default: Any = None) -> Any:
        """Return the first truthy value among the given keys."""
        for key in dotted_keys:
            value = self.lookup(key)
            if value:
                return value
        return default


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({str(k): _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def as_text(value: Any) -> str:
    """Coerce a scalar to a stripped, lower-cased string. Falsy values become ""."""
    if not value:
        return ""
    return str(value).strip().lower()


def as_list(value: Any) -> list:
    """Coerce to a list. Missing and falsy scalars ("", 0, False) become []."""
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, Mapping):
        return list(value.values())
    return [value]


def as_int(value: Any) -> int | None:
    """Coerce ints, floats and numeric strings, truncating decimals.

    Anything else (bools included) is None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
        try:
            return as_int(float(value))
        except ValueError:
            return None
    return None


def as_flag(value: Any) -> bool:
    """Coerce string booleans to actual bools; other values by truthiness."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return bool(value)
