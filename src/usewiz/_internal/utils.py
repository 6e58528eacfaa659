# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Small shared helpers used across usewiz layers."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from typing import Final, Literal, cast

type JSONValue = str | int | float | bool | None | dict[str, "JSONValue"] | list["JSONValue"]
type RootMarker = Literal["usewiz.toml", ".usewiz.toml", "pyproject.toml"]

ROOT_MARKERS: Final[tuple[RootMarker, RootMarker, RootMarker]] = (
    "usewiz.toml",
    ".usewiz.toml",
    "pyproject.toml",
)


def consume(value: object | None) -> None:
    """Explicitly mark a value as intentionally unused."""

    _ = value


def sorted_unique(values: Iterable[str]) -> tuple[str, ...]:
    """Return the distinct values in lexicographic order."""

    return tuple(sorted(set(values)))


def normalise_enums_for_json(value: object) -> JSONValue:
    """Recursively convert Enum keys/values to their string payloads for JSON serialisation."""

    def _convert(obj: object) -> JSONValue:
        if isinstance(obj, Enum):
            return cast(JSONValue, obj.value)
        if isinstance(obj, dict):
            mapping_obj = cast(dict[object, object], obj)
            result: dict[str, JSONValue] = {}
            for key, raw_val in mapping_obj.items():
                if isinstance(key, Enum):
                    norm_key: str = str(key.value)
                elif isinstance(key, str):
                    norm_key = key
                else:
                    norm_key = str(key)
                result[norm_key] = _convert(raw_val)
            return cast(JSONValue, result)
        if isinstance(obj, (list, tuple, frozenset, set)):
            items = cast("Iterable[object]", obj)
            converted = [_convert(item) for item in items]
            if isinstance(obj, (frozenset, set)):
                converted.sort(key=str)
            return cast(JSONValue, converted)
        if isinstance(obj, Path):
            return obj.as_posix()
        if isinstance(obj, (str, int, float, bool)) or obj is None:
            return cast(JSONValue, obj)
        return cast(JSONValue, str(obj))

    return _convert(value)


def resolve_project_root(start: Path | None = None) -> Path:
    """Return the nearest directory (from ``start`` upwards) holding a root marker."""

    base = (start or Path.cwd()).resolve()
    for candidate in (base, *base.parents):
        for marker in ROOT_MARKERS:
            if (candidate / marker).exists():
                return candidate
    return base


__all__ = [
    "ROOT_MARKERS",
    "JSONValue",
    "RootMarker",
    "consume",
    "normalise_enums_for_json",
    "resolve_project_root",
    "sorted_unique",
]
