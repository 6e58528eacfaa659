# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Public runtime helpers for usewiz layers above `_internal`."""

from __future__ import annotations

from usewiz._internal.utils import (
    ROOT_MARKERS,
    JSONValue,
    RootMarker,
    consume,
    normalise_enums_for_json,
    resolve_project_root,
    sorted_unique,
)

__all__ = [
    "ROOT_MARKERS",
    "JSONValue",
    "RootMarker",
    "consume",
    "normalise_enums_for_json",
    "resolve_project_root",
    "sorted_unique",
]
