# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Extension metadata validation and root module import reconciliation."""

from __future__ import annotations

from .core import ExtensionMetadata, Reconciliation
from .declaration import ALL_REPOS, AllDev, AllRegular, DeclarationMode, Explicit, parse_declaration
from .diff import ReconciliationDiff, classify_imports
from .errors import (
    AllReposConflictError,
    CrossListedRepoError,
    DeclarationShapeError,
    DeclarationTypeError,
    DuplicateRepoError,
    ExtensionMetadataError,
    InvalidRepoNameError,
    PartialDeclarationError,
    UngeneratedRepoError,
)
from .fixup import FixupOptions, compose_fixup_event, compose_fixup_message, make_use_repo_command
from .resolver import RootDirectDeps, resolve_root_direct_deps
from .usages import RootImports, aggregate_root_usages

__all__ = [
    "ALL_REPOS",
    "AllDev",
    "AllRegular",
    "AllReposConflictError",
    "CrossListedRepoError",
    "DeclarationMode",
    "DeclarationShapeError",
    "DeclarationTypeError",
    "DuplicateRepoError",
    "Explicit",
    "ExtensionMetadata",
    "ExtensionMetadataError",
    "FixupOptions",
    "InvalidRepoNameError",
    "PartialDeclarationError",
    "Reconciliation",
    "ReconciliationDiff",
    "RootDirectDeps",
    "RootImports",
    "UngeneratedRepoError",
    "aggregate_root_usages",
    "classify_imports",
    "compose_fixup_event",
    "compose_fixup_message",
    "make_use_repo_command",
    "parse_declaration",
    "resolve_root_direct_deps",
]
