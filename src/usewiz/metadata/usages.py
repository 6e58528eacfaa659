# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Aggregation of the root module's extension usages."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from usewiz.core.type_aliases import RepoName
from usewiz.core.types import ModuleExtensionUsage, ModuleKey


@dataclass(slots=True, frozen=True)
class RootImports:
    """Repositories the root module actually imports from one extension."""

    usages: tuple[ModuleExtensionUsage, ...]
    actual_imports: frozenset[RepoName]
    actual_dev_imports: frozenset[RepoName]

    @property
    def first_usage(self) -> ModuleExtensionUsage:
        return self.usages[0]


def aggregate_root_usages(
    usages: Iterable[ModuleExtensionUsage],
    root: ModuleKey = ModuleKey.ROOT,
) -> RootImports | None:
    """Collect the imports of every usage owned by ``root``.

    A repository imported as dev-only by any root usage counts as a dev import
    only, even if another root usage imports it as a regular dependency.

    Returns:
        The aggregated imports, or ``None`` when the root module does not use
        the extension at all.
    """
    root_usages = tuple(usage for usage in usages if usage.module == root)
    if not root_usages:
        return None
    actual_dev_imports = frozenset(repo for usage in root_usages for repo in usage.dev_imports)
    actual_imports = frozenset(
        repo for usage in root_usages for repo in usage.imports if repo not in actual_dev_imports
    )
    return RootImports(
        usages=root_usages,
        actual_imports=actual_imports,
        actual_dev_imports=actual_dev_imports,
    )


__all__ = ["RootImports", "aggregate_root_usages"]
