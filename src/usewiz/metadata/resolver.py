# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Resolution of the declaration mode into expected direct dependency sets."""

from __future__ import annotations

from collections.abc import Set as AbstractSet
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .declaration import AllDev, AllRegular, DeclarationMode, Explicit
from .errors import DIRECT_DEPS_FIELD, DIRECT_DEV_DEPS_FIELD, UngeneratedRepoError

if TYPE_CHECKING:
    from usewiz.core.type_aliases import DeclarationField, RepoName


@dataclass(slots=True, frozen=True)
class RootDirectDeps:
    """Direct dependencies the root module is expected to import.

    ``None`` on a side means the extension has no opinion about it.
    """

    direct_deps: frozenset[RepoName] | None
    direct_dev_deps: frozenset[RepoName] | None


def _checked_subset(
    field: DeclarationField,
    declared: tuple[RepoName, ...] | None,
    all_repos: AbstractSet[RepoName],
) -> frozenset[RepoName] | None:
    if declared is None:
        return None
    invalid = [repo for repo in declared if repo not in all_repos]
    if invalid:
        raise UngeneratedRepoError(field, invalid)
    return frozenset(declared)


def resolve_root_direct_deps(mode: DeclarationMode, all_repos: AbstractSet[RepoName]) -> RootDirectDeps:
    """Compute the expected regular and dev direct dependencies.

    Args:
        mode: Declaration returned by the extension.
        all_repos: Every repository generated by the extension.

    Returns:
        The expected direct dependency sets.

    Raises:
        UngeneratedRepoError: If an explicit list names repositories that the
            extension did not generate. The dev list is checked first.
    """
    match mode:
        case Explicit(direct_deps=direct_deps, direct_dev_deps=direct_dev_deps):
            dev_deps = _checked_subset(DIRECT_DEV_DEPS_FIELD, direct_dev_deps, all_repos)
            deps = _checked_subset(DIRECT_DEPS_FIELD, direct_deps, all_repos)
            return RootDirectDeps(direct_deps=deps, direct_dev_deps=dev_deps)
        case AllRegular():
            return RootDirectDeps(direct_deps=frozenset(all_repos), direct_dev_deps=frozenset())
        case AllDev():
            return RootDirectDeps(direct_deps=frozenset(), direct_dev_deps=frozenset(all_repos))


__all__ = ["RootDirectDeps", "resolve_root_direct_deps"]
