# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Parsing of the root module direct dependency declaration.

An extension reports which of its generated repositories the root module
should import directly through two loosely typed values. This module turns
that pair into one of three explicit shapes:

* ``Explicit``: two name lists (or no opinion at all when both are ``None``);
* ``AllRegular``: every generated repo is a regular direct dependency;
* ``AllDev``: every generated repo is a dev direct dependency.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, cast

from usewiz.core.type_aliases import RepoName

from .errors import (
    DIRECT_DEPS_FIELD,
    DIRECT_DEV_DEPS_FIELD,
    AllReposConflictError,
    CrossListedRepoError,
    DeclarationShapeError,
    DeclarationTypeError,
    DuplicateRepoError,
    InvalidRepoNameError,
    PartialDeclarationError,
)
from .repo_names import InvalidUserRepoNameError, validate_user_repo_name

if TYPE_CHECKING:
    from usewiz.core.type_aliases import DeclarationField

ALL_REPOS: Final[str] = "all"


@dataclass(slots=True, frozen=True)
class Explicit:
    """Explicit lists of direct dependencies, in declaration order.

    Both lists are ``None`` when the extension expressed no preference.
    """

    direct_deps: tuple[RepoName, ...] | None = None
    direct_dev_deps: tuple[RepoName, ...] | None = None

    def __post_init__(self) -> None:
        if (self.direct_deps is None) != (self.direct_dev_deps is None):
            raise PartialDeclarationError

    @property
    def has_opinion(self) -> bool:
        return self.direct_deps is not None


@dataclass(slots=True, frozen=True)
class AllRegular:
    """Every generated repository is a regular direct dependency."""


@dataclass(slots=True, frozen=True)
class AllDev:
    """Every generated repository is a dev direct dependency."""


type DeclarationMode = Explicit | AllRegular | AllDev

NO_OPINION: Final[Explicit] = Explicit()


def _is_all(value: object) -> bool:
    return isinstance(value, str) and value == ALL_REPOS


def _is_empty_sequence(value: object) -> bool:
    return (
        isinstance(value, Sequence)
        and not isinstance(value, (str, bytes, bytearray))
        and len(cast("Sequence[object]", value)) == 0
    )


def _as_string_sequence(value: object, field: DeclarationField) -> list[str]:
    if not isinstance(value, Sequence) or isinstance(value, (bytes, bytearray)):
        raise DeclarationTypeError(field, f"got {type(value).__name__}, want sequence")
    items = list(cast("Sequence[object]", value))
    for index, item in enumerate(items):
        if not isinstance(item, str):
            raise DeclarationTypeError(
                field,
                f"at index {index}, got element of type {type(item).__name__}, want string",
            )
    return cast("list[str]", items)


def _checked_name(field: DeclarationField, name: str) -> RepoName:
    try:
        validate_user_repo_name(name)
    except InvalidUserRepoNameError as exc:
        raise InvalidRepoNameError(field, name, str(exc)) from exc
    return RepoName(name)


def _collect_direct_deps(raw: list[str]) -> tuple[RepoName, ...]:
    seen: dict[RepoName, None] = {}
    for name in raw:
        repo = _checked_name(DIRECT_DEPS_FIELD, name)
        if repo in seen:
            raise DuplicateRepoError(DIRECT_DEPS_FIELD, name)
        seen[repo] = None
    return tuple(seen)


def _collect_direct_dev_deps(raw: list[str], direct_deps: tuple[RepoName, ...]) -> tuple[RepoName, ...]:
    regular = set(direct_deps)
    seen: dict[RepoName, None] = {}
    for name in raw:
        repo = _checked_name(DIRECT_DEV_DEPS_FIELD, name)
        if repo in regular:
            raise CrossListedRepoError(name)
        if repo in seen:
            raise DuplicateRepoError(DIRECT_DEV_DEPS_FIELD, name)
        seen[repo] = None
    return tuple(seen)


def parse_declaration(direct_deps: object, direct_dev_deps: object) -> DeclarationMode:
    """Validate the raw declaration pair returned by an extension.

    Args:
        direct_deps: Raw ``root_module_direct_deps`` value: ``None``, ``"all"``
            or a sequence of repository names.
        direct_dev_deps: Raw ``root_module_direct_dev_deps`` value, same shapes.

    Returns:
        The normalised declaration mode.

    Raises:
        ExtensionMetadataError: If the pair is malformed. The concrete subclass
            names the rule that was violated.
    """
    if direct_deps is None and direct_dev_deps is None:
        return NO_OPINION

    if _is_all(direct_deps) and _is_empty_sequence(direct_dev_deps):
        return AllRegular()

    if _is_all(direct_dev_deps) and _is_empty_sequence(direct_deps):
        return AllDev()

    if _is_all(direct_deps) or _is_all(direct_dev_deps):
        raise AllReposConflictError

    if isinstance(direct_deps, str) or isinstance(direct_dev_deps, str):
        raise DeclarationShapeError

    if (direct_deps is None) != (direct_dev_deps is None):
        raise PartialDeclarationError

    raw_deps = _as_string_sequence(direct_deps, DIRECT_DEPS_FIELD)
    raw_dev_deps = _as_string_sequence(direct_dev_deps, DIRECT_DEV_DEPS_FIELD)

    deps = _collect_direct_deps(raw_deps)
    dev_deps = _collect_direct_dev_deps(raw_dev_deps, deps)
    return Explicit(direct_deps=deps, direct_dev_deps=dev_deps)


__all__ = [
    "ALL_REPOS",
    "NO_OPINION",
    "AllDev",
    "AllRegular",
    "DeclarationMode",
    "Explicit",
    "parse_declaration",
]
