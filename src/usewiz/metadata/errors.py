# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Errors raised while validating extension metadata declarations.

Each error aborts evaluation of the extension that returned the metadata.
Reconciliation findings are never raised; they are reported as events.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Final

from usewiz._internal.exceptions import UsewizTypeError, UsewizValidationError

if TYPE_CHECKING:
    from usewiz.core.type_aliases import DeclarationField

DIRECT_DEPS_FIELD: Final[DeclarationField] = "root_module_direct_deps"
DIRECT_DEV_DEPS_FIELD: Final[DeclarationField] = "root_module_direct_dev_deps"


class ExtensionMetadataError(UsewizValidationError):
    """Base class for invalid ``extension_metadata`` declarations."""


class AllReposConflictError(ExtensionMetadataError):
    """Raised when ``"all"`` is combined with anything but an empty list."""

    def __init__(self) -> None:
        super().__init__(
            f'if one of {DIRECT_DEPS_FIELD} and {DIRECT_DEV_DEPS_FIELD} is "all", '
            "the other must be an empty list",
        )


class DeclarationShapeError(ExtensionMetadataError):
    """Raised when a declaration is a string other than ``"all"``."""

    def __init__(self) -> None:
        super().__init__(
            f'{DIRECT_DEPS_FIELD} and {DIRECT_DEV_DEPS_FIELD} must be None, "all", or a list of strings',
        )


class PartialDeclarationError(ExtensionMetadataError):
    """Raised when only one of the two declarations is given."""

    def __init__(self) -> None:
        super().__init__(
            f"{DIRECT_DEPS_FIELD} and {DIRECT_DEV_DEPS_FIELD} must both be specified or both be unspecified",
        )


class DeclarationTypeError(ExtensionMetadataError, UsewizTypeError):
    """Raised when a declaration is not a sequence of strings."""

    def __init__(self, field: DeclarationField, detail: str) -> None:
        self.field = field
        super().__init__(f"for {field}, {detail}")


class InvalidRepoNameError(ExtensionMetadataError):
    """Raised when a declared name is not a legal user-provided repo name."""

    def __init__(self, field: DeclarationField, repo: str, reason: str) -> None:
        self.field = field
        self.repo = repo
        super().__init__(f"in {field}: {reason}")


class DuplicateRepoError(ExtensionMetadataError):
    """Raised when a repo is listed twice in the same declaration."""

    def __init__(self, field: DeclarationField, repo: str) -> None:
        self.field = field
        self.repo = repo
        super().__init__(f"in {field}: duplicate entry '{repo}'")


class CrossListedRepoError(ExtensionMetadataError):
    """Raised when a repo is declared both as a regular and a dev dependency."""

    def __init__(self, repo: str) -> None:
        self.field: DeclarationField = DIRECT_DEV_DEPS_FIELD
        self.repo = repo
        super().__init__(f"in {DIRECT_DEV_DEPS_FIELD}: entry '{repo}' is also in {DIRECT_DEPS_FIELD}")


class UngeneratedRepoError(ExtensionMetadataError):
    """Raised when declared direct dependencies were not generated by the extension."""

    def __init__(self, field: DeclarationField, repos: Sequence[str]) -> None:
        self.field = field
        self.repos = tuple(repos)
        joined = ", ".join(self.repos)
        super().__init__(
            f"{field} contained the following repositories not generated by the extension: {joined}",
        )


__all__ = [
    "DIRECT_DEPS_FIELD",
    "DIRECT_DEV_DEPS_FIELD",
    "AllReposConflictError",
    "CrossListedRepoError",
    "DeclarationShapeError",
    "DeclarationTypeError",
    "DuplicateRepoError",
    "ExtensionMetadataError",
    "InvalidRepoNameError",
    "PartialDeclarationError",
    "UngeneratedRepoError",
]
