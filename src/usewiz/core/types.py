# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Core data classes describing modules and their extension usages.

A usage is one module's ``use_extension`` call together with the repositories
it pulls in through ``use_repo``. Usages are produced upstream by the manifest
parser and are treated as read-only snapshots here.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Final

from usewiz._internal.exceptions import UsewizValidationError

if TYPE_CHECKING:
    from usewiz.events import Location

    from .type_aliases import BzlFile, ExtensionName, RepoName

ROOT_DISPLAY_NAME: Final[str] = "<root>"
_EMPTY_VERSION_MARKER: Final[str] = "_"


@dataclass(slots=True, frozen=True, order=True)
class ModuleKey:
    """Identity of a module in the dependency graph.

    Attributes:
        name: Module name as declared in its manifest. Empty for the root module.
        version: Selected module version. Empty for the root module and for
            modules overridden without a version.
    """

    ROOT: ClassVar[ModuleKey]

    name: str
    version: str = ""

    @property
    def is_root(self) -> bool:
        return self == ModuleKey.ROOT

    @classmethod
    def from_str(cls, raw: str) -> ModuleKey:
        """Parse ``<root>``, ``name`` or ``name@version`` into a key."""
        token = raw.strip()
        if token in {ROOT_DISPLAY_NAME, ""}:
            return cls.ROOT
        name, _, version = token.partition("@")
        if not name:
            raise UsewizValidationError(f"Invalid module key '{raw}'")
        if version == _EMPTY_VERSION_MARKER:
            version = ""
        return cls(name=name, version=version)

    def __str__(self) -> str:
        if self.is_root:
            return ROOT_DISPLAY_NAME
        return f"{self.name}@{self.version or _EMPTY_VERSION_MARKER}"


ModuleKey.ROOT = ModuleKey(name="", version="")


def _empty_dev_imports() -> frozenset[RepoName]:
    return frozenset()


@dataclass(slots=True, frozen=True)
class ModuleExtensionUsage:
    """One module's recorded use of a module extension.

    Attributes:
        module: Key of the module whose manifest contains the usage.
        extension_bzl_file: Label of the file defining the extension, as written
            by the using module.
        extension_name: Exported name of the extension in that file.
        location: Manifest location of the ``use_extension`` call.
        imports: Repositories imported via ``use_repo``, mapped from the name
            the extension generated to the local alias.
        dev_imports: Subset of ``imports`` brought in through a dev-only usage.
    """

    module: ModuleKey
    extension_bzl_file: BzlFile
    extension_name: ExtensionName
    location: Location
    imports: Mapping[RepoName, str]
    dev_imports: frozenset[RepoName] = field(default_factory=_empty_dev_imports)

    def __post_init__(self) -> None:
        """Check that every dev import is also an import."""
        stray = sorted(self.dev_imports.difference(self.imports))
        if stray:
            joined = ", ".join(stray)
            raise UsewizValidationError(
                f"dev imports of {self.module} must also be imports; missing: {joined}",
            )


__all__ = ["ROOT_DISPLAY_NAME", "ModuleExtensionUsage", "ModuleKey"]
