# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Pydantic models describing extension report files.

A report captures, per module extension, what the extension execution engine
and the manifest parser know after resolution: the repositories generated,
the raw direct dependency declaration returned by the extension, and every
module's usage of the extension.
"""

from __future__ import annotations

from typing import Any, ClassVar, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from usewiz.core.type_aliases import BzlFile, ExtensionName, RepoName
from usewiz.core.types import ModuleExtensionUsage, ModuleKey
from usewiz.events import Location

type ReportSchemaVersion = Literal[1]

REPORT_SCHEMA_VERSION: Final[ReportSchemaVersion] = 1


class LocationModel(BaseModel):
    """Manifest position of a ``use_extension`` call."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    file: str
    line: int = Field(default=0, ge=0)
    column: int = Field(default=0, ge=0)

    def to_location(self) -> Location:
        return Location(file=self.file, line=self.line, column=self.column)


class UsageModel(BaseModel):
    """One module's usage of the enclosing extension."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid", populate_by_name=True)

    module: str
    bzl_file: str | None = Field(default=None, alias="bzlFile")
    name: str | None = None
    location: LocationModel
    imports: dict[str, str] = Field(default_factory=dict)
    dev_imports: list[str] = Field(default_factory=list, alias="devImports")

    @field_validator("module")
    @classmethod
    def _check_module(cls, value: str) -> str:
        _ = ModuleKey.from_str(value)
        return value

    @model_validator(mode="after")
    def _check_dev_imports(self) -> UsageModel:
        stray = sorted(set(self.dev_imports).difference(self.imports))
        if stray:
            msg = f"devImports must be a subset of imports; not imported: {', '.join(stray)}"
            raise ValueError(msg)
        return self

    def to_usage(self, *, bzl_file: str, name: str) -> ModuleExtensionUsage:
        return ModuleExtensionUsage(
            module=ModuleKey.from_str(self.module),
            extension_bzl_file=BzlFile(self.bzl_file or bzl_file),
            extension_name=ExtensionName(self.name or name),
            location=self.location.to_location(),
            imports={RepoName(repo): alias for repo, alias in self.imports.items()},
            dev_imports=frozenset(RepoName(repo) for repo in self.dev_imports),
        )


class ExtensionModel(BaseModel):
    """Outcome of evaluating one module extension."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid", populate_by_name=True)

    bzl_file: str = Field(alias="bzlFile")
    name: str
    generated_repos: list[str] = Field(default_factory=list, alias="generatedRepos")
    # Kept raw: the declaration is re-validated by ``ExtensionMetadata.create``.
    root_module_direct_deps: Any = Field(default=None, alias="rootModuleDirectDeps")
    root_module_direct_dev_deps: Any = Field(default=None, alias="rootModuleDirectDevDeps")
    usages: list[UsageModel] = Field(default_factory=list)

    @field_validator("generated_repos")
    @classmethod
    def _check_unique(cls, value: list[str]) -> list[str]:
        seen: set[str] = set()
        for repo in value:
            if repo in seen:
                msg = f"generatedRepos contains duplicate entry '{repo}'"
                raise ValueError(msg)
            seen.add(repo)
        return value

    @property
    def label(self) -> str:
        return f"{self.bzl_file}%{self.name}"

    def all_repos(self) -> frozenset[RepoName]:
        return frozenset(RepoName(repo) for repo in self.generated_repos)

    def to_usages(self) -> list[ModuleExtensionUsage]:
        return [usage.to_usage(bzl_file=self.bzl_file, name=self.name) for usage in self.usages]


class ReportModel(BaseModel):
    """Root of an extension report file."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid", populate_by_name=True)

    schema_version: ReportSchemaVersion = Field(default=REPORT_SCHEMA_VERSION, alias="schemaVersion")
    extensions: list[ExtensionModel] = Field(default_factory=list)


__all__ = [
    "REPORT_SCHEMA_VERSION",
    "ExtensionModel",
    "LocationModel",
    "ReportModel",
    "UsageModel",
]
