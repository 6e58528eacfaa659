# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Core types shared by the usewiz reconciliation engine."""

from __future__ import annotations

from .model_types import EventKind, FailOnPolicy, LogComponent, LogFormat, OutputFormat, UseRepoCommand
from .type_aliases import BzlFile, ExtensionName, RepoName
from .types import ModuleExtensionUsage, ModuleKey

__all__ = [
    "BzlFile",
    "EventKind",
    "ExtensionName",
    "FailOnPolicy",
    "LogComponent",
    "LogFormat",
    "ModuleExtensionUsage",
    "ModuleKey",
    "OutputFormat",
    "RepoName",
    "UseRepoCommand",
]
