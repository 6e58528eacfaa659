# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Typed aliases used across usewiz internals."""

from __future__ import annotations

from typing import Literal, NewType

RepoName = NewType("RepoName", str)
BzlFile = NewType("BzlFile", str)
ExtensionName = NewType("ExtensionName", str)

DeclarationField = Literal["root_module_direct_deps", "root_module_direct_dev_deps"]

__all__ = [
    "BzlFile",
    "DeclarationField",
    "ExtensionName",
    "RepoName",
]
