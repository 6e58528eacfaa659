# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Shared helper utilities for the usewiz CLI."""

from __future__ import annotations

from .args import ArgumentRegistrar, SubparserRegistry, register_argument
from .io import echo

__all__ = ["ArgumentRegistrar", "SubparserRegistry", "echo", "register_argument"]
