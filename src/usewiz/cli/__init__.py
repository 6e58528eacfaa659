# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Command-line interface for usewiz."""

from __future__ import annotations

from .app import main

__all__ = ["main"]
