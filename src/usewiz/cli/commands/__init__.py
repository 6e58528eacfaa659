# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Subcommand implementations for the usewiz CLI."""

from __future__ import annotations

from .check import execute_check, register_check_command

__all__ = ["execute_check", "register_check_command"]
