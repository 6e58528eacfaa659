# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Service layer orchestrating report checks."""

from __future__ import annotations

from .check import CheckResult, ExtensionOutcome, check_extension, check_report

__all__ = ["CheckResult", "ExtensionOutcome", "check_extension", "check_report"]
