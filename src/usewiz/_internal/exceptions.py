# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Common exception hierarchy for usewiz."""

from __future__ import annotations

__all__ = ["UsewizError", "UsewizTypeError", "UsewizValidationError"]


class UsewizError(Exception):
    """Base error for all usewiz exceptions."""


class UsewizValidationError(UsewizError, ValueError):
    """Raised when input data fails validation checks."""


class UsewizTypeError(UsewizError, TypeError):
    """Raised when input data has an unexpected type."""
