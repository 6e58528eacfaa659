# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Public exception types re-exported from the internal package."""

from __future__ import annotations

from usewiz._internal.exceptions import UsewizError, UsewizTypeError, UsewizValidationError

__all__ = ["UsewizError", "UsewizTypeError", "UsewizValidationError"]
