# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Validation of repository names supplied by users."""

from __future__ import annotations

import re
from typing import Final

from usewiz._internal.exceptions import UsewizValidationError

_VALID_USER_PROVIDED_NAME: Final[re.Pattern[str]] = re.compile(r"[a-zA-Z][-.\w]*", re.ASCII)


class InvalidUserRepoNameError(UsewizValidationError):
    """Raised when a repository name does not follow the user-provided naming rules."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"invalid user-provided repo name '{sanitize_control_chars(name)}': valid names may "
            "contain only A-Z, a-z, 0-9, '-', '_', '.', and must start with a letter",
        )


def sanitize_control_chars(text: str) -> str:
    """Escape control characters so the name can be echoed safely."""
    return "".join(
        char if char.isprintable() or char == " " else char.encode("unicode_escape").decode("ascii")
        for char in text
    )


def is_valid_user_repo_name(name: str) -> bool:
    return _VALID_USER_PROVIDED_NAME.fullmatch(name) is not None


def validate_user_repo_name(name: str) -> None:
    """Raise ``InvalidUserRepoNameError`` unless ``name`` is a legal repo name."""
    if not is_valid_user_repo_name(name):
        raise InvalidUserRepoNameError(name)


__all__ = [
    "InvalidUserRepoNameError",
    "is_valid_user_repo_name",
    "sanitize_control_chars",
    "validate_user_repo_name",
]
