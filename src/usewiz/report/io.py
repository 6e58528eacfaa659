# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""I/O helpers for extension report files."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from usewiz._internal.exceptions import UsewizValidationError
from usewiz._internal.logging_utils import structured_extra
from usewiz.core.model_types import LogComponent

from .models import ReportModel

if TYPE_CHECKING:
    from pathlib import Path

logger: logging.Logger = logging.getLogger("usewiz.report")


class ReportError(UsewizValidationError):
    """Base class for unusable report files."""


class ReportReadError(ReportError):
    """Raised when a report file cannot be read or is not JSON."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidReportError(ReportError):
    """Raised when a report file fails schema validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Invalid extension report in {path}: {error}")


def load_report(path: Path) -> ReportModel:
    """Load and validate an extension report from disk."""

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ReportReadError(path, exc) from exc
    try:
        report = ReportModel.model_validate(payload)
    except ValidationError as exc:
        raise InvalidReportError(path, exc) from exc
    logger.debug(
        "Loaded report with %d extension(s)",
        len(report.extensions),
        extra=structured_extra(component=LogComponent.REPORT, path=path),
    )
    return report


__all__ = ["InvalidReportError", "ReportError", "ReportReadError", "load_report"]
