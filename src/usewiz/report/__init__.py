# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Extension report models and loaders."""

from __future__ import annotations

from .io import InvalidReportError, ReportError, ReportReadError, load_report
from .models import REPORT_SCHEMA_VERSION, ExtensionModel, LocationModel, ReportModel, UsageModel

__all__ = [
    "REPORT_SCHEMA_VERSION",
    "ExtensionModel",
    "InvalidReportError",
    "LocationModel",
    "ReportError",
    "ReportModel",
    "ReportReadError",
    "UsageModel",
    "load_report",
]
