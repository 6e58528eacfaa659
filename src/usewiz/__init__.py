# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""usewiz - use_repo import reconciliation for module extensions.

Validates the direct dependency metadata a module extension reports, compares
it with the repositories the root module imports through ``use_repo`` and
suggests buildozer commands that bring the two back in line.
"""

from __future__ import annotations

from usewiz._internal.exceptions import (
    UsewizError,
    UsewizTypeError,
    UsewizValidationError,
)

from .config import Config, load_config
from .core.types import ModuleExtensionUsage, ModuleKey
from .events import Event, EventHandler, Location, LoggingEventHandler, StoredEventHandler
from .metadata import (
    AllDev,
    AllRegular,
    DeclarationMode,
    Explicit,
    ExtensionMetadata,
    ExtensionMetadataError,
    FixupOptions,
    ReconciliationDiff,
    parse_declaration,
)
from .report import load_report
from .services import CheckResult, check_report

__all__ = [
    "AllDev",
    "AllRegular",
    "CheckResult",
    "Config",
    "DeclarationMode",
    "Event",
    "EventHandler",
    "Explicit",
    "ExtensionMetadata",
    "ExtensionMetadataError",
    "FixupOptions",
    "Location",
    "LoggingEventHandler",
    "ModuleExtensionUsage",
    "ModuleKey",
    "ReconciliationDiff",
    "StoredEventHandler",
    "UsewizError",
    "UsewizTypeError",
    "UsewizValidationError",
    "__version__",
    "check_report",
    "load_config",
    "load_report",
    "parse_declaration",
]

__version__ = "0.1.0"
