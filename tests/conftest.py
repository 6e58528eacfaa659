# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Pytest entry point that wires shared markers."""

from __future__ import annotations

import logging
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with the custom markers used by the test suite."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line(
        "markers",
        "integration: Integration tests (slower, multiple components)",
    )
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line("markers", "cli: CLI-related tests")
    config.addinivalue_line("markers", "metadata: Extension metadata tests")


@pytest.fixture(autouse=True)
def reset_usewiz_logging() -> Generator[None, None, None]:
    """Restore the ``usewiz`` logger after tests that configure logging."""
    from usewiz._internal.logging_utils import CHILD_LOGGERS

    logger = logging.getLogger("usewiz")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    child_levels = {name: logging.getLogger(name).level for name in CHILD_LOGGERS}
    yield
    for name, child_level in child_levels.items():
        logging.getLogger(name).setLevel(child_level)
    logger.handlers.clear()
    logger.handlers.extend(handlers)
    logger.setLevel(level)
    logger.propagate = propagate
