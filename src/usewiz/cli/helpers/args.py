# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Argument parser helpers used across CLI commands."""

from __future__ import annotations

import argparse
from typing import Any, Protocol

from usewiz.runtime import consume


class ArgumentRegistrar(Protocol):
    def add_argument(
        self, *args: Any, **kwargs: Any
    ) -> argparse.Action: ...  # pragma: no cover - stub


class SubparserRegistry(Protocol):
    def add_parser(self, *args: object, **kwargs: object) -> argparse.ArgumentParser:
        """Register a CLI subcommand on an argparse subparser collection."""
        ...  # pragma: no cover - Protocol helper


def register_argument(
    registrar: ArgumentRegistrar,
    *args: Any,
    **kwargs: Any,
) -> None:
    """Register an argument on a parser/argument group, discarding the action handle."""
    consume(registrar.add_argument(*args, **kwargs))


__all__ = ["ArgumentRegistrar", "SubparserRegistry", "register_argument"]
