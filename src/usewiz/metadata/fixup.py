# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Rendering of the fixup warning and its buildozer commands.

The message text is consumed by tooling that applies the suggested commands,
so section order, command order and repository order must stay stable.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from usewiz.core.model_types import UseRepoCommand
from usewiz.events import Event

if TYPE_CHECKING:
    from usewiz.core.types import ModuleExtensionUsage

    from .diff import ReconciliationDiff

HIGHLIGHT_START: Final[str] = "\033[35m\033[1m"
HIGHLIGHT_END: Final[str] = "\033[0m"
DEFAULT_BUILDOZER: Final[str] = "buildozer"
DEFAULT_MODULE_TARGET: Final[str] = "//MODULE.bazel:all"

INVALID_IMPORTS_HEADER: Final[str] = (
    "Imported, but not created by the extension (will cause the build to fail):"
)
MISSING_IMPORTS_HEADER: Final[str] = (
    "Not imported, but reported as direct dependencies by the extension "
    "(may cause the build to fail):"
)
INDIRECT_IMPORTS_HEADER: Final[str] = "Imported, but reported as indirect dependencies by the extension:"


@dataclass(slots=True, frozen=True)
class FixupOptions:
    """Knobs for the rendered fix commands.

    Attributes:
        buildozer: Executable named at the start of each command.
        module_target: Buildozer target addressing the root module file.
        highlight: Wrap the command header in ANSI colour codes.
    """

    buildozer: str = DEFAULT_BUILDOZER
    module_target: str = DEFAULT_MODULE_TARGET
    highlight: bool = True


DEFAULT_FIXUP_OPTIONS: Final[FixupOptions] = FixupOptions()


def make_use_repo_command(
    command: UseRepoCommand,
    *,
    dev_dependency: bool,
    repos: Sequence[str],
    extension_bzl_file: str,
    extension_name: str,
    options: FixupOptions = DEFAULT_FIXUP_OPTIONS,
) -> str | None:
    """Return one buildozer command line, or ``None`` when ``repos`` is empty."""
    if not repos:
        return None
    dev = " dev" if dev_dependency else ""
    return (
        f"{options.buildozer} '{command.value}{dev} {extension_bzl_file} {extension_name} "
        f"{' '.join(repos)}' {options.module_target}"
    )


def _section(header: str, repos: Sequence[str]) -> str:
    if not repos:
        return ""
    return f"{header}\n    {', '.join(repos)}\n\n"


def compose_fixup_message(
    diff: ReconciliationDiff,
    *,
    extension_bzl_file: str,
    extension_name: str,
    options: FixupOptions = DEFAULT_FIXUP_OPTIONS,
) -> str:
    """Render the full fixup message for a non-empty diff."""
    message = (
        f"The module extension {extension_name} defined in {extension_bzl_file} reported "
        "incorrect imports of repositories via use_repo():\n\n"
    )
    message += _section(INVALID_IMPORTS_HEADER, diff.invalid_imports)
    message += _section(MISSING_IMPORTS_HEADER, diff.missing_imports)
    message += _section(INDIRECT_IMPORTS_HEADER, diff.indirect_imports)

    planned = (
        (UseRepoCommand.ADD, False, diff.imports_to_add),
        (UseRepoCommand.REMOVE, False, diff.imports_to_remove),
        (UseRepoCommand.ADD, True, diff.dev_imports_to_add),
        (UseRepoCommand.REMOVE, True, diff.dev_imports_to_remove),
    )
    commands = [
        line
        for command, dev, repos in planned
        if (
            line := make_use_repo_command(
                command,
                dev_dependency=dev,
                repos=repos,
                extension_bzl_file=extension_bzl_file,
                extension_name=extension_name,
                options=options,
            )
        )
        is not None
    ]
    start, end = (HIGHLIGHT_START, HIGHLIGHT_END) if options.highlight else ("", "")
    header = f"{start} ** You can use the following {options.buildozer} command(s) to fix these issues:{end}"
    return message + header + "\n\n" + "\n".join(commands)


def compose_fixup_event(
    diff: ReconciliationDiff,
    first_usage: ModuleExtensionUsage,
    options: FixupOptions = DEFAULT_FIXUP_OPTIONS,
) -> Event:
    """Build the warning attached to the first root usage of the extension."""
    message = compose_fixup_message(
        diff,
        extension_bzl_file=first_usage.extension_bzl_file,
        extension_name=first_usage.extension_name,
        options=options,
    )
    return Event.warn(first_usage.location, message)


__all__ = [
    "DEFAULT_FIXUP_OPTIONS",
    "FixupOptions",
    "compose_fixup_event",
    "compose_fixup_message",
    "make_use_repo_command",
]
