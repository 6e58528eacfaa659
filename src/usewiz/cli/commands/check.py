# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""``usewiz check``: reconcile root module imports recorded in a report."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Final

from usewiz.cli.helpers import SubparserRegistry, echo, register_argument
from usewiz.config import Config, load_config
from usewiz.core.model_types import FailOnPolicy, LogComponent, OutputFormat
from usewiz.core.types import ModuleKey
from usewiz.exceptions import UsewizValidationError
from usewiz.logging import structured_extra
from usewiz.report import ReportError, load_report
from usewiz.runtime import normalise_enums_for_json
from usewiz.services import CheckResult, check_report

logger: logging.Logger = logging.getLogger("usewiz.cli")

USAGE_ERROR_EXIT_CODE: Final[int] = 2


def register_check_command(subparsers: SubparserRegistry) -> None:
    """Attach the ``usewiz check`` command to the CLI."""
    check = subparsers.add_parser(
        "check",
        help="Check use_repo imports of the root module against extension metadata",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_argument(
        check,
        "report",
        type=Path,
        help="Path to an extension report (JSON).",
    )
    register_argument(
        check,
        "--config",
        type=Path,
        default=None,
        help="Explicit configuration file (default: discovered usewiz.toml).",
    )
    register_argument(
        check,
        "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="Output format.",
    )
    register_argument(
        check,
        "--fail-on",
        choices=[policy.value for policy in FailOnPolicy],
        default=None,
        help="Exit non-zero for findings (default: configuration value, else never).",
    )
    register_argument(
        check,
        "--root-module",
        default=None,
        help="Module key treated as the root module (default: <root>).",
    )
    register_argument(
        check,
        "--no-highlight",
        action="store_true",
        help="Do not colour the command header in fixup messages.",
    )


def _apply_overrides(config: Config, args: argparse.Namespace) -> None:
    fail_on = getattr(args, "fail_on", None)
    if fail_on:
        config.fail_on = FailOnPolicy.from_str(fail_on)
    root_module = getattr(args, "root_module", None)
    if root_module:
        config.root_module = ModuleKey.from_str(root_module)
    if getattr(args, "no_highlight", False):
        config.highlight = False


def _print_text(result: CheckResult) -> None:
    for outcome in result.outcomes:
        if outcome.error is not None:
            echo(f"ERROR: {outcome.extension}: {outcome.error}")
        elif outcome.event is not None:
            echo(outcome.event.format())
    if not result.errors() and not result.findings():
        echo(f"[usewiz] use_repo imports are up to date for {len(result.outcomes)} extension(s)")


def execute_check(args: argparse.Namespace) -> int:
    """Execute the check subcommand.

    Returns:
        ``0`` when nothing fails, ``1`` for declaration errors or findings
        selected by the fail-on policy, ``2`` for unusable inputs.
    """
    try:
        config = load_config(getattr(args, "config", None))
        _apply_overrides(config, args)
    except UsewizValidationError as exc:
        echo(f"[usewiz] {exc}", err=True)
        return USAGE_ERROR_EXIT_CODE
    try:
        report = load_report(args.report)
    except ReportError as exc:
        echo(f"[usewiz] {exc}", err=True)
        return USAGE_ERROR_EXIT_CODE

    result = check_report(report, config)
    if OutputFormat.from_str(args.format) is OutputFormat.JSON:
        echo(json.dumps(normalise_enums_for_json(result.to_payload()), indent=2))
    else:
        _print_text(result)
    exit_code = result.exit_code(config.fail_on)
    logger.debug(
        "check finished with exit code %d",
        exit_code,
        extra=structured_extra(component=LogComponent.CLI, exit_code=exit_code),
    )
    return exit_code


__all__ = ["execute_check", "register_check_command"]
