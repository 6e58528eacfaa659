# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""CLI entry point and orchestration for usewiz commands."""

from __future__ import annotations

import argparse
import logging
import pathlib
from collections.abc import Callable, Sequence
from textwrap import dedent
from typing import Final

from usewiz import __version__
from usewiz.cli.commands import check as check_command
from usewiz.cli.helpers import SubparserRegistry, echo, register_argument
from usewiz.logging import LOG_FORMATS, LOG_LEVELS, configure_logging
from usewiz.runtime import consume

logger: logging.Logger = logging.getLogger("usewiz.cli")

USEWIZ_VERSION: Final[str] = __version__

CONFIG_TEMPLATE: Final[str] = dedent(
    """\
    # usewiz configuration template
    # Save this file as usewiz.toml in the root of your project, or move the
    # settings under [tool.usewiz] in pyproject.toml.
    config_version = 0

    # Module whose MODULE.bazel receives the suggested fixes.
    # root_module = "<root>"

    # Tool and target used in the suggested commands.
    # buildozer = "buildozer"
    # module_target = "//MODULE.bazel:all"

    # Colour the command header in fixup messages.
    # highlight = true

    # When `usewiz check` exits non-zero: never, invalid, findings
    # fail_on = "never"
    """,
)

CommandHandler = Callable[[argparse.Namespace], int]


def write_config_template(path: pathlib.Path, *, force: bool) -> int:
    """Write the usewiz configuration template to a file.

    Args:
        path: Target path where the configuration file will be written.
        force: Overwrite an existing file when ``True``.

    Returns:
        int: Exit code (0 for success, 1 for failure).
    """
    if path.exists() and not force:
        echo(f"[usewiz] Refusing to overwrite existing file: {path}")
        echo("Use --force if you want to replace it.")
        return 1
    path.parent.mkdir(parents=True, exist_ok=True)
    consume(path.write_text(CONFIG_TEMPLATE, encoding="utf-8"))
    echo(f"[usewiz] Wrote starter config to {path}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point for the usewiz command-line interface.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        int: Exit code from the executed command handler.
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        echo(f"usewiz {USEWIZ_VERSION}")
        return 0
    if args.command is None:
        parser.error("No command provided.")
    _initialize_logging(args.log_format, args.log_level)
    handler = _command_handlers().get(args.command)
    if handler is None:
        parser.error(f"Unknown command {args.command}")
    return handler(args)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="usewiz",
        description="Reconcile use_repo imports of the root module with module extension metadata.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_argument(
        parser,
        "--log-format",
        choices=LOG_FORMATS,
        default="text",
        help="Select logging output format (human-readable text or structured JSON).",
    )
    register_argument(
        parser,
        "--log-level",
        choices=LOG_LEVELS,
        default="warning",
        help="Set verbosity of logged events.",
    )
    register_argument(
        parser,
        "--version",
        action="store_true",
        help="Print the usewiz version and exit.",
    )
    subparsers = parser.add_subparsers(dest="command")

    check_command.register_check_command(subparsers)
    _register_init_command(subparsers)
    return parser


def _register_init_command(subparsers: SubparserRegistry) -> None:
    init = subparsers.add_parser(
        "init",
        help="Generate a starter configuration file",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_argument(
        init,
        "-o",
        "--output",
        type=pathlib.Path,
        default=pathlib.Path("usewiz.toml"),
        help="Destination for the generated configuration file.",
    )
    register_argument(
        init,
        "--force",
        action="store_true",
        help="Overwrite the output file if it already exists.",
    )


def _execute_init(args: argparse.Namespace) -> int:
    return write_config_template(args.output, force=bool(args.force))


def _command_handlers() -> dict[str, CommandHandler]:
    return {
        "check": check_command.execute_check,
        "init": _execute_init,
    }


def _initialize_logging(log_format: str, log_level: str) -> None:
    config = configure_logging(log_format, log_level=log_level)
    logger.debug("Logging configured (format=%s, level=%s)", config.format, config.level_name)


__all__ = ["CONFIG_TEMPLATE", "main", "write_config_template"]
