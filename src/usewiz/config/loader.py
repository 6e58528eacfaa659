# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Configuration discovery and loading for usewiz.

Configuration lives in ``usewiz.toml`` or ``.usewiz.toml`` at the project
root, or under ``[tool.usewiz]`` in ``pyproject.toml``. A file named
explicitly on the command line always wins.
"""

from __future__ import annotations

import logging
import tomllib as toml
from pathlib import Path
from typing import Final, cast

from pydantic import ValidationError

from usewiz._internal.logging_utils import structured_extra
from usewiz._internal.utils import resolve_project_root
from usewiz.core.model_types import LogComponent

from .models import Config, ConfigModel, ConfigReadError, InvalidConfigFileError, config_from_model

logger: logging.Logger = logging.getLogger("usewiz.config")

CONFIG_FILENAMES: Final[tuple[str, ...]] = ("usewiz.toml", ".usewiz.toml")
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"


def _read_toml(path: Path) -> dict[str, object]:
    try:
        return toml.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, toml.TOMLDecodeError) as exc:
        raise ConfigReadError(path, exc) from exc


def _tool_section(raw_map: dict[str, object]) -> dict[str, object] | None:
    tool_obj = raw_map.get("tool")
    if not isinstance(tool_obj, dict):
        return None
    section = cast("dict[str, object]", tool_obj).get("usewiz")
    if not isinstance(section, dict):
        return None
    return cast("dict[str, object]", section)


def _candidates(explicit_path: Path | None, start: Path | None) -> list[Path]:
    if explicit_path is not None:
        return [explicit_path]
    root = resolve_project_root(start)
    return [root / name for name in (*CONFIG_FILENAMES, PYPROJECT_FILENAME)]


def load_config(explicit_path: Path | None = None, *, start: Path | None = None) -> Config:
    """Load usewiz configuration from a TOML file or use defaults.

    Args:
        explicit_path: Configuration file to read. When given, no other
            location is consulted.
        start: Directory from which the project root is discovered. Defaults
            to the current working directory.

    Returns:
        The runtime configuration; defaults when no file provides one.

    Raises:
        ConfigReadError: If the selected file cannot be read or parsed.
        InvalidConfigFileError: If the file content fails validation, or an
            explicitly named ``pyproject.toml`` has no ``[tool.usewiz]`` table.
    """
    for candidate in _candidates(explicit_path, start):
        if not candidate.is_file():
            if explicit_path is not None:
                raise ConfigReadError(candidate, FileNotFoundError(str(candidate)))
            continue
        raw_map = _read_toml(candidate)
        section = _tool_section(raw_map)
        if candidate.name == PYPROJECT_FILENAME:
            if section is None:
                if explicit_path is not None:
                    raise InvalidConfigFileError(candidate, ValueError("missing [tool.usewiz] table"))
                continue
            raw_map = section
        elif section is not None:
            raw_map = section
        try:
            model = ConfigModel.model_validate(raw_map)
        except ValidationError as exc:
            raise InvalidConfigFileError(candidate, exc) from exc
        logger.debug(
            "Loaded configuration",
            extra=structured_extra(component=LogComponent.CONFIG, path=candidate),
        )
        return config_from_model(model, source=candidate.resolve())
    return Config()


__all__ = ["CONFIG_FILENAMES", "load_config"]
