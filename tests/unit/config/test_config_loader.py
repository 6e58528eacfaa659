# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Tests for configuration discovery and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from usewiz.config import (
    Config,
    ConfigReadError,
    InvalidConfigFileError,
    load_config,
)
from usewiz.core.model_types import FailOnPolicy
from usewiz.core.types import ModuleKey
from usewiz.metadata.fixup import FixupOptions

pytestmark = pytest.mark.unit


def test_defaults_when_no_config(tmp_path: Path) -> None:
    config = load_config(start=tmp_path)
    assert config == Config()
    assert config.fixup_options() == FixupOptions()


def test_usewiz_toml_is_loaded(tmp_path: Path) -> None:
    (tmp_path / "usewiz.toml").write_text(
        'buildozer = "/usr/local/bin/buildozer"\n'
        'module_target = "//:MODULE.bazel"\n'
        "highlight = false\n"
        'fail_on = "Findings"\n'
        'root_module = "app@1.2"\n',
        encoding="utf-8",
    )
    config = load_config(start=tmp_path)
    assert config.buildozer == "/usr/local/bin/buildozer"
    assert config.module_target == "//:MODULE.bazel"
    assert config.highlight is False
    assert config.fail_on is FailOnPolicy.FINDINGS
    assert config.root_module == ModuleKey("app", "1.2")
    assert config.source == (tmp_path / "usewiz.toml").resolve()
    assert config.fixup_options() == FixupOptions(
        buildozer="/usr/local/bin/buildozer",
        module_target="//:MODULE.bazel",
        highlight=False,
    )


def test_usewiz_toml_wins_over_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.usewiz]\nfail_on = "invalid"\n', encoding="utf-8")
    (tmp_path / ".usewiz.toml").write_text('fail_on = "findings"\n', encoding="utf-8")
    assert load_config(start=tmp_path).fail_on is FailOnPolicy.FINDINGS


def test_pyproject_tool_section_is_used(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.usewiz]\nfail_on = "invalid"\n', encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert load_config(start=nested).fail_on is FailOnPolicy.INVALID


def test_pyproject_without_section_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert load_config(start=tmp_path) == Config()


def test_tool_section_inside_usewiz_toml_is_honoured(tmp_path: Path) -> None:
    (tmp_path / "usewiz.toml").write_text('[tool.usewiz]\nhighlight = false\n', encoding="utf-8")
    assert load_config(start=tmp_path).highlight is False


def test_explicit_path_must_exist(tmp_path: Path) -> None:
    with pytest.raises(ConfigReadError, match="Unable to read"):
        _ = load_config(tmp_path / "missing.toml")


def test_explicit_path_skips_discovery(tmp_path: Path) -> None:
    (tmp_path / "usewiz.toml").write_text('fail_on = "findings"\n', encoding="utf-8")
    explicit = tmp_path / "custom.toml"
    explicit.write_text('fail_on = "invalid"\n', encoding="utf-8")
    assert load_config(explicit, start=tmp_path).fail_on is FailOnPolicy.INVALID


def test_malformed_toml_is_a_read_error(tmp_path: Path) -> None:
    (tmp_path / "usewiz.toml").write_text("fail_on = \n", encoding="utf-8")
    with pytest.raises(ConfigReadError):
        _ = load_config(start=tmp_path)


def test_undecodable_config_is_a_read_error(tmp_path: Path) -> None:
    _ = (tmp_path / "usewiz.toml").write_bytes(b"\xff{}")
    with pytest.raises(ConfigReadError) as excinfo:
        _ = load_config(start=tmp_path)
    assert isinstance(excinfo.value.error, UnicodeDecodeError)


def test_explicit_pyproject_requires_tool_section(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    _ = pyproject.write_text('[project]\nname = "x"\n', encoding="utf-8")
    with pytest.raises(InvalidConfigFileError, match=r"missing \[tool\.usewiz\] table"):
        _ = load_config(pyproject, start=tmp_path)


@pytest.mark.parametrize(
    ("content", "needle"),
    [
        ('fail_on = "sometimes"\n', "fail_on must be one of: findings, invalid, never"),
        ("config_version = 3\n", "Unsupported config_version 3; expected 0"),
        ('buildozer = "  "\n', "must not be empty"),
        ('root_module = "@1.0"\n', "Invalid module key"),
        ("unknown = 1\n", "unknown"),
    ],
)
def test_invalid_values_are_rejected(tmp_path: Path, content: str, needle: str) -> None:
    (tmp_path / "usewiz.toml").write_text(content, encoding="utf-8")
    with pytest.raises(InvalidConfigFileError) as excinfo:
        _ = load_config(start=tmp_path)
    assert needle in str(excinfo.value)
