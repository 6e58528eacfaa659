# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Tests for the usewiz command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tests.fixtures.builders import extension_payload, usage_payload
from usewiz import __version__
from usewiz.cli import main
from usewiz.cli.app import CONFIG_TEMPLATE

pytestmark = [pytest.mark.unit, pytest.mark.cli]


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    (tmp_path / "usewiz.toml").write_text("config_version = 0\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _write_report(path: Path, *extensions: dict[str, object]) -> Path:
    path.write_text(json.dumps({"schemaVersion": 1, "extensions": list(extensions)}), encoding="utf-8")
    return path


def _missing_import(name: str = "ext") -> dict[str, object]:
    return extension_payload(
        generated=["a", "b"],
        direct_deps="all",
        direct_dev_deps=[],
        usages=[usage_payload(["a"])],
        name=name,
    )


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == f"usewiz {__version__}"


def test_missing_command_is_a_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = main([])
    assert excinfo.value.code == 2


def test_check_reports_up_to_date(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    report = _write_report(
        workspace / "report.json",
        extension_payload(generated=["a"], direct_deps=["a"], direct_dev_deps=[], usages=[usage_payload(["a"])]),
    )
    assert main(["check", str(report)]) == 0
    assert "use_repo imports are up to date for 1 extension(s)" in capsys.readouterr().out


def test_check_prints_fixup_warning(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    report = _write_report(workspace / "report.json", _missing_import())
    assert main(["check", str(report)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("WARNING: /ws/MODULE.bazel:3:7: The module extension ext defined in @mod//:defs.bzl")
    assert "\033[35m\033[1m ** You can use the following buildozer command(s)" in out
    assert "buildozer 'use_repo_add @mod//:defs.bzl ext b' //MODULE.bazel:all" in out


def test_check_without_highlight(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    report = _write_report(workspace / "report.json", _missing_import())
    assert main(["check", str(report), "--no-highlight"]) == 0
    assert "\033[" not in capsys.readouterr().out


def test_check_fail_on_findings(workspace: Path) -> None:
    report = _write_report(workspace / "report.json", _missing_import())
    assert main(["check", str(report), "--fail-on", "findings"]) == 1
    assert main(["check", str(report), "--fail-on", "invalid"]) == 0


def test_check_fail_on_from_config(workspace: Path) -> None:
    (workspace / "usewiz.toml").write_text('fail_on = "findings"\n', encoding="utf-8")
    report = _write_report(workspace / "report.json", _missing_import())
    assert main(["check", str(report)]) == 1


def test_check_declaration_error(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    report = _write_report(
        workspace / "report.json",
        extension_payload(generated=["a"], direct_deps=["a"], direct_dev_deps=None, name="broken"),
    )
    assert main(["check", str(report)]) == 1
    out = capsys.readouterr().out
    assert out.startswith("ERROR: @mod//:defs.bzl%broken: root_module_direct_deps and root_module_direct_dev_deps")


def test_check_json_output(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    report = _write_report(workspace / "report.json", _missing_import("one"), _missing_import("two"))
    assert main(["check", str(report), "--format", "json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["findings"] == 2
    assert [entry["extension"] for entry in payload["extensions"]] == [
        "@mod//:defs.bzl%one",
        "@mod//:defs.bzl%two",
    ]
    assert payload["extensions"][0]["diff"]["importsToAdd"] == ["b"]


def test_check_root_module_override(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    report = _write_report(workspace / "report.json", _missing_import())
    assert main(["check", str(report), "--root-module", "other@1.0"]) == 0
    assert "up to date" in capsys.readouterr().out
    assert main(["check", str(report), "--root-module", "@1.0"]) == 2


def test_check_unreadable_report(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["check", str(workspace / "missing.json")]) == 2
    assert "Unable to read" in capsys.readouterr().err


def test_check_invalid_config(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (workspace / "usewiz.toml").write_text('fail_on = "sometimes"\n', encoding="utf-8")
    report = _write_report(workspace / "report.json", _missing_import())
    assert main(["check", str(report)]) == 2
    assert "Invalid usewiz configuration" in capsys.readouterr().err


def test_check_undecodable_inputs(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    report = workspace / "report.json"
    _ = report.write_bytes(b"\xff{}")
    assert main(["check", str(report)]) == 2
    assert "Unable to read" in capsys.readouterr().err

    good = _write_report(workspace / "good.json", _missing_import())
    _ = (workspace / "usewiz.toml").write_bytes(b"\xff{}")
    assert main(["check", str(good)]) == 2
    assert "Unable to read" in capsys.readouterr().err


def test_check_explicit_config(workspace: Path) -> None:
    custom = workspace / "ci.toml"
    custom.write_text('fail_on = "findings"\n', encoding="utf-8")
    report = _write_report(workspace / "report.json", _missing_import())
    assert main(["check", str(report), "--config", str(custom)]) == 1


def test_init_writes_template(workspace: Path) -> None:
    target = workspace / "conf" / "usewiz.toml"
    assert main(["init", "--output", str(target)]) == 0
    assert target.read_text(encoding="utf-8") == CONFIG_TEMPLATE


def test_init_refuses_to_overwrite(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["init"]) == 1
    assert "Refusing to overwrite" in capsys.readouterr().out
    assert main(["init", "--force"]) == 0
    assert (workspace / "usewiz.toml").read_text(encoding="utf-8") == CONFIG_TEMPLATE


def test_check_logs_exit_code(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    report = _write_report(workspace / "report.json", _missing_import())
    argv = ["--log-format", "json", "--log-level", "debug", "check", str(report), "--fail-on", "findings"]
    assert main(argv) == 1
    records = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line.startswith("{")]
    finished = [record for record in records if record["message"].startswith("check finished")]
    assert len(finished) == 1
    assert finished[0]["component"] == "cli"
    assert finished[0]["exit_code"] == 1
