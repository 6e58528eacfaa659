# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Report to diagnostics workflow across config, report and services."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from tests.fixtures.builders import extension_payload, usage_payload
from usewiz import LoggingEventHandler, check_report, load_config, load_report
from usewiz.core.model_types import FailOnPolicy

pytestmark = pytest.mark.integration


def test_report_on_disk_is_checked_with_project_config(
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.usewiz]\nfail_on = "invalid"\nhighlight = false\n',
        encoding="utf-8",
    )
    report_path = tmp_path / "report.json"
    report_path.write_text(
        json.dumps(
            {
                "schemaVersion": 1,
                "extensions": [
                    extension_payload(
                        generated=["go_sdk", "go_toolchains"],
                        direct_deps=["go_sdk"],
                        direct_dev_deps=[],
                        usages=[
                            usage_payload(["go_sdk", "go_toolchains", "gone"]),
                            usage_payload(["go_toolchains"], module="rules_go@0.41.0"),
                        ],
                        name="go_sdk",
                    ),
                ],
            },
        ),
        encoding="utf-8",
    )

    config = load_config(start=tmp_path)
    report = load_report(report_path)
    target = logging.getLogger("test.workflow")
    with caplog.at_level(logging.WARNING, logger="test.workflow"):
        result = check_report(report, config, LoggingEventHandler(target))

    assert result.exit_code(config.fail_on) == 1
    assert result.exit_code(FailOnPolicy.NEVER) == 0
    diff = result.outcomes[0].diff
    assert diff is not None
    assert diff.imports_to_remove == ("go_toolchains", "gone")
    assert diff.invalid_imports == ("gone",)
    assert diff.indirect_imports == ("go_toolchains",)

    warnings = [record for record in caplog.records if record.name == "test.workflow"]
    assert len(warnings) == 1
    assert "\033[" not in warnings[0].getMessage()
    assert warnings[0].getMessage().endswith(
        "buildozer 'use_repo_remove @mod//:defs.bzl go_sdk go_toolchains gone' //MODULE.bazel:all",
    )
