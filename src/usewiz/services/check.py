# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Service layer that checks every extension recorded in a report."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from usewiz._internal.logging_utils import structured_extra
from usewiz.core.model_types import FailOnPolicy, LogComponent
from usewiz.metadata import ExtensionMetadata, ExtensionMetadataError
from usewiz.metadata.fixup import compose_fixup_event

if TYPE_CHECKING:
    from usewiz.config import Config
    from usewiz.events import Event, EventHandler
    from usewiz.metadata import ReconciliationDiff
    from usewiz.report import ExtensionModel, ReportModel

logger: logging.Logger = logging.getLogger("usewiz.services")


@dataclass(slots=True, frozen=True)
class ExtensionOutcome:
    """Result of checking a single extension.

    At most one of ``event`` and ``error`` is set. ``diff`` accompanies
    ``event``.
    """

    extension: str
    event: Event | None = None
    diff: ReconciliationDiff | None = None
    error: ExtensionMetadataError | None = None

    @property
    def has_findings(self) -> bool:
        return self.event is not None

    @property
    def has_invalid_imports(self) -> bool:
        return self.diff is not None and bool(self.diff.invalid_imports)

    def to_payload(self) -> dict[str, object]:
        return {
            "extension": self.extension,
            "message": self.event.message if self.event is not None else None,
            "location": str(self.event.location) if self.event and self.event.location else None,
            "diff": self.diff.to_payload() if self.diff is not None else None,
            "error": str(self.error) if self.error is not None else None,
        }


def _new_outcome_list() -> list[ExtensionOutcome]:
    return []


@dataclass(slots=True)
class CheckResult:
    """Outcomes for every extension in a report, in report order."""

    outcomes: list[ExtensionOutcome] = field(default_factory=_new_outcome_list)

    def errors(self) -> list[ExtensionOutcome]:
        return [outcome for outcome in self.outcomes if outcome.error is not None]

    def findings(self) -> list[ExtensionOutcome]:
        return [outcome for outcome in self.outcomes if outcome.has_findings]

    def exit_code(self, fail_on: FailOnPolicy) -> int:
        if self.errors():
            return 1
        match fail_on:
            case FailOnPolicy.NEVER:
                return 0
            case FailOnPolicy.INVALID:
                return 1 if any(outcome.has_invalid_imports for outcome in self.outcomes) else 0
            case FailOnPolicy.FINDINGS:
                return 1 if self.findings() else 0

    def to_payload(self) -> dict[str, object]:
        return {
            "extensions": [outcome.to_payload() for outcome in self.outcomes],
            "errors": len(self.errors()),
            "findings": len(self.findings()),
        }


def check_extension(extension: ExtensionModel, config: Config) -> ExtensionOutcome:
    """Validate one extension's metadata and reconcile the root module's imports."""
    try:
        metadata = ExtensionMetadata.create(
            extension.root_module_direct_deps,
            extension.root_module_direct_dev_deps,
        )
        reconciliation = metadata.reconcile(
            extension.to_usages(),
            extension.all_repos(),
            root=config.root_module,
        )
    except ExtensionMetadataError as exc:
        logger.debug(
            "Invalid metadata for %s: %s",
            extension.label,
            exc,
            extra=structured_extra(component=LogComponent.SERVICES, extension=extension.label),
        )
        return ExtensionOutcome(extension=extension.label, error=exc)
    if reconciliation is None:
        return ExtensionOutcome(extension=extension.label)
    event = compose_fixup_event(
        reconciliation.diff,
        reconciliation.first_usage,
        config.fixup_options(),
    )
    return ExtensionOutcome(extension=extension.label, event=event, diff=reconciliation.diff)


def check_report(
    report: ReportModel,
    config: Config,
    handler: EventHandler | None = None,
) -> CheckResult:
    """Check every extension in ``report``.

    A declaration error aborts only the extension it belongs to. Fixup
    warnings are posted to ``handler`` in report order when one is given.
    """
    result = CheckResult()
    for extension in report.extensions:
        outcome = check_extension(extension, config)
        result.outcomes.append(outcome)
        if handler is not None and outcome.event is not None:
            handler.handle(outcome.event)
    logger.info(
        "Checked %d extension(s): %d with findings, %d with errors",
        len(result.outcomes),
        len(result.findings()),
        len(result.errors()),
        extra=structured_extra(
            component=LogComponent.SERVICES,
            counts={
                "extensions": len(result.outcomes),
                "findings": len(result.findings()),
                "errors": len(result.errors()),
            },
        ),
    )
    return result


__all__ = ["CheckResult", "ExtensionOutcome", "check_extension", "check_report"]
