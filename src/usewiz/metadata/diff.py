# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Classification of differences between expected and actual imports."""

from __future__ import annotations

from collections.abc import Set as AbstractSet
from dataclasses import dataclass

from usewiz._internal.utils import sorted_unique
from usewiz.core.type_aliases import RepoName


@dataclass(slots=True, frozen=True)
class ReconciliationDiff:
    """Sorted import changes and findings for one extension.

    The first four fields are the edits that make the root module's imports
    match the extension's report. The last three classify the imported and
    expected repositories against what the extension generated.
    """

    imports_to_add: tuple[RepoName, ...] = ()
    imports_to_remove: tuple[RepoName, ...] = ()
    dev_imports_to_add: tuple[RepoName, ...] = ()
    dev_imports_to_remove: tuple[RepoName, ...] = ()
    invalid_imports: tuple[RepoName, ...] = ()
    missing_imports: tuple[RepoName, ...] = ()
    indirect_imports: tuple[RepoName, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (
            self.imports_to_add
            or self.imports_to_remove
            or self.dev_imports_to_add
            or self.dev_imports_to_remove
        )

    def to_payload(self) -> dict[str, list[str]]:
        """Serialise the diff for JSON output."""

        return {
            "importsToAdd": list(self.imports_to_add),
            "importsToRemove": list(self.imports_to_remove),
            "devImportsToAdd": list(self.dev_imports_to_add),
            "devImportsToRemove": list(self.dev_imports_to_remove),
            "invalidImports": list(self.invalid_imports),
            "missingImports": list(self.missing_imports),
            "indirectImports": list(self.indirect_imports),
        }


def _sorted(values: AbstractSet[RepoName]) -> tuple[RepoName, ...]:
    return tuple(RepoName(value) for value in sorted_unique(values))


def classify_imports(
    *,
    expected_imports: AbstractSet[RepoName],
    expected_dev_imports: AbstractSet[RepoName],
    actual_imports: AbstractSet[RepoName],
    actual_dev_imports: AbstractSet[RepoName],
    all_repos: AbstractSet[RepoName],
) -> ReconciliationDiff | None:
    """Compare expected and actual imports.

    Returns:
        The classified differences, or ``None`` when no import has to be
        added or removed.
    """
    imports_to_add = expected_imports - actual_imports
    imports_to_remove = actual_imports - expected_imports
    dev_imports_to_add = expected_dev_imports - actual_dev_imports
    dev_imports_to_remove = actual_dev_imports - expected_dev_imports
    if not (imports_to_add or imports_to_remove or dev_imports_to_add or dev_imports_to_remove):
        return None

    all_actual = actual_imports | actual_dev_imports
    all_expected = expected_imports | expected_dev_imports
    return ReconciliationDiff(
        imports_to_add=_sorted(imports_to_add),
        imports_to_remove=_sorted(imports_to_remove),
        dev_imports_to_add=_sorted(dev_imports_to_add),
        dev_imports_to_remove=_sorted(dev_imports_to_remove),
        invalid_imports=_sorted(all_actual - all_repos),
        missing_imports=_sorted(all_expected - all_actual),
        indirect_imports=_sorted((all_actual & all_repos) - all_expected),
    )


__all__ = ["ReconciliationDiff", "classify_imports"]
