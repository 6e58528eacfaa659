# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Extension metadata returned by a module extension implementation."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Set as AbstractSet
from dataclasses import dataclass
from typing import TYPE_CHECKING

from usewiz._internal.logging_utils import structured_extra
from usewiz.core.model_types import LogComponent
from usewiz.core.types import ModuleExtensionUsage, ModuleKey

from .declaration import DeclarationMode, parse_declaration
from .diff import ReconciliationDiff, classify_imports
from .fixup import DEFAULT_FIXUP_OPTIONS, FixupOptions, compose_fixup_event
from .resolver import resolve_root_direct_deps
from .usages import aggregate_root_usages

if TYPE_CHECKING:
    from usewiz.core.type_aliases import RepoName
    from usewiz.events import Event, EventHandler

logger: logging.Logger = logging.getLogger("usewiz.metadata")


@dataclass(slots=True, frozen=True)
class Reconciliation:
    """Non-empty diff together with the usage the diagnostic is attached to."""

    diff: ReconciliationDiff
    first_usage: ModuleExtensionUsage


@dataclass(slots=True, frozen=True)
class ExtensionMetadata:
    """Validated metadata about the repositories an extension generated."""

    mode: DeclarationMode

    @classmethod
    def create(cls, root_module_direct_deps: object, root_module_direct_dev_deps: object) -> ExtensionMetadata:
        """Validate the raw values an extension returned.

        Raises:
            ExtensionMetadataError: If the declaration is malformed.
        """
        return cls(mode=parse_declaration(root_module_direct_deps, root_module_direct_dev_deps))

    def reconcile(
        self,
        usages: Iterable[ModuleExtensionUsage],
        all_repos: AbstractSet[RepoName],
        *,
        root: ModuleKey = ModuleKey.ROOT,
    ) -> Reconciliation | None:
        """Compare the root module's imports with the declared direct dependencies.

        Returns:
            ``None`` when the root module does not use the extension, when the
            extension expressed no preference, or when the imports already
            match.

        Raises:
            UngeneratedRepoError: If an explicit declaration names repositories
                the extension did not generate.
        """
        root_imports = aggregate_root_usages(usages, root)
        if root_imports is None:
            logger.debug(
                "Root module does not use the extension; skipping import check",
                extra=structured_extra(component=LogComponent.METADATA, module=root),
            )
            return None

        first_usage = root_imports.first_usage
        expected = resolve_root_direct_deps(self.mode, all_repos)
        if expected.direct_deps is None or expected.direct_dev_deps is None:
            logger.debug(
                "Extension %s reported no direct dependencies; skipping import check",
                first_usage.extension_name,
                extra=structured_extra(
                    component=LogComponent.METADATA,
                    extension=first_usage.extension_name,
                    module=root,
                ),
            )
            return None

        diff = classify_imports(
            expected_imports=expected.direct_deps,
            expected_dev_imports=expected.direct_dev_deps,
            actual_imports=root_imports.actual_imports,
            actual_dev_imports=root_imports.actual_dev_imports,
            all_repos=all_repos,
        )
        if diff is None:
            return None
        logger.debug(
            "Extension %s: imports of the root module need changes",
            first_usage.extension_name,
            extra=structured_extra(
                component=LogComponent.METADATA,
                extension=first_usage.extension_name,
                module=root,
                counts={
                    "add": len(diff.imports_to_add),
                    "remove": len(diff.imports_to_remove),
                    "dev_add": len(diff.dev_imports_to_add),
                    "dev_remove": len(diff.dev_imports_to_remove),
                    "invalid": len(diff.invalid_imports),
                },
            ),
        )
        return Reconciliation(diff=diff, first_usage=first_usage)

    def generate_fixup_message(
        self,
        usages: Iterable[ModuleExtensionUsage],
        all_repos: AbstractSet[RepoName],
        *,
        root: ModuleKey = ModuleKey.ROOT,
        options: FixupOptions = DEFAULT_FIXUP_OPTIONS,
    ) -> Event | None:
        """Return the fixup warning for the root module, if one is needed."""
        reconciliation = self.reconcile(usages, all_repos, root=root)
        if reconciliation is None:
            return None
        return compose_fixup_event(reconciliation.diff, reconciliation.first_usage, options)

    def evaluate(
        self,
        usages: Iterable[ModuleExtensionUsage],
        all_repos: AbstractSet[RepoName],
        handler: EventHandler,
        *,
        root: ModuleKey = ModuleKey.ROOT,
        options: FixupOptions = DEFAULT_FIXUP_OPTIONS,
    ) -> None:
        """Post the fixup warning (if any) to ``handler``."""
        event = self.generate_fixup_message(usages, all_repos, root=root, options=options)
        if event is not None:
            handler.handle(event)


__all__ = ["ExtensionMetadata", "Reconciliation"]
