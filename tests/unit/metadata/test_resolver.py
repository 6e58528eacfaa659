# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Unit tests for resolving expected root module direct dependencies."""

from __future__ import annotations

import pytest

from tests.fixtures.builders import repos
from usewiz.metadata.declaration import NO_OPINION, AllDev, AllRegular, parse_declaration
from usewiz.metadata.errors import UngeneratedRepoError
from usewiz.metadata.resolver import RootDirectDeps, resolve_root_direct_deps

pytestmark = [pytest.mark.unit, pytest.mark.metadata]


def test_no_opinion_resolves_to_none() -> None:
    resolved = resolve_root_direct_deps(NO_OPINION, repos("a"))
    assert resolved == RootDirectDeps(direct_deps=None, direct_dev_deps=None)


def test_explicit_sets_are_returned_verbatim() -> None:
    mode = parse_declaration(["a"], ["b"])
    resolved = resolve_root_direct_deps(mode, repos("a", "b", "c"))
    assert resolved.direct_deps == repos("a")
    assert resolved.direct_dev_deps == repos("b")


def test_all_regular_uses_every_generated_repo() -> None:
    resolved = resolve_root_direct_deps(AllRegular(), repos("a", "b"))
    assert resolved.direct_deps == repos("a", "b")
    assert resolved.direct_dev_deps == frozenset()


def test_all_dev_uses_every_generated_repo() -> None:
    resolved = resolve_root_direct_deps(AllDev(), repos("a", "b"))
    assert resolved.direct_deps == frozenset()
    assert resolved.direct_dev_deps == repos("a", "b")


def test_ungenerated_direct_deps_are_listed() -> None:
    mode = parse_declaration(["y"], [])
    with pytest.raises(UngeneratedRepoError) as excinfo:
        _ = resolve_root_direct_deps(mode, repos("x"))
    assert str(excinfo.value) == (
        "root_module_direct_deps contained the following repositories not generated by the extension: y"
    )
    assert excinfo.value.repos == ("y",)


def test_ungenerated_names_are_reported_in_declaration_order() -> None:
    mode = parse_declaration(["z", "a", "y"], [])
    with pytest.raises(UngeneratedRepoError) as excinfo:
        _ = resolve_root_direct_deps(mode, repos("a"))
    assert excinfo.value.repos == ("z", "y")
    assert str(excinfo.value).endswith("z, y")


def test_dev_side_is_checked_first() -> None:
    mode = parse_declaration(["bad"], ["also_bad"])
    with pytest.raises(UngeneratedRepoError) as excinfo:
        _ = resolve_root_direct_deps(mode, repos("a"))
    assert excinfo.value.field == "root_module_direct_dev_deps"
    assert excinfo.value.repos == ("also_bad",)
