# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Unit tests for Declaration parsing."""

from __future__ import annotations

import pytest

from usewiz.metadata.declaration import NO_OPINION, AllDev, AllRegular, Explicit, parse_declaration
from usewiz.metadata.errors import (
    AllReposConflictError,
    CrossListedRepoError,
    DeclarationShapeError,
    DeclarationTypeError,
    DuplicateRepoError,
    ExtensionMetadataError,
    InvalidRepoNameError,
    PartialDeclarationError,
)

pytestmark = [pytest.mark.unit, pytest.mark.metadata]


def test_both_none_has_no_opinion() -> None:
    mode = parse_declaration(None, None)
    assert mode == NO_OPINION
    assert isinstance(mode, Explicit)
    assert not mode.has_opinion


def test_all_with_empty_dev_list_is_all_regular() -> None:
    assert parse_declaration("all", []) == AllRegular()
    assert parse_declaration("all", ()) == AllRegular()


def test_all_dev_with_empty_regular_list_is_all_dev() -> None:
    assert parse_declaration([], "all") == AllDev()


@pytest.mark.parametrize(
    ("direct_deps", "direct_dev_deps"),
    [
        ("all", ["d"]),
        (["d"], "all"),
        ("all", "all"),
        ("all", None),
        (None, "all"),
    ],
)
def test_all_requires_empty_opposite_list(direct_deps: object, direct_dev_deps: object) -> None:
    with pytest.raises(AllReposConflictError, match='is "all", the other must be an empty list'):
        _ = parse_declaration(direct_deps, direct_dev_deps)


@pytest.mark.parametrize(
    ("direct_deps", "direct_dev_deps"),
    [("some", []), ([], "some"), ("ALL", [])],
)
def test_other_strings_are_rejected(direct_deps: object, direct_dev_deps: object) -> None:
    with pytest.raises(DeclarationShapeError, match='must be None, "all", or a list of strings'):
        _ = parse_declaration(direct_deps, direct_dev_deps)


@pytest.mark.parametrize(("direct_deps", "direct_dev_deps"), [(["a"], None), (None, [])])
def test_declarations_must_be_given_together(direct_deps: object, direct_dev_deps: object) -> None:
    with pytest.raises(PartialDeclarationError, match="both be specified or both be unspecified"):
        _ = parse_declaration(direct_deps, direct_dev_deps)


def test_explicit_lists_keep_declaration_order() -> None:
    mode = parse_declaration(["b", "a"], ["d", "c"])
    assert mode == Explicit(direct_deps=("b", "a"), direct_dev_deps=("d", "c"))  # type: ignore[arg-type]


def test_explicit_empty_lists_express_an_opinion() -> None:
    mode = parse_declaration([], [])
    assert isinstance(mode, Explicit)
    assert mode.has_opinion


def test_invalid_repo_name_is_field_qualified() -> None:
    with pytest.raises(InvalidRepoNameError) as excinfo:
        _ = parse_declaration(["ok", "1bad"], [])
    assert excinfo.value.field == "root_module_direct_deps"
    assert excinfo.value.repo == "1bad"
    assert str(excinfo.value).startswith("in root_module_direct_deps: invalid user-provided repo name '1bad'")


def test_invalid_dev_repo_name_is_field_qualified() -> None:
    with pytest.raises(InvalidRepoNameError, match="^in root_module_direct_dev_deps: "):
        _ = parse_declaration([], ["has space"])


def test_duplicate_entries_are_rejected() -> None:
    with pytest.raises(DuplicateRepoError, match="in root_module_direct_deps: duplicate entry 'a'"):
        _ = parse_declaration(["a", "b", "a"], [])
    with pytest.raises(DuplicateRepoError, match="in root_module_direct_dev_deps: duplicate entry 'c'"):
        _ = parse_declaration([], ["c", "c"])


def test_repo_in_both_lists_is_rejected() -> None:
    with pytest.raises(CrossListedRepoError) as excinfo:
        _ = parse_declaration(["a", "b"], ["c", "b"])
    assert str(excinfo.value) == "in root_module_direct_dev_deps: entry 'b' is also in root_module_direct_deps"
    assert excinfo.value.repo == "b"


def test_non_sequence_values_are_rejected() -> None:
    with pytest.raises(DeclarationTypeError, match="for root_module_direct_deps, got int, want sequence"):
        _ = parse_declaration(3, [])


def test_non_string_entries_are_rejected() -> None:
    with pytest.raises(DeclarationTypeError) as excinfo:
        _ = parse_declaration([], ["a", 7])
    assert excinfo.value.field == "root_module_direct_dev_deps"
    assert "at index 1" in str(excinfo.value)
    assert isinstance(excinfo.value, TypeError)


def test_every_declaration_error_is_a_metadata_error() -> None:
    for args in (("all", ["x"]), ("x", []), (["a"], None), (["a", "a"], [])):
        with pytest.raises(ExtensionMetadataError):
            _ = parse_declaration(*args)


def test_explicit_rejects_half_specified_construction() -> None:
    with pytest.raises(PartialDeclarationError):
        _ = Explicit(direct_deps=(), direct_dev_deps=None)
