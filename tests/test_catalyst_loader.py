# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for loading catalysts from local directories."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from plan_catalyst import (
    BatchLoadError,
    CatalystLoader,
    DirectoryNotFoundError,
    FacetCategory,
    FacetReadError,
    LoaderOptions,
    ManifestInvalidError,
    ManifestMissingError,
    load_catalyst,
    load_catalyst_safe,
    resolve_catalysts,
)
from plan_catalyst.models import WarningKind


def test_loads_manifest_and_absolute_path(complete_catalyst: Path) -> None:
    catalyst = load_catalyst(complete_catalyst)

    assert catalyst.manifest.id == "@test/complete-catalyst"
    assert catalyst.manifest.version == "1.0.0"
    assert catalyst.directory_path == complete_catalyst
    assert catalyst.directory_path.is_absolute()


def test_loads_all_six_facets(complete_catalyst: Path) -> None:
    catalyst = load_catalyst(complete_catalyst)

    assert set(catalyst.facets) == set(FacetCategory)


def test_loads_markdown_files_verbatim(complete_catalyst: Path) -> None:
    catalyst = load_catalyst(complete_catalyst)

    questions = catalyst.facet(FacetCategory.QUESTIONS)
    assert [item.filename for item in questions] == ["exploration.md", "shaping.md"]
    exploration = questions[0]
    assert exploration.content == (complete_catalyst / "questions" / "exploration.md").read_bytes().decode("utf-8")
    assert "Exploration Questions" in exploration.content


def test_ignores_other_extensions_and_subdirectories(make_catalyst: Callable[..., Path]) -> None:
    root = make_catalyst(
        "mixed",
        files={
            "constraints/keep.md": "kept",
            "constraints/skip.txt": "skipped",
            "constraints/nested/deep.md": "nested",
        },
    )

    catalyst = load_catalyst(root)

    assert [item.filename for item in catalyst.facet(FacetCategory.CONSTRAINTS)] == ["keep.md"]


def test_preserves_crlf_line_endings(make_catalyst: Callable[..., Path]) -> None:
    root = make_catalyst("crlf")
    target = root / "questions" / "windows.md"
    target.parent.mkdir()
    target.write_bytes(b"line one\r\nline two\r\n")

    catalyst = load_catalyst(root)

    assert catalyst.facet(FacetCategory.QUESTIONS)[0].content == "line one\r\nline two\r\n"


def test_partial_catalyst_only_has_found_facets(partial_catalyst: Path) -> None:
    catalyst = load_catalyst(partial_catalyst)

    assert catalyst.manifest.version == "1.0.0-dev.0"
    assert set(catalyst.facets) == {FacetCategory.QUESTIONS, FacetCategory.CONSTRAINTS}
    assert catalyst.facet(FacetCategory.OUTPUT_TEMPLATES) == ()


def test_empty_facet_directory_is_omitted(make_catalyst: Callable[..., Path]) -> None:
    root = make_catalyst("empty-dir")
    (root / "domain-knowledge").mkdir()

    catalyst = load_catalyst(root)

    assert FacetCategory.DOMAIN_KNOWLEDGE not in catalyst.facets


def test_missing_manifest_raises(manifestless_catalyst: Path) -> None:
    with pytest.raises(ManifestMissingError, match="manifest not found"):
        load_catalyst(manifestless_catalyst)


def test_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(DirectoryNotFoundError, match="not found"):
        load_catalyst(tmp_path / "does-not-exist")


def test_invalid_manifest_lists_every_field(make_catalyst: Callable[..., Path]) -> None:
    root = make_catalyst("bad", manifest="id: '@invalid//package'\nname: ''\nversion: v1.0.0\n")

    with pytest.raises(ManifestInvalidError) as excinfo:
        load_catalyst(root)

    message = str(excinfo.value)
    assert message.startswith("Invalid catalyst manifest:")
    for field in ("description", "id", "name", "version"):
        assert f"{field}:" in message
    assert len(excinfo.value.violations) == 4


def test_unparseable_manifest_is_invalid(make_catalyst: Callable[..., Path]) -> None:
    root = make_catalyst("broken", manifest="id: [unterminated\n")

    with pytest.raises(ManifestInvalidError, match="failed to parse YAML"):
        load_catalyst(root)


def test_relative_paths_resolve_against_base(complete_catalyst: Path) -> None:
    catalyst = load_catalyst("complete-catalyst", base_path=complete_catalyst.parent)

    assert catalyst.directory_path == complete_catalyst


def test_relative_paths_default_to_working_directory(
    complete_catalyst: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.chdir(complete_catalyst.parent)

    catalyst = load_catalyst("./complete-catalyst")

    assert catalyst.directory_path == Path(os.getcwd()) / "complete-catalyst"
    assert "./" not in str(catalyst.directory_path)


def test_declared_but_missing_facet_warns_when_requested(make_catalyst: Callable[..., Path]) -> None:
    root = make_catalyst(
        "declared",
        facets="  questions: true\n  constraints: true\n",
        files={"questions/q.md": "q"},
    )
    (root / "constraints").mkdir()

    catalyst = load_catalyst(root, LoaderOptions(warn_on_missing_facets=True))

    assert [warning.kind for warning in catalyst.warnings] == [WarningKind.MISSING]
    assert catalyst.warnings[0].category is FacetCategory.CONSTRAINTS
    assert "contains no markdown files" in str(catalyst.warnings[0])


def test_declared_false_but_present_facet_is_loaded_with_warning(make_catalyst: Callable[..., Path]) -> None:
    root = make_catalyst("undeclared", facets="  questions: false\n", files={"questions/q.md": "q"})

    catalyst = load_catalyst(root, LoaderOptions(warn_on_undeclared_facets=True))

    assert len(catalyst.facet(FacetCategory.QUESTIONS)) == 1
    assert [str(warning) for warning in catalyst.warnings] == [
        "Facet 'questions' is present but declared as false in manifest",
    ]


def test_warnings_require_opt_in(make_catalyst: Callable[..., Path]) -> None:
    root = make_catalyst(
        "quiet",
        facets="  questions: false\n  validationRules: true\n",
        files={"questions/q.md": "q"},
    )

    assert load_catalyst(root).warnings == ()


def test_strict_mode_still_collects_warnings(make_catalyst: Callable[..., Path]) -> None:
    root = make_catalyst("strict", facets="  validationRules: true\n")
    options = LoaderOptions(strict=True, warn_on_missing_facets=True)

    catalyst = load_catalyst(root, options)

    assert [str(warning) for warning in catalyst.warnings] == [
        "Facet 'validation-rules' is declared in manifest but directory 'validation-rules' not found",
    ]


def test_safe_load_reports_success(complete_catalyst: Path) -> None:
    result = load_catalyst_safe(complete_catalyst)

    assert result.success
    assert result.catalyst is not None
    assert result.error is None


def test_safe_load_reports_missing_manifest(manifestless_catalyst: Path) -> None:
    result = load_catalyst_safe(manifestless_catalyst)

    assert not result.success
    assert result.catalyst is None
    assert result.error is not None
    assert "manifest not found" in result.error


def test_safe_load_reports_missing_directory(tmp_path: Path) -> None:
    result = load_catalyst_safe(tmp_path / "nope")

    assert not result.success
    assert result.error is not None
    assert "not found" in result.error


def test_resolve_preserves_order(complete_catalyst: Path, partial_catalyst: Path) -> None:
    catalysts = resolve_catalysts(["partial-catalyst", "complete-catalyst"], complete_catalyst.parent)

    assert [catalyst.id for catalyst in catalysts] == ["@test/partial-catalyst", "@test/complete-catalyst"]


def test_resolve_passes_absolute_identifiers_through(complete_catalyst: Path, tmp_path: Path) -> None:
    other_base = tmp_path / "elsewhere"
    other_base.mkdir()

    catalysts = resolve_catalysts([str(complete_catalyst)], other_base)

    assert catalysts[0].directory_path == complete_catalyst


def test_resolve_empty_identifiers() -> None:
    assert resolve_catalysts([]) == []


def test_resolve_fails_on_first_error(complete_catalyst: Path) -> None:
    with pytest.raises(BatchLoadError) as excinfo:
        resolve_catalysts(["complete-catalyst", "/nonexistent", "also-missing"], complete_catalyst.parent)

    assert excinfo.value.identifier == "/nonexistent"
    assert "Failed to load catalyst '/nonexistent'" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, DirectoryNotFoundError)


def test_loader_instance_reuses_base_and_options(complete_catalyst: Path, partial_catalyst: Path) -> None:
    loader = CatalystLoader(base_path=complete_catalyst.parent, options=LoaderOptions(strict=True))

    assert loader.load("partial-catalyst").id == "@test/partial-catalyst"
    assert [catalyst.id for catalyst in loader.resolve(["complete-catalyst"])] == ["@test/complete-catalyst"]


def test_non_utf8_manifest_is_invalid(make_catalyst: Callable[..., Path]) -> None:
    root = make_catalyst("latin1")
    (root / "catalyst.yml").write_bytes(b"id: caf\xe9\nname: x\ndescription: y\nversion: 1.0.0\n")

    with pytest.raises(ManifestInvalidError, match="not valid UTF-8"):
        load_catalyst(root)


def test_non_utf8_facet_names_the_file(make_catalyst: Callable[..., Path]) -> None:
    root = make_catalyst("binary-facet")
    target = root / "questions" / "broken.md"
    target.parent.mkdir()
    target.write_bytes(b"\xff\xfe\x00")

    with pytest.raises(FacetReadError, match="broken.md"):
        load_catalyst(root)
    result = load_catalyst_safe(root)
    assert not result.success
    assert result.error is not None
    assert "broken.md" in result.error


def test_block_scalar_identifier_is_rejected(make_catalyst: Callable[..., Path]) -> None:
    root = make_catalyst(
        "block-id",
        manifest="id: |\n  my-catalyst\nname: Block\ndescription: Block scalar id\nversion: 1.0.0\n",
    )

    with pytest.raises(ManifestInvalidError, match="id: ID must be a valid NPM package name"):
        load_catalyst(root)
