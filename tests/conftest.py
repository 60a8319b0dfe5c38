# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures that build catalyst directories on disk."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path

import pytest

CatalystFactory = Callable[..., Path]

EXPLORATION_QUESTIONS = "# Exploration Questions\n\n- What problem are you trying to solve?\n"
SHAPING_QUESTIONS = "# Shaping Questions\n\n- What is the smallest useful slice?\n"


def write_catalyst(
    root: Path,
    *,
    manifest: str | None,
    files: Mapping[str, str],
) -> Path:
    """Create a catalyst directory under ``root`` with ``manifest`` and facet ``files``.

    ``files`` maps relative paths (``questions/exploration.md``) to their text.
    """

    root.mkdir(parents=True, exist_ok=True)
    if manifest is not None:
        (root / "catalyst.yml").write_text(manifest, encoding="utf-8")
    for relative, text in files.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    return root


def manifest_yaml(catalyst_id: str, *, version: str = "1.0.0", facets: str = "") -> str:
    """Return a minimal ``catalyst.yml`` body for ``catalyst_id``."""

    body = (
        f"id: '{catalyst_id}'\n"
        f"name: Test catalyst {catalyst_id}\n"
        "description: Catalyst used by the test-suite\n"
        f"version: {version}\n"
    )
    if facets:
        body += "facets:\n" + facets
    return body


@pytest.fixture
def complete_catalyst(tmp_path: Path) -> Path:
    """Catalyst providing all six facets, with two files in questions and constraints."""

    return write_catalyst(
        tmp_path / "complete-catalyst",
        manifest=manifest_yaml(
            "@test/complete-catalyst",
            facets=(
                "  questions: true\n"
                "  constraints: true\n"
                "  outputTemplates: true\n"
                "  domainKnowledge: true\n"
                "  processGuidance: true\n"
                "  validationRules: true\n"
            ),
        ),
        files={
            "questions/exploration.md": EXPLORATION_QUESTIONS,
            "questions/shaping.md": SHAPING_QUESTIONS,
            "questions/notes.txt": "not markdown\n",
            "constraints/testing.md": "# Testing\n\nEvery change ships with tests.\n",
            "constraints/documentation.md": "# Documentation\n\nPublic APIs are documented.\n",
            "output-templates/press-release.md": "# Press Release\n",
            "domain-knowledge/overview.md": "# Domain Overview\n",
            "process-guidance/lifecycle.md": "# Lifecycle\n",
            "validation-rules/checklist.md": "# Checklist\n",
        },
    )


@pytest.fixture
def partial_catalyst(tmp_path: Path) -> Path:
    """Catalyst providing only questions and constraints, with a prerelease version."""

    return write_catalyst(
        tmp_path / "partial-catalyst",
        manifest=manifest_yaml(
            "@test/partial-catalyst",
            version="1.0.0-dev.0",
            facets="  questions: true\n  constraints: true\n",
        ),
        files={
            "questions/partial.md": "# Partial Questions\n",
            "constraints/partial.md": "# Partial Constraints\n",
        },
    )


@pytest.fixture
def manifestless_catalyst(tmp_path: Path) -> Path:
    """Directory with facet content but no ``catalyst.yml``."""

    return write_catalyst(
        tmp_path / "invalid-catalyst",
        manifest=None,
        files={"questions/orphan.md": "# Orphan\n"},
    )


@pytest.fixture
def make_catalyst(tmp_path: Path) -> CatalystFactory:
    """Return a factory creating catalyst directories under ``tmp_path``.

    The factory accepts ``name``, ``catalyst_id``, ``version``, ``facets`` (the
    indented body of the manifest ``facets`` block), ``files``, and ``manifest``
    (a raw manifest body overriding the generated one).
    """

    def _make(
        name: str,
        *,
        catalyst_id: str | None = None,
        version: str = "1.0.0",
        facets: str = "",
        files: Mapping[str, str] | None = None,
        manifest: str | None = None,
    ) -> Path:
        body = manifest if manifest is not None else manifest_yaml(catalyst_id or name, version=version, facets=facets)
        return write_catalyst(tmp_path / name, manifest=body, files=files or {})

    return _make
