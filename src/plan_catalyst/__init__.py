# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Composable, layerable guidance packages ("catalysts") for plan creation."""

from __future__ import annotations

from typing import Final

from .errors import (
    BatchLoadError,
    CatalystError,
    DirectoryNotFoundError,
    FacetReadError,
    ManifestInvalidError,
    ManifestMissingError,
    PlanManifestError,
)
from .facets import FACET_CATEGORIES, FACET_DIRECTORIES, FacetCategory
from .loader import CatalystLoader, load_catalyst, load_catalyst_safe, resolve_catalysts
from .merger import merge_catalysts
from .models import (
    AttributedContent,
    Catalyst,
    CatalystLoadResult,
    CatalystManifest,
    Contribution,
    FacetContent,
    FacetWarning,
    MergedCatalyst,
    PlanManifest,
)
from .options import LoaderOptions
from .plan_manifest import (
    add_catalyst_to_manifest,
    read_plan_manifest,
    remove_catalyst_from_manifest,
    update_plan_manifest,
    write_plan_manifest,
)
from .render import render_all_facets, render_facet, summarize_merge
from .schema import (
    SchemaRepository,
    SchemaViolation,
    ValidationOutcome,
    validate_catalyst_manifest,
    validate_plan_manifest,
)

__all__: Final[tuple[str, ...]] = (
    "FACET_CATEGORIES",
    "FACET_DIRECTORIES",
    "AttributedContent",
    "BatchLoadError",
    "Catalyst",
    "CatalystError",
    "CatalystLoadResult",
    "CatalystLoader",
    "CatalystManifest",
    "Contribution",
    "DirectoryNotFoundError",
    "FacetCategory",
    "FacetContent",
    "FacetReadError",
    "FacetWarning",
    "LoaderOptions",
    "ManifestInvalidError",
    "ManifestMissingError",
    "MergedCatalyst",
    "PlanManifest",
    "PlanManifestError",
    "SchemaRepository",
    "SchemaViolation",
    "ValidationOutcome",
    "add_catalyst_to_manifest",
    "load_catalyst",
    "load_catalyst_safe",
    "merge_catalysts",
    "read_plan_manifest",
    "remove_catalyst_from_manifest",
    "render_all_facets",
    "render_facet",
    "resolve_catalysts",
    "summarize_merge",
    "update_plan_manifest",
    "validate_catalyst_manifest",
    "validate_plan_manifest",
    "write_plan_manifest",
)
