# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Immutable data models for catalysts, merged catalysts, and plan manifests."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from .facets import FACET_CATEGORIES, FacetCategory
from .types import YAMLValue


class FacetDeclaration(str, Enum):
    """Three-valued manifest declaration for a single facet."""

    PRESENT = "present"
    ABSENT = "absent"
    UNDECLARED = "undeclared"


class WarningKind(str, Enum):
    """Enumerate the classes of non-fatal facet warnings."""

    MISSING = "missing"
    UNDECLARED = "undeclared"


@dataclass(frozen=True, slots=True)
class FacetContent:
    """Single markdown file loaded from a facet directory."""

    filename: str
    content: str


@dataclass(frozen=True, slots=True)
class CatalystManifest:
    """Validated identity of a catalyst as declared in ``catalyst.yml``."""

    id: str
    name: str
    description: str
    version: str
    facets: Mapping[FacetCategory, bool] | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, YAMLValue]) -> CatalystManifest:
        """Build a manifest from a schema-validated mapping.

        Args:
            data: Manifest payload that already passed schema validation.

        Returns:
            CatalystManifest: Normalised manifest; unknown keys are dropped.
        """

        declared: dict[FacetCategory, bool] | None = None
        raw_facets = data.get("facets")
        if isinstance(raw_facets, Mapping):
            declared = {}
            for category in FACET_CATEGORIES:
                value = raw_facets.get(category.manifest_key)
                if isinstance(value, bool):
                    declared[category] = value
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            description=str(data["description"]),
            version=str(data["version"]),
            facets=MappingProxyType(declared) if declared is not None else None,
        )

    def declaration(self, category: FacetCategory) -> FacetDeclaration:
        """Return how the manifest declares ``category``.

        Args:
            category: Facet category to inspect.

        Returns:
            FacetDeclaration: ``PRESENT``/``ABSENT`` for explicit booleans, ``UNDECLARED`` otherwise.
        """

        if self.facets is None or category not in self.facets:
            return FacetDeclaration.UNDECLARED
        return FacetDeclaration.PRESENT if self.facets[category] else FacetDeclaration.ABSENT


@dataclass(frozen=True, slots=True)
class FacetWarning:
    """Non-fatal mismatch between declared and discovered facets."""

    category: FacetCategory
    kind: WarningKind
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class Catalyst:
    """Fully loaded catalyst: manifest, facet content, and source directory."""

    manifest: CatalystManifest
    facets: Mapping[FacetCategory, tuple[FacetContent, ...]]
    directory_path: Path
    warnings: tuple[FacetWarning, ...] = ()

    @property
    def id(self) -> str:
        """Return the manifest identifier of the catalyst."""

        return self.manifest.id

    def facet(self, category: FacetCategory) -> tuple[FacetContent, ...]:
        """Return the files loaded for ``category`` (empty when none were found)."""

        return self.facets.get(category, ())


@dataclass(frozen=True, slots=True)
class CatalystLoadResult:
    """Outcome of a non-raising catalyst load."""

    success: bool
    catalyst: Catalyst | None = None
    error: str | None = None
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class AttributedContent:
    """Merged facet content tagged with the catalyst it came from."""

    content: str
    source_id: str
    filename: str | None = None


@dataclass(frozen=True, slots=True)
class Contribution:
    """Per-catalyst statistics gathered while merging."""

    facet_types: tuple[FacetCategory, ...] = ()
    content_count: int = 0


@dataclass(frozen=True, slots=True)
class MergedCatalyst:
    """Ordered, attribution-preserving merge of several catalysts."""

    catalyst_ids: tuple[str, ...] = ()
    facets: Mapping[FacetCategory, tuple[AttributedContent, ...]] = field(
        default_factory=lambda: MappingProxyType({}),
    )
    contributions: Mapping[str, Contribution] = field(default_factory=lambda: MappingProxyType({}))

    def facet(self, category: FacetCategory) -> tuple[AttributedContent, ...]:
        """Return the merged items for ``category`` (empty when none were contributed)."""

        return self.facets.get(category, ())


@dataclass(frozen=True, slots=True)
class PlanManifest:
    """Identity of a plan and the ordered catalysts applied to it."""

    id: str
    title: str
    catalysts: tuple[str, ...] | None = None
    created: str | None = None
    metadata: Mapping[str, str] | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, YAMLValue]) -> PlanManifest:
        """Build a plan manifest from a schema-validated mapping."""

        catalysts = data.get("catalysts")
        metadata = data.get("metadata")
        created = data.get("created")
        return cls(
            id=str(data["id"]),
            title=str(data["title"]),
            catalysts=tuple(str(item) for item in catalysts) if isinstance(catalysts, Sequence) else None,
            created=str(created) if created is not None else None,
            metadata=(
                MappingProxyType({str(key): str(value) for key, value in metadata.items()})
                if isinstance(metadata, Mapping)
                else None
            ),
        )

    def to_mapping(self) -> dict[str, YAMLValue]:
        """Return a plain mapping suitable for YAML serialisation, omitting unset fields."""

        payload: dict[str, YAMLValue] = {"id": self.id, "title": self.title}
        if self.catalysts is not None:
            payload["catalysts"] = list(self.catalysts)
        if self.created is not None:
            payload["created"] = self.created
        if self.metadata is not None:
            payload["metadata"] = dict(self.metadata)
        return payload

    def with_updates(self, **updates: object) -> PlanManifest:
        """Return a copy with ``updates`` applied; ``None`` clears optional fields.

        Raises:
            TypeError: If an update names a field the manifest does not have, or
                ``catalysts`` is given as a single string.
        """

        changes: dict[str, object] = {}
        for key, value in updates.items():
            if key == "catalysts" and isinstance(value, str):
                raise TypeError("catalysts must be a sequence of identifiers, not a string")
            if key == "catalysts" and value is not None:
                value = tuple(value)  # type: ignore[call-overload]
            elif key == "metadata" and value is not None:
                value = MappingProxyType(dict(value))  # type: ignore[call-overload]
            changes[key] = value
        return replace(self, **changes)  # type: ignore[arg-type]


__all__ = [
    "AttributedContent",
    "Catalyst",
    "CatalystLoadResult",
    "CatalystManifest",
    "Contribution",
    "FacetContent",
    "FacetDeclaration",
    "FacetWarning",
    "MergedCatalyst",
    "PlanManifest",
    "WarningKind",
]
