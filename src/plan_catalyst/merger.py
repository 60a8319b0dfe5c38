# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Ordered, attribution-preserving merge of facet content across catalysts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from .facets import FACET_CATEGORIES, FacetCategory
from .models import AttributedContent, Catalyst, Contribution, MergedCatalyst


@dataclass(slots=True)
class _ContributionTally:
    """Mutable accumulator for one catalyst while merging."""

    facet_types: list[FacetCategory] = field(default_factory=list)
    content_count: int = 0

    def record(self, category: FacetCategory, count: int) -> None:
        """Add ``count`` items contributed to ``category``.

        Args:
            category: Facet category the items were merged into.
            count: Number of items the catalyst contributed to ``category``.
        """

        if category not in self.facet_types:
            self.facet_types.append(category)
        self.content_count += count

    def freeze(self) -> Contribution:
        """Return the immutable contribution with facets in canonical order."""

        ordered = tuple(category for category in FACET_CATEGORIES if category in self.facet_types)
        return Contribution(facet_types=ordered, content_count=self.content_count)


def merge_catalysts(catalysts: Sequence[Catalyst]) -> MergedCatalyst:
    """Concatenate facet content from ``catalysts`` in input order.

    Each category is merged independently: every item from the first catalyst
    precedes every item from the second, and so on, with each catalyst's own
    file order kept. Items are tagged with the contributing catalyst id.
    Overlapping content is neither deduplicated nor reconciled.

    Args:
        catalysts: Loaded catalysts; earlier entries form the base layer.

    Returns:
        MergedCatalyst: Merged facets, ids in input order, and per-catalyst statistics.
    """

    tallies: dict[str, _ContributionTally] = {}
    for catalyst in catalysts:
        tallies.setdefault(catalyst.id, _ContributionTally())

    facets: dict[FacetCategory, tuple[AttributedContent, ...]] = {}
    for category in FACET_CATEGORIES:
        merged: list[AttributedContent] = []
        for catalyst in catalysts:
            contents = catalyst.facet(category)
            if not contents:
                continue
            merged.extend(
                AttributedContent(content=item.content, source_id=catalyst.id, filename=item.filename)
                for item in contents
            )
            tallies[catalyst.id].record(category, len(contents))
        if merged:
            facets[category] = tuple(merged)

    return MergedCatalyst(
        catalyst_ids=tuple(catalyst.id for catalyst in catalysts),
        facets=MappingProxyType(facets),
        contributions=MappingProxyType({catalyst_id: tally.freeze() for catalyst_id, tally in tallies.items()}),
    )


__all__ = ["merge_catalysts"]
