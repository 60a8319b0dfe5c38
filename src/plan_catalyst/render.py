# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Render merged facets into attributed display text."""

from __future__ import annotations

from typing import Final

from .facets import FACET_CATEGORIES, FacetCategory
from .models import MergedCatalyst

EMPTY_MERGE_SUMMARY: Final[str] = "No catalysts merged"


def render_facet(merged: MergedCatalyst, category: FacetCategory) -> str:
    """Return the merged content of ``category`` grouped by source catalyst.

    A ``From <id>:`` header opens every run of consecutive items sharing a
    source; runs after the first are separated by a blank line.

    Args:
        merged: Result of :func:`plan_catalyst.merger.merge_catalysts`.
        category: Facet category to render.

    Returns:
        str: Rendered text, or ``""`` when the category has no content.
    """

    lines: list[str] = []
    current_source: str | None = None
    for item in merged.facet(category):
        if item.source_id != current_source:
            if lines:
                lines.append("")
            lines.append(f"From {item.source_id}:")
            current_source = item.source_id
        lines.append(item.content)
    return "\n".join(lines)


def render_all_facets(merged: MergedCatalyst) -> dict[FacetCategory, str]:
    """Render every facet category, using ``""`` for categories without content."""

    return {category: render_facet(merged, category) for category in FACET_CATEGORIES}


def summarize_merge(merged: MergedCatalyst) -> str:
    """Describe which catalysts were merged and what each contributed.

    Args:
        merged: Result of :func:`plan_catalyst.merger.merge_catalysts`.

    Returns:
        str: Multi-line summary, or ``"No catalysts merged"`` for an empty merge.
    """

    if not merged.catalyst_ids:
        return EMPTY_MERGE_SUMMARY
    count = len(merged.catalyst_ids)
    lines = [f"Merged {count} catalyst{'' if count == 1 else 's'}:"]
    for catalyst_id, contribution in merged.contributions.items():
        facet_names = ", ".join(category.label for category in contribution.facet_types) or "none"
        lines.extend(
            [
                "",
                f"  {catalyst_id}:",
                f"    Facets: {facet_names}",
                f"    Content items: {contribution.content_count}",
            ],
        )
    return "\n".join(lines)


__all__ = ["EMPTY_MERGE_SUMMARY", "render_all_facets", "render_facet", "summarize_merge"]
