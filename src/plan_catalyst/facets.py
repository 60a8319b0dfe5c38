# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Fixed facet categories and their on-disk directory names."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Final


class FacetCategory(str, Enum):
    """Enumerate the six content categories a catalyst may provide."""

    QUESTIONS = "questions"
    CONSTRAINTS = "constraints"
    OUTPUT_TEMPLATES = "output-templates"
    DOMAIN_KNOWLEDGE = "domain-knowledge"
    PROCESS_GUIDANCE = "process-guidance"
    VALIDATION_RULES = "validation-rules"

    @property
    def directory(self) -> str:
        """Return the directory name holding this facet inside a catalyst.

        Returns:
            str: Directory name relative to the catalyst root.
        """

        return FACET_DIRECTORIES[self]

    @property
    def manifest_key(self) -> str:
        """Return the key used for this facet in the manifest ``facets`` block.

        Returns:
            str: camelCase manifest key (``outputTemplates`` for example).
        """

        head, *rest = self.value.split("-")
        return head + "".join(part.capitalize() for part in rest)

    @property
    def label(self) -> str:
        """Return the human-readable label for the facet.

        Returns:
            str: Title-cased label such as ``Output Templates``.
        """

        return " ".join(part.capitalize() for part in self.value.split("-"))

    @classmethod
    def from_raw(cls, raw: str) -> FacetCategory:
        """Return the category matching a directory name or manifest key.

        Args:
            raw: Facet token supplied by a caller (``output-templates`` or ``outputTemplates``).

        Returns:
            FacetCategory: Matching category.

        Raises:
            ValueError: If ``raw`` names no known facet.
        """

        token = raw.strip()
        for category in FACET_CATEGORIES:
            if token in (category.value, category.manifest_key):
                return category
        raise ValueError(f"unknown facet category '{raw}'")


FACET_CATEGORIES: Final[tuple[FacetCategory, ...]] = (
    FacetCategory.QUESTIONS,
    FacetCategory.CONSTRAINTS,
    FacetCategory.OUTPUT_TEMPLATES,
    FacetCategory.DOMAIN_KNOWLEDGE,
    FacetCategory.PROCESS_GUIDANCE,
    FacetCategory.VALIDATION_RULES,
)

FACET_DIRECTORIES: Final[Mapping[FacetCategory, str]] = MappingProxyType(
    {
        FacetCategory.QUESTIONS: "questions",
        FacetCategory.CONSTRAINTS: "constraints",
        FacetCategory.OUTPUT_TEMPLATES: "output-templates",
        FacetCategory.DOMAIN_KNOWLEDGE: "domain-knowledge",
        FacetCategory.PROCESS_GUIDANCE: "process-guidance",
        FacetCategory.VALIDATION_RULES: "validation-rules",
    },
)

__all__ = ["FACET_CATEGORIES", "FACET_DIRECTORIES", "FacetCategory"]
