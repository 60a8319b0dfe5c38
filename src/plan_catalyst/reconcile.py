# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Reconcile manifest facet declarations with what a directory scan found."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final

from .facets import FacetCategory
from .models import FacetDeclaration, FacetWarning, WarningKind
from .options import LoaderOptions


class Discovery(str, Enum):
    """Whether a facet directory yielded at least one markdown file."""

    FOUND = "found"
    MISSING = "missing"


@dataclass(frozen=True, slots=True)
class FacetAction:
    """What the loader does with one facet: keep its files, and maybe warn."""

    load: bool
    warning: WarningKind | None = None


LOAD: Final[FacetAction] = FacetAction(load=True)
LOAD_WARN_UNDECLARED: Final[FacetAction] = FacetAction(load=True, warning=WarningKind.UNDECLARED)
SKIP: Final[FacetAction] = FacetAction(load=False)
SKIP_WARN_MISSING: Final[FacetAction] = FacetAction(load=False, warning=WarningKind.MISSING)

RECONCILIATION_TABLE: Final[Mapping[tuple[FacetDeclaration, Discovery], FacetAction]] = MappingProxyType(
    {
        (FacetDeclaration.PRESENT, Discovery.FOUND): LOAD,
        (FacetDeclaration.PRESENT, Discovery.MISSING): SKIP_WARN_MISSING,
        (FacetDeclaration.ABSENT, Discovery.FOUND): LOAD_WARN_UNDECLARED,
        (FacetDeclaration.ABSENT, Discovery.MISSING): SKIP,
        (FacetDeclaration.UNDECLARED, Discovery.FOUND): LOAD,
        (FacetDeclaration.UNDECLARED, Discovery.MISSING): SKIP,
    },
)


def reconcile(declaration: FacetDeclaration, discovery: Discovery) -> FacetAction:
    """Return the action for a facet given its declaration and scan result."""

    return RECONCILIATION_TABLE[(declaration, discovery)]


def warning_for(
    category: FacetCategory,
    action: FacetAction,
    options: LoaderOptions,
    *,
    directory_exists: bool,
) -> FacetWarning | None:
    """Build the warning implied by ``action`` when the caller opted in to its class.

    Args:
        category: Facet category being reconciled.
        action: Action selected from :data:`RECONCILIATION_TABLE`.
        options: Loader options carrying the warning opt-ins.
        directory_exists: Whether the facet directory exists on disk (it may be empty).

    Returns:
        FacetWarning | None: Warning to record, or ``None`` when nothing should be reported.
    """

    kind = action.warning
    if kind is None or not options.warns_for(kind):
        return None
    if kind is WarningKind.UNDECLARED:
        message = f"Facet '{category.value}' is present but declared as false in manifest"
    elif directory_exists:
        message = (
            f"Facet '{category.value}' is declared in manifest but directory "
            f"'{category.directory}' contains no markdown files"
        )
    else:
        message = f"Facet '{category.value}' is declared in manifest but directory '{category.directory}' not found"
    return FacetWarning(category=category, kind=kind, message=message)


__all__ = [
    "RECONCILIATION_TABLE",
    "Discovery",
    "FacetAction",
    "reconcile",
    "warning_for",
]
