# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by catalyst and plan manifest operations."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .schema import SchemaViolation


class CatalystError(RuntimeError):
    """Base class for failures surfaced by catalyst loading."""


class DirectoryNotFoundError(CatalystError):
    """Raised when a catalyst directory does not exist."""

    def __init__(self, path: Path) -> None:
        """Create the error for the missing directory ``path``."""

        super().__init__(f"Catalyst directory not found: {path}")
        self.path = path


class ManifestMissingError(CatalystError):
    """Raised when a catalyst directory holds no manifest file."""

    def __init__(self, path: Path) -> None:
        """Create the error for the expected manifest location ``path``."""

        super().__init__(f"Catalyst manifest not found at {path}")
        self.path = path


class ManifestInvalidError(CatalystError):
    """Raised when a catalyst manifest fails schema validation."""

    def __init__(self, path: Path, detail: str, violations: Sequence[SchemaViolation] = ()) -> None:
        """Create the error for ``path`` with the aggregated validation ``detail``.

        Args:
            path: Manifest file that failed validation.
            detail: Aggregated, human-readable description of every violation.
            violations: Individual schema violations backing ``detail``.
        """

        super().__init__(f"Invalid catalyst manifest: {detail}")
        self.path = path
        self.violations = tuple(violations)


class FacetReadError(CatalystError):
    """Raised when a facet document cannot be read as UTF-8 text."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        """Create the error for the unreadable document ``path``."""

        super().__init__(f"Failed to read facet file {path}: {cause}")
        self.path = path


class BatchLoadError(CatalystError):
    """Raised when one identifier of a batch resolution fails to load."""

    def __init__(self, identifier: str, cause: BaseException) -> None:
        """Create the error naming ``identifier`` and wrapping ``cause``."""

        super().__init__(f"Failed to load catalyst '{identifier}': {cause}")
        self.identifier = identifier


class PlanManifestError(CatalystError):
    """Raised when a plan manifest is invalid or cannot be updated."""


__all__ = [
    "BatchLoadError",
    "CatalystError",
    "DirectoryNotFoundError",
    "FacetReadError",
    "ManifestInvalidError",
    "ManifestMissingError",
    "PlanManifestError",
]
