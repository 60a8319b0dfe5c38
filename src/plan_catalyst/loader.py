# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""High-level loader that materialises catalysts from local directories."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from .errors import (
    BatchLoadError,
    CatalystError,
    DirectoryNotFoundError,
    ManifestInvalidError,
    ManifestMissingError,
)
from .facets import FACET_CATEGORIES, FacetCategory
from .io import ManifestDocumentError, load_document
from .models import Catalyst, CatalystLoadResult, CatalystManifest, FacetContent, FacetWarning
from .options import DEFAULT_OPTIONS, LoaderOptions
from .reconcile import Discovery, reconcile, warning_for
from .scanner import CatalystScanner
from .schema import SchemaRepository, SchemaViolation, default_repository
from .types import ROOT_FIELD


@dataclass(slots=True)
class CatalystLoader:
    """Loader that validates manifests and collects facet content from disk.

    Relative catalyst paths resolve against ``base_path`` (the current working
    directory when unset). Only local directories are supported.
    """

    base_path: Path | None = None
    options: LoaderOptions = DEFAULT_OPTIONS
    _schemas: SchemaRepository = field(default_factory=default_repository, repr=False)

    def resolve_path(self, identifier: str | Path) -> Path:
        """Return ``identifier`` as an absolute path.

        Args:
            identifier: Absolute or relative catalyst directory path.

        Returns:
            Path: Absolute path; absolute identifiers pass through unchanged.
        """

        base = self.base_path if self.base_path is not None else Path.cwd()
        return Path(os.path.abspath(base / Path(identifier)))

    def load(self, directory_path: str | Path) -> Catalyst:
        """Load the catalyst stored in ``directory_path``.

        Args:
            directory_path: Catalyst directory, absolute or relative to ``base_path``.

        Returns:
            Catalyst: Manifest, facet content, absolute path, and any facet warnings.

        Raises:
            DirectoryNotFoundError: If the directory does not exist.
            ManifestMissingError: If ``catalyst.yml`` is absent.
            ManifestInvalidError: If ``catalyst.yml`` fails to parse or validate.
            FacetReadError: If a facet document is unreadable or not valid UTF-8.
        """

        absolute_path = self.resolve_path(directory_path)
        if not absolute_path.is_dir():
            raise DirectoryNotFoundError(absolute_path)
        scanner = CatalystScanner(absolute_path)
        manifest = self._load_manifest(scanner.manifest_path)
        facets, warnings = self._load_facets(scanner, manifest)
        return Catalyst(
            manifest=manifest,
            facets=MappingProxyType(facets),
            directory_path=absolute_path,
            warnings=warnings,
        )

    def load_safe(self, directory_path: str | Path) -> CatalystLoadResult:
        """Load a catalyst, reporting failures in the result instead of raising.

        Args:
            directory_path: Catalyst directory, absolute or relative to ``base_path``.

        Returns:
            CatalystLoadResult: ``success`` with the catalyst, or the failure message.
        """

        try:
            catalyst = self.load(directory_path)
        except CatalystError as exc:
            return CatalystLoadResult(success=False, error=str(exc))
        return CatalystLoadResult(
            success=True,
            catalyst=catalyst,
            warnings=tuple(str(warning) for warning in catalyst.warnings),
        )

    def resolve(self, identifiers: Sequence[str]) -> list[Catalyst]:
        """Load every identifier in order, aborting on the first failure.

        Args:
            identifiers: Catalyst directory paths, absolute or relative to ``base_path``.

        Returns:
            list[Catalyst]: Catalysts in the order of ``identifiers``.

        Raises:
            BatchLoadError: Naming the first identifier that failed to load.
        """

        catalysts: list[Catalyst] = []
        for identifier in identifiers:
            try:
                catalysts.append(self.load(identifier))
            except CatalystError as exc:
                raise BatchLoadError(identifier, exc) from exc
        return catalysts

    def _load_manifest(self, manifest_path: Path) -> CatalystManifest:
        try:
            document = load_document(manifest_path)
        except FileNotFoundError as exc:
            raise ManifestMissingError(manifest_path) from exc
        except ManifestDocumentError as exc:
            violation = SchemaViolation(ROOT_FIELD, str(exc))
            raise ManifestInvalidError(manifest_path, violation.render(), (violation,)) from exc
        outcome = self._schemas.validate_catalyst_manifest(document)
        if outcome.value is None:
            raise ManifestInvalidError(manifest_path, outcome.message, outcome.violations)
        return outcome.value

    def _load_facets(
        self,
        scanner: CatalystScanner,
        manifest: CatalystManifest,
    ) -> tuple[dict[FacetCategory, tuple[FacetContent, ...]], tuple[FacetWarning, ...]]:
        """Load facet content and reconcile it with the manifest declarations.

        Args:
            scanner: Scanner bound to the catalyst directory.
            manifest: Validated manifest whose ``facets`` block is consulted.

        Returns:
            tuple: Facet mapping holding only non-empty categories, and the warnings raised.
        """

        facets: dict[FacetCategory, tuple[FacetContent, ...]] = {}
        warnings: list[FacetWarning] = []
        for category in FACET_CATEGORIES:
            contents = scanner.load_facet(category)
            discovery = Discovery.FOUND if contents else Discovery.MISSING
            action = reconcile(manifest.declaration(category), discovery)
            if action.load:
                facets[category] = contents
            warning = warning_for(
                category,
                action,
                self.options,
                directory_exists=scanner.has_facet_directory(category),
            )
            if warning is not None:
                warnings.append(warning)
        return facets, tuple(warnings)


def load_catalyst(
    directory_path: str | Path,
    options: LoaderOptions | None = None,
    *,
    base_path: Path | None = None,
) -> Catalyst:
    """Load a catalyst from a local directory.

    Args:
        directory_path: Catalyst directory, absolute or relative to ``base_path``.
        options: Loader options; defaults apply when omitted.
        base_path: Base for relative paths; defaults to the working directory.

    Returns:
        Catalyst: Loaded catalyst.
    """

    return CatalystLoader(base_path=base_path, options=options or DEFAULT_OPTIONS).load(directory_path)


def load_catalyst_safe(
    directory_path: str | Path,
    options: LoaderOptions | None = None,
    *,
    base_path: Path | None = None,
) -> CatalystLoadResult:
    """Load a catalyst, returning a result object instead of raising."""

    return CatalystLoader(base_path=base_path, options=options or DEFAULT_OPTIONS).load_safe(directory_path)


def resolve_catalysts(
    identifiers: Sequence[str],
    base_path: Path | None = None,
    options: LoaderOptions | None = None,
) -> list[Catalyst]:
    """Resolve catalyst identifiers as local paths and load them in order.

    Args:
        identifiers: Catalyst directory paths.
        base_path: Base for relative identifiers; defaults to the working directory.
        options: Loader options applied to every catalyst.

    Returns:
        list[Catalyst]: Loaded catalysts in input order.

    Raises:
        BatchLoadError: When any identifier fails; no partial list is returned.
    """

    return CatalystLoader(base_path=base_path, options=options or DEFAULT_OPTIONS).resolve(identifiers)


__all__ = ["CatalystLoader", "load_catalyst", "load_catalyst_safe", "resolve_catalysts"]
