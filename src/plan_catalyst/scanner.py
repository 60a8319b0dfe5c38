# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem scanning utilities for catalyst facet directories."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .errors import FacetReadError
from .facets import FacetCategory
from .models import FacetContent
from .types import CATALYST_MANIFEST_FILENAME, FACET_FILE_SUFFIX


@dataclass(slots=True)
class CatalystScanner:
    """Scan a catalyst directory for its manifest and facet documents."""

    catalyst_root: Path

    @property
    def manifest_path(self) -> Path:
        """Return the expected location of ``catalyst.yml``."""

        return self.catalyst_root / CATALYST_MANIFEST_FILENAME

    def facet_directory(self, category: FacetCategory) -> Path:
        """Return the directory holding ``category`` documents."""

        return self.catalyst_root / category.directory

    def has_facet_directory(self, category: FacetCategory) -> bool:
        """Return ``True`` when the directory for ``category`` exists."""

        return self.facet_directory(category).is_dir()

    def facet_documents(self, category: FacetCategory) -> tuple[Path, ...]:
        """Return markdown document paths for ``category`` sorted by filename.

        Subdirectories and files with other extensions are ignored.

        Returns:
            tuple[Path, ...]: Sorted markdown files; empty when the directory is absent.
        """
        directory = self.facet_directory(category)
        if not directory.is_dir():
            return ()
        paths = [path for path in directory.iterdir() if path.is_file() and path.name.endswith(FACET_FILE_SUFFIX)]
        return tuple(sorted(paths, key=lambda path: path.name))

    def load_facet(self, category: FacetCategory) -> tuple[FacetContent, ...]:
        """Read every markdown document for ``category`` verbatim.

        Returns:
            tuple[FacetContent, ...]: File contents in listing order.
        """
        return tuple(
            FacetContent(filename=path.name, content=_read_verbatim(path)) for path in self.facet_documents(category)
        )


def _read_verbatim(path: Path) -> str:
    """Return the UTF-8 text of ``path`` without newline translation.

    Raises:
        FacetReadError: If the file cannot be read or is not valid UTF-8.
    """

    try:
        with path.open("r", encoding="utf-8", newline="") as stream:
            return stream.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FacetReadError(path, exc) from exc


__all__ = ["CatalystScanner"]
