# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model controlling catalyst loading behaviour."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .models import WarningKind


class LoaderOptions(BaseModel):
    """Options accepted by the catalyst loader.

    ``strict`` does not turn warnings into errors; it only suppresses the
    default display of warnings collected during a load.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strict: bool = Field(default=False, description="Suppress default display of load warnings.")
    warn_on_missing_facets: bool = Field(
        default=False,
        description="Warn when a facet declared true has no directory or no markdown files.",
    )
    warn_on_undeclared_facets: bool = Field(
        default=False,
        description="Warn when a facet declared false still ships markdown files.",
    )

    def warns_for(self, kind: WarningKind) -> bool:
        """Return ``True`` when the caller opted in to warnings of ``kind``."""

        if kind is WarningKind.MISSING:
            return self.warn_on_missing_facets
        return self.warn_on_undeclared_facets


DEFAULT_OPTIONS = LoaderOptions()

__all__ = ["DEFAULT_OPTIONS", "LoaderOptions"]
