# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for catalyst and plan manifests."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, TypeAlias

YAMLPrimitive: TypeAlias = str | int | float | bool | None
YAMLValue: TypeAlias = YAMLPrimitive | Sequence["YAMLValue"] | Mapping[str, "YAMLValue"]

CATALYST_MANIFEST_FILENAME: Final[str] = "catalyst.yml"
PLAN_MANIFEST_FILENAME: Final[str] = "plan.yaml"
FACET_FILE_SUFFIX: Final[str] = ".md"
ROOT_FIELD: Final[str] = "<root>"

__all__ = [
    "CATALYST_MANIFEST_FILENAME",
    "FACET_FILE_SUFFIX",
    "PLAN_MANIFEST_FILENAME",
    "ROOT_FIELD",
    "YAMLPrimitive",
    "YAMLValue",
]
