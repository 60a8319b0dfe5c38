# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Read and write the ``plan.yaml`` manifest that lists a plan's catalysts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields
from datetime import datetime, timezone
from pathlib import Path
from typing import Final, cast

from .errors import PlanManifestError
from .io import ManifestDocumentError, dump_document, load_document
from .models import PlanManifest
from .schema import default_repository
from .types import PLAN_MANIFEST_FILENAME, YAMLValue

PLAN_MANIFEST_FIELDS: Final[frozenset[str]] = frozenset(item.name for item in fields(PlanManifest))


def plan_manifest_path(plan_directory: Path) -> Path:
    """Return the location of ``plan.yaml`` inside ``plan_directory``."""

    return Path(plan_directory) / PLAN_MANIFEST_FILENAME


def read_plan_manifest(plan_directory: Path) -> PlanManifest | None:
    """Read and validate the plan manifest.

    Plans created before catalyst support have no manifest; that case reads
    as ``None`` rather than an error.

    Args:
        plan_directory: Directory holding ``plan.yaml``.

    Returns:
        PlanManifest | None: Parsed manifest, or ``None`` when the file is absent.

    Raises:
        PlanManifestError: If the file exists but is not valid YAML or fails validation.
    """

    path = plan_manifest_path(plan_directory)
    try:
        document = load_document(path)
    except FileNotFoundError:
        return None
    except ManifestDocumentError as exc:
        raise PlanManifestError(f"Invalid plan manifest: {exc}") from exc
    outcome = default_repository().validate_plan_manifest(document)
    if outcome.value is None:
        raise PlanManifestError(f"Invalid plan manifest: {outcome.message}")
    return outcome.value


def write_plan_manifest(plan_directory: Path, manifest: PlanManifest) -> PlanManifest:
    """Validate ``manifest`` and write it to ``plan.yaml``.

    A ``created`` timestamp (UTC, ISO-8601) is added when the manifest has none.

    Args:
        plan_directory: Directory receiving ``plan.yaml``.
        manifest: Manifest to persist.

    Returns:
        PlanManifest: The manifest as written, including its timestamp.

    Raises:
        PlanManifestError: If ``manifest`` fails validation.
    """

    outcome = default_repository().validate_plan_manifest(manifest.to_mapping())
    if outcome.value is None:
        raise PlanManifestError(f"Invalid plan manifest: {outcome.message}")
    stamped = outcome.value
    if stamped.created is None:
        stamped = stamped.with_updates(created=datetime.now(timezone.utc).isoformat())
    dump_document(plan_manifest_path(plan_directory), stamped.to_mapping())
    return stamped


def update_plan_manifest(plan_directory: Path, updates: Mapping[str, object]) -> PlanManifest:
    """Merge ``updates`` into the stored manifest and write it back.

    Args:
        plan_directory: Directory holding ``plan.yaml``.
        updates: Fields to replace; a ``None`` value clears an optional field.

    Returns:
        PlanManifest: The manifest as written.

    Raises:
        PlanManifestError: If no manifest exists and ``updates`` lacks ``id`` or ``title``,
            or if the merged payload (unknown fields included) fails validation.
    """

    existing = read_plan_manifest(plan_directory)
    if existing is None and (not updates.get("id") or not updates.get("title")):
        raise PlanManifestError("Cannot create manifest without id and title")
    payload: dict[str, object] = dict(existing.to_mapping()) if existing is not None else {}
    for key, value in updates.items():
        if key not in PLAN_MANIFEST_FIELDS:
            raise PlanManifestError(f"Invalid plan manifest update: unknown field '{key}'")
        if value is None:
            payload.pop(key, None)
        else:
            payload[key] = list(value) if isinstance(value, tuple) else value
    outcome = default_repository().validate_plan_manifest(cast(YAMLValue, payload))
    if outcome.value is None:
        raise PlanManifestError(f"Invalid plan manifest: {outcome.message}")
    return write_plan_manifest(plan_directory, outcome.value)


def add_catalyst_to_manifest(plan_directory: Path, catalyst_id: str) -> PlanManifest:
    """Append ``catalyst_id`` to the plan's catalysts unless already listed."""

    manifest = read_plan_manifest(plan_directory)
    catalysts = list(manifest.catalysts or ()) if manifest is not None else []
    if catalyst_id not in catalysts:
        catalysts.append(catalyst_id)
    return update_plan_manifest(plan_directory, {"catalysts": catalysts})


def remove_catalyst_from_manifest(plan_directory: Path, catalyst_id: str) -> PlanManifest | None:
    """Remove ``catalyst_id`` from the plan's catalysts.

    The ``catalysts`` field is dropped once the list becomes empty. Nothing is
    written when the identifier was not listed.

    Returns:
        PlanManifest | None: The manifest after the change (``None`` when no manifest exists).
    """

    manifest = read_plan_manifest(plan_directory)
    current = list(manifest.catalysts or ()) if manifest is not None else []
    remaining = [item for item in current if item != catalyst_id]
    if len(remaining) == len(current):
        return manifest
    return update_plan_manifest(plan_directory, {"catalysts": remaining or None})


__all__ = [
    "add_catalyst_to_manifest",
    "plan_manifest_path",
    "read_plan_manifest",
    "remove_catalyst_from_manifest",
    "update_plan_manifest",
    "write_plan_manifest",
]
