# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading manifest YAML documents and JSON schemas."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import cast

import yaml

from .types import YAMLValue


class ManifestDocumentError(ValueError):
    """Raised when a manifest file cannot be parsed as YAML."""


class _ManifestLoader(yaml.SafeLoader):
    """Safe YAML loader that keeps timestamps as plain strings."""


_ManifestLoader.add_constructor(
    "tag:yaml.org,2002:timestamp",
    yaml.SafeLoader.construct_yaml_str,
)


def load_document(path: Path) -> YAMLValue:
    """Load a YAML document from disk.

    Args:
        path: Filesystem path to the YAML document.

    Returns:
        YAMLValue: Parsed document; ``None`` for an empty file.

    Raises:
        FileNotFoundError: If the document is missing.
        ManifestDocumentError: If the document is unreadable or is not valid UTF-8 YAML.
    """
    if not path.is_file():
        raise FileNotFoundError(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ManifestDocumentError(f"{path}: not valid UTF-8 ({exc})") from exc
    except OSError as exc:
        raise ManifestDocumentError(f"{path}: could not be read ({exc})") from exc
    try:
        payload = yaml.load(text, Loader=_ManifestLoader)  # noqa: S506 - SafeLoader subclass
    except yaml.YAMLError as exc:
        raise ManifestDocumentError(f"{path}: failed to parse YAML ({exc})") from exc
    return cast(YAMLValue, payload)


def dump_document(path: Path, payload: Mapping[str, YAMLValue]) -> None:
    """Serialise ``payload`` as block-style YAML into ``path``.

    Args:
        path: Destination file, overwritten when present.
        payload: Mapping to serialise; key order is preserved.
    """
    text = yaml.safe_dump(
        _plain(payload),
        indent=2,
        width=120,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
    path.write_text(text, encoding="utf-8")


def load_schema(path: Path) -> Mapping[str, YAMLValue]:
    """Load a JSON schema from disk and ensure it is a JSON object.

    Args:
        path: Filesystem path to the schema file.

    Returns:
        Mapping[str, YAMLValue]: Parsed JSON schema mapping.

    Raises:
        FileNotFoundError: If the schema file does not exist.
        ValueError: If the schema is not a JSON object.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as stream:
        payload = json.load(stream)
    if not isinstance(payload, Mapping):
        raise ValueError(f"{path}: expected a JSON object")
    return cast(Mapping[str, YAMLValue], payload)


def _plain(value: YAMLValue) -> YAMLValue:
    """Return ``value`` rebuilt from built-in containers so PyYAML can represent it."""

    if isinstance(value, Mapping):
        return {str(key): _plain(item) for key, item in value.items()}
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [_plain(item) for item in value]
    return value


__all__ = ["ManifestDocumentError", "dump_document", "load_document", "load_schema"]
