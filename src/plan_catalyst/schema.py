# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema validation for catalyst and plan manifests."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Final, Generic, TypeVar

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from .io import load_schema
from .models import CatalystManifest, PlanManifest
from .types import ROOT_FIELD, YAMLValue

CATALYST_SCHEMA_FILENAME: Final[str] = "catalyst_manifest.schema.json"
PLAN_SCHEMA_FILENAME: Final[str] = "plan_manifest.schema.json"
DEFAULT_SCHEMA_ROOT: Final[Path] = Path(__file__).resolve().parent / "schemas"
MESSAGE_OVERRIDES_KEY: Final[str] = "x-messages"

ModelT = TypeVar("ModelT")


@dataclass(frozen=True, slots=True)
class SchemaViolation:
    """Single failed rule, addressed by a dotted field path."""

    field_path: str
    message: str

    def render(self) -> str:
        """Return the violation formatted as ``path: message``."""

        return f"{self.field_path}: {self.message}"


@dataclass(frozen=True, slots=True)
class ValidationOutcome(Generic[ModelT]):
    """Result of validating a candidate manifest document."""

    value: ModelT | None
    violations: tuple[SchemaViolation, ...] = ()

    @property
    def ok(self) -> bool:
        """Return ``True`` when the document satisfied every rule."""

        return not self.violations

    @property
    def message(self) -> str:
        """Return every violation joined into one display string."""

        return "; ".join(violation.render() for violation in self.violations)


@dataclass(slots=True)
class SchemaRepository:
    """Manage JSON schema validators for catalyst and plan manifests."""

    schema_root: Path
    catalyst_validator: Draft202012Validator
    plan_validator: Draft202012Validator

    @classmethod
    def load(cls, *, schema_root: Path | None = None) -> SchemaRepository:
        """Load schema validators from disk.

        Args:
            schema_root: Optional override for the schema directory; defaults to the
                schemas bundled with the package.

        Returns:
            SchemaRepository: Repository configured with catalyst and plan validators.
        """
        resolved_root = schema_root or DEFAULT_SCHEMA_ROOT
        catalyst_schema = load_schema(resolved_root / CATALYST_SCHEMA_FILENAME)
        plan_schema = load_schema(resolved_root / PLAN_SCHEMA_FILENAME)
        Draft202012Validator.check_schema(catalyst_schema)
        Draft202012Validator.check_schema(plan_schema)
        return cls(
            schema_root=resolved_root,
            catalyst_validator=Draft202012Validator(catalyst_schema),
            plan_validator=Draft202012Validator(plan_schema),
        )

    def validate_catalyst_manifest(self, document: YAMLValue) -> ValidationOutcome[CatalystManifest]:
        """Validate a parsed ``catalyst.yml`` payload.

        Args:
            document: Parsed YAML document.

        Returns:
            ValidationOutcome[CatalystManifest]: Normalised manifest or the list of violations.
        """

        return _validate(self.catalyst_validator, document, CatalystManifest.from_mapping)

    def validate_plan_manifest(self, document: YAMLValue) -> ValidationOutcome[PlanManifest]:
        """Validate a parsed ``plan.yaml`` payload.

        Args:
            document: Parsed YAML document.

        Returns:
            ValidationOutcome[PlanManifest]: Normalised manifest or the list of violations.
        """

        return _validate(self.plan_validator, document, PlanManifest.from_mapping)


@lru_cache(maxsize=1)
def default_repository() -> SchemaRepository:
    """Return the cached repository built from the bundled schemas."""

    return SchemaRepository.load()


def validate_catalyst_manifest(document: YAMLValue) -> ValidationOutcome[CatalystManifest]:
    """Validate ``document`` against the bundled catalyst manifest schema."""

    return default_repository().validate_catalyst_manifest(document)


def validate_plan_manifest(document: YAMLValue) -> ValidationOutcome[PlanManifest]:
    """Validate ``document`` against the bundled plan manifest schema."""

    return default_repository().validate_plan_manifest(document)


def _validate(
    validator: Draft202012Validator,
    document: YAMLValue,
    build: Callable[[Mapping[str, YAMLValue]], ModelT],
) -> ValidationOutcome[ModelT]:
    if not isinstance(document, Mapping):
        return ValidationOutcome(
            value=None,
            violations=(SchemaViolation(ROOT_FIELD, "expected a mapping of manifest fields"),),
        )
    violations = _collect_violations(validator.iter_errors(document))
    if violations:
        return ValidationOutcome(value=None, violations=violations)
    return ValidationOutcome(value=build(document))


def _collect_violations(errors: Iterable[ValidationError]) -> tuple[SchemaViolation, ...]:
    """Translate jsonschema errors into ordered, de-duplicated violations.

    Args:
        errors: Errors yielded by ``iter_errors``.

    Returns:
        tuple[SchemaViolation, ...]: Violations sorted by field path.
    """

    seen: set[SchemaViolation] = set()
    ordered: list[SchemaViolation] = []
    for error in errors:
        for violation in _violations_for(error):
            if violation in seen:
                continue
            seen.add(violation)
            ordered.append(violation)
    return tuple(sorted(ordered, key=lambda violation: violation.field_path))


def _violations_for(error: ValidationError) -> list[SchemaViolation]:
    base = [str(part) for part in error.absolute_path]
    if error.validator == "required":
        instance = error.instance if isinstance(error.instance, Mapping) else {}
        return [
            SchemaViolation(".".join([*base, str(key)]), "Required")
            for key in error.validator_value
            if key not in instance
        ]
    overrides = error.schema.get(MESSAGE_OVERRIDES_KEY, {}) if isinstance(error.schema, Mapping) else {}
    message = overrides.get(error.validator, error.message)
    return [SchemaViolation(".".join(base) or ROOT_FIELD, message)]


__all__ = [
    "SchemaRepository",
    "SchemaViolation",
    "ValidationOutcome",
    "default_repository",
    "validate_catalyst_manifest",
    "validate_plan_manifest",
]
