"""
DSL Schema Validation

Checks that an untrusted value conforms to the resume DSL shape and returns either
a typed ResumeDsl or a structured list of field errors.

Checks:
- presence and type of version, layout, tokens, sections
- version format (MAJOR.MINOR[.PATCH])
- every section has a string id, a boolean visible, a numeric order and a known column
- section ids are unique
- section count stays within MAX_SECTIONS

Unknown extra fields are permitted and passed through. No side effects.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from pydantic import ValidationError

from resumark.contexts.schema.dsl_data_structure import ResumeDsl
from resumark.contexts.schema.exceptions import DslFieldError, InvalidDslError
from resumark.contexts.schema.logger import log_validation_failure
from resumark.contexts.schema.migrator import CURRENT_DSL_VERSION, MigrationRegistry, default_registry

MAX_SECTIONS = 50

# pydantic error types -> stable error codes exposed to callers
ERROR_CODES = {
    "missing": "missing",
    "string_pattern_mismatch": "invalid_version",
    "literal_error": "invalid_enum",
    "string_too_short": "empty_value",
    "model_type": "invalid_type",
    "model_attributes_type": "invalid_type",
    "dict_type": "invalid_type",
    "list_type": "invalid_type",
    "string_type": "invalid_type",
    "bool_type": "invalid_type",
    "invalid_type": "invalid_type",
    "non_finite": "non_finite",
}


@dataclass
class ValidationResult:
    """
    Result of DSL validation.

    Attributes:
        valid: Whether the document passed all checks
        data: Typed document (only when valid)
        errors: Field errors (only when invalid)
    """

    valid: bool
    data: Optional[ResumeDsl] = None
    errors: List[DslFieldError] = field(default_factory=list)


def _format_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc)


def _convert_pydantic_errors(exc: ValidationError) -> List[DslFieldError]:
    errors = []
    for error in exc.errors(include_url=False):
        errors.append(
            DslFieldError(
                path=_format_path(error["loc"]),
                message=error["msg"],
                code=ERROR_CODES.get(error["type"], error["type"]),
            )
        )
    return errors


def _section_ids(raw: Any, data: Optional[ResumeDsl]) -> Optional[List[Any]]:
    """Section ids in document order, from the typed model when it validated, else from raw input."""
    if data is not None:
        return [section.id for section in data.sections]
    if isinstance(raw, dict) and isinstance(raw.get("sections"), list):
        return [section.get("id") if isinstance(section, dict) else None for section in raw["sections"]]
    return None


def _check_sections(section_ids: Optional[List[Any]]) -> List[DslFieldError]:
    """Cross-item checks pydantic cannot express per field."""
    if section_ids is None:
        return []

    errors = []

    if len(section_ids) > MAX_SECTIONS:
        errors.append(
            DslFieldError(
                path="sections",
                message=f"At most {MAX_SECTIONS} sections are allowed, got {len(section_ids)}",
                code="too_many_sections",
            )
        )

    seen = set()
    for i, section_id in enumerate(section_ids):
        if not isinstance(section_id, str):
            continue
        if section_id in seen:
            errors.append(
                DslFieldError(
                    path=f"sections.{i}.id",
                    message=f"Duplicate section id '{section_id}'",
                    code="duplicate_section_id",
                )
            )
        seen.add(section_id)

    return errors


def validate(raw: Any) -> ValidationResult:
    """
    Validate an untrusted value against the DSL schema.

    Args:
        raw: Any value (typically parsed JSON/YAML)

    Returns:
        ValidationResult with data when valid, errors otherwise

    Example:
        >>> result = validate({})
        >>> sorted(e.path for e in result.errors)
        ['layout', 'sections', 'tokens', 'version']
    """
    errors: List[DslFieldError] = []
    data = None

    try:
        data = ResumeDsl.model_validate(raw)
    except ValidationError as e:
        errors.extend(_convert_pydantic_errors(e))

    errors.extend(_check_sections(_section_ids(raw, data)))

    if errors:
        log_validation_failure(errors)
        return ValidationResult(valid=False, errors=errors)

    return ValidationResult(valid=True, data=data)


def validate_or_throw(raw: Any) -> ResumeDsl:
    """
    Validate an untrusted value, raising on failure.

    Args:
        raw: Any value (typically parsed JSON/YAML)

    Returns:
        Typed ResumeDsl

    Raises:
        InvalidDslError: With the structured error list
    """
    result = validate(raw)
    if not result.valid:
        raise InvalidDslError(result.errors)
    return result.data


def is_supported_version(version: str, registry: Optional[MigrationRegistry] = None) -> bool:
    """Whether documents of this version can be compiled (current, or migratable to current)."""
    if not isinstance(version, str):
        return False
    return (registry or default_registry).can_migrate(version, CURRENT_DSL_VERSION)
