"""
Schema Context

Responsibilities:
- Defines the typed resume DSL document (layout, design tokens, sections, item overrides)
- Validates untrusted input against the DSL shape with structured field errors
- Migrates documents authored against older DSL versions to the current version

Owns: DSL document model, validation, version migration chain
Never: Resolves tokens or makes layout decisions
"""

from resumark.contexts.schema.dsl_data_structure import DesignTokens, ResumeDsl, SectionConfig
from resumark.contexts.schema.exceptions import (
    DslFieldError,
    InvalidDslError,
    UnsupportedMigrationError,
)
from resumark.contexts.schema.migrator import (
    CURRENT_DSL_VERSION,
    MigrationRegistry,
    MigrationStep,
    can_migrate,
    get_migration_path,
    migrate,
)
from resumark.contexts.schema.validator import (
    ValidationResult,
    is_supported_version,
    validate,
    validate_or_throw,
)

__all__ = [
    # Document model
    "ResumeDsl",
    "DesignTokens",
    "SectionConfig",
    # Validation
    "validate",
    "validate_or_throw",
    "is_supported_version",
    "ValidationResult",
    # Migration
    "CURRENT_DSL_VERSION",
    "MigrationRegistry",
    "MigrationStep",
    "migrate",
    "can_migrate",
    "get_migration_path",
    # Errors
    "DslFieldError",
    "InvalidDslError",
    "UnsupportedMigrationError",
]
