"""Custom exceptions for the schema context with structured field errors."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class DslFieldError:
    """
    A single schema violation.

    Attributes:
        path: Dotted field path (e.g., "sections.2.column"); "" for the document root
        message: Human-readable description
        code: Machine-readable error code (e.g., "missing", "duplicate_section_id")
    """

    path: str
    message: str
    code: str

    def to_dict(self) -> dict:
        return {"path": self.path, "message": self.message, "code": self.code}

    def __str__(self) -> str:
        return f"{self.path or '<root>'}: {self.message}"


class InvalidDslError(ValueError):
    """
    Exception raised when a DSL document fails schema validation.

    Always recoverable by the caller by fixing the input.

    Attributes:
        errors: Structured list of field errors
    """

    def __init__(self, errors: List[DslFieldError], message: str = "Invalid resume DSL"):
        self.errors = list(errors)
        self.message = message

        # Build enhanced error message
        parts = [f"{message} ({len(self.errors)} error{'s' if len(self.errors) != 1 else ''})"]
        for error in self.errors[:10]:
            parts.append(f"  {error} [{error.code}]")
        if len(self.errors) > 10:
            parts.append(f"  ... and {len(self.errors) - 10} more errors")

        super().__init__("\n".join(parts))

    @property
    def paths(self) -> List[str]:
        """Field paths of all errors, in report order."""
        return [error.path for error in self.errors]


class UnsupportedMigrationError(ValueError):
    """
    Exception raised when a document cannot be migrated to the requested version.

    Fatal for that document: surfaced to the caller, never silently downgraded.

    Attributes:
        from_version: Version the document was authored against
        to_version: Requested target version
        reason: Optional detail (missing step, circular chain, bad step output)
    """

    def __init__(self, from_version: str, to_version: str, reason: Optional[str] = None):
        self.from_version = from_version
        self.to_version = to_version
        self.reason = reason

        parts = [f"No migration path from DSL version '{from_version}' to '{to_version}'"]
        if reason:
            parts.append(f"Reason: {reason}")

        super().__init__("\n".join(parts))
