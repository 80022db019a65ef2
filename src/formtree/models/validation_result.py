"""
Validation result models.

A ValidationResult is a frozen snapshot of one validation pass over a
field tree. Each pass produces a fresh instance.
"""

from typing import Any

from pydantic import BaseModel, Field

from formtree.constants import PATH_SEPARATOR


class FieldValidationError(BaseModel):
    """Validation error for a specific field."""

    field_name: str = Field(..., description="Dotted path of the field with error")
    error_type: str = Field(..., description="Type of validation error")
    message: str = Field(..., description="Human-readable error message")

    model_config = {"frozen": True}


class ValidationResult(BaseModel):
    """Result of form validation."""

    is_valid: bool = Field(..., description="Whether the form data is valid")
    errors: list[FieldValidationError] = Field(
        default_factory=list, description="List of validation errors"
    )
    error_report: dict[str, Any] = Field(
        default_factory=dict, description="Nested error report keyed by field name"
    )
    validated_data: dict[str, Any] | None = Field(
        default=None, description="Serialized data if valid"
    )
    warnings: list[str] = Field(
        default_factory=list, description="Non-blocking warnings"
    )

    model_config = {"frozen": True}

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def error_paths(self) -> list[str]:
        """Dotted paths with at least one error, in report order."""
        return list(dict.fromkeys(error.field_name for error in self.errors))

    def get_field_errors(self, path: str) -> list[FieldValidationError]:
        """
        Errors for the field at *path* and everything below it.

        ``"address"`` matches ``"address"`` (errors on the object itself)
        and ``"address.street"``, but not ``"address_line"``.
        """
        prefix = f"{path}{PATH_SEPARATOR}"
        return [
            error for error in self.errors
            if error.field_name == path or error.field_name.startswith(prefix)
        ]

    def to_error_dict(self) -> dict[str, list[str]]:
        """Messages grouped by dotted path."""
        result: dict[str, list[str]] = {}
        for error in self.errors:
            result.setdefault(error.field_name, []).append(error.message)
        return result
