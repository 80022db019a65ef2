"""
Data models for formtree.

This module contains Pydantic models for:
- Schema fragments (tree construction input)
- Per-field options
- Validation results
"""

from formtree.models.schema import (
    FieldOptions,
    SchemaFragment,
)
from formtree.models.validation_result import (
    FieldValidationError,
    ValidationResult,
)

__all__ = [
    # Construction input
    "SchemaFragment",
    "FieldOptions",
    # Validation
    "ValidationResult",
    "FieldValidationError",
]
