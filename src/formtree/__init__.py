"""
formtree: typed, validating form field trees from JSON Schema fragments.

Build a tree of fields from a schema, assign values, validate, and read
back values, serialized values and a structured error report. Object
fields honour ``dependencies`` between their children: a dependency is
only validated when one of its dependents is required or filled in, and
a failing dependency invalidates everything that depends on it.

Simple Usage:
    from formtree import validate_form

    result = validate_form(
        schema={
            "type": "object",
            "properties": {"name": {"type": "string"}, "email": {"type": "string"}},
            "required": ["name", "email"],
        },
        data={"name": "Testing", "email": ""},
    )
    result.to_error_dict()   # {"email": ["This field is required."]}

Field-level Usage:
    from formtree import ObjectField

    field = ObjectField.new("test", "test", schema, {"email": {"serialize": "trim"}})
    field.value = {"name": "Testing", "email": " test@example.com "}
    field.validate()
    field.errors
    field.get_serialized_value()

Logging:
    from formtree.logging_setup import setup_logging

    setup_logging(console=True, verbose=True)
"""

from formtree.config import FormTreeConfig, get_config, update_config
from formtree.exceptions import (
    CircularDependencyError,
    FieldConstructionError,
    FieldValueError,
    FormTreeError,
    UnknownDependencyError,
    WidgetNotFoundError,
)
from formtree.fields import (
    BooleanField,
    ChoiceField,
    DependencyGraph,
    Field,
    FieldFactory,
    IntegerField,
    NumberField,
    ObjectField,
    StringField,
)
from formtree.form import Form, validate_form
from formtree.logging_setup import (
    disable_logging,
    enable_logging,
    setup_logging,
)
from formtree.models import (
    FieldOptions,
    FieldValidationError,
    SchemaFragment,
    ValidationResult,
)
from formtree.registry import FieldRegistry, default_registry

__all__ = [
    # Main interface
    "Form",
    "validate_form",
    # Fields
    "Field",
    "StringField",
    "IntegerField",
    "NumberField",
    "BooleanField",
    "ChoiceField",
    "ObjectField",
    "DependencyGraph",
    "FieldFactory",
    # Registry and config
    "FieldRegistry",
    "default_registry",
    "FormTreeConfig",
    "get_config",
    "update_config",
    # Models
    "SchemaFragment",
    "FieldOptions",
    "ValidationResult",
    "FieldValidationError",
    # Errors
    "FormTreeError",
    "FieldConstructionError",
    "UnknownDependencyError",
    "CircularDependencyError",
    "FieldValueError",
    "WidgetNotFoundError",
    # Logging
    "setup_logging",
    "disable_logging",
    "enable_logging",
]

__version__ = "0.1.0"
