"""
Form: the top-level entry point.

A Form owns the root object field built from a schema and turns each
validation pass into a fresh, frozen ValidationResult.

Usage:
    form = Form(
        schema={
            "type": "object",
            "properties": {"name": {"type": "string"}, "email": {"type": "string"}},
            "required": ["name", "email"],
            "dependencies": {"name": ["email"]},
        },
        options={"email": {"serialize": "trim"}},
    )

    result = form.validate_data({"name": "Ada", "email": " ada@example.com "})
    result.is_valid          # True
    result.validated_data    # {"name": "Ada", "email": "ada@example.com"}
"""

import copy
import logging
from collections.abc import Iterator, Mapping
from typing import Any

from formtree.constants import NON_FIELD_ERRORS, PATH_SEPARATOR
from formtree.exceptions import FieldConstructionError
from formtree.fields.core import Field
from formtree.fields.object import ObjectField
from formtree.models.schema import SchemaFragment
from formtree.models.validation_result import FieldValidationError, ValidationResult
from formtree.registry import FieldRegistry, default_registry

logger = logging.getLogger(__name__)


def _join(path: str, key: str) -> str:
    return f"{path}{PATH_SEPARATOR}{key}" if path else key


def _collect_errors(field: Field, path: str) -> Iterator[FieldValidationError]:
    """Flatten a field's error report into dotted-path errors."""
    if isinstance(field, ObjectField):
        own = field.errors.get(NON_FIELD_ERRORS, [])
        for message, error_type in zip(own, field.error_types):
            yield FieldValidationError(
                field_name=path or NON_FIELD_ERRORS,
                error_type=error_type,
                message=message,
            )
        for key, child in field.object.items():
            if key in field.errors:
                yield from _collect_errors(child, _join(path, key))
        return

    for message, error_type in zip(field.errors, field.error_types):
        yield FieldValidationError(field_name=path, error_type=error_type, message=message)


def _collect_ignored_keys(field: ObjectField, path: str = "") -> Iterator[str]:
    for key in field.ignored_keys:
        yield _join(path, str(key))
    for key, child in field.object.items():
        if isinstance(child, ObjectField):
            yield from _collect_ignored_keys(child, _join(path, key))


class Form:
    """A field tree plus the bookkeeping to validate submitted data."""

    def __init__(
        self,
        schema: SchemaFragment | Mapping[str, Any],
        options: Mapping[str, Any] | None = None,
        name: str | None = None,
        registry: FieldRegistry | None = None,
    ):
        """
        Build the field tree for *schema*.

        Args:
            schema: Object schema fragment (mapping or parsed model).
            options: Per-child options, keyed by child name.
            name: Root field name; child ids are derived from it.
                Defaults to config.default_form_name.
            registry: Registry to build with. A fresh default registry
                is used when omitted.

        Raises:
            FieldConstructionError: If the schema is not an object schema
                or any field cannot be built.
        """
        self.registry = registry if registry is not None else default_registry()
        self.name = name or self.registry.config.default_form_name
        self.schema = SchemaFragment.parse(schema)

        if not self.schema.is_object:
            raise FieldConstructionError(
                f"Unable to create Form '{self.name}': schema must describe an object"
            )

        self.field: ObjectField = self.registry.factory.create(
            self.name, self.name, self.schema, options or {}
        )

    @property
    def value(self) -> dict[str, Any]:
        return self.field.value

    @property
    def errors(self) -> dict[str, Any]:
        return self.field.errors

    def set_data(self, data: Mapping[str, Any]) -> None:
        """Assign submitted values to the tree."""
        self.field.value = data

    def get_field_by_path(self, path: str) -> Field | None:
        return self.field.get_field_by_path(path)

    def validate_data(self, data: Mapping[str, Any] | None = None) -> ValidationResult:
        """
        Validate the tree, optionally assigning *data* first.

        Returns:
            A new ValidationResult. ``validated_data`` holds the
            serialized snapshot when valid, None otherwise. ``warnings``
            list the unknown keys ignored from *data*, so a call without
            data has none.

        Raises:
            FieldValueError: If *data* is not a mapping, or contains
                unknown keys while strict_values is enabled.
        """
        if data is not None:
            self.set_data(data)

        is_valid = self.field.validate()
        errors = list(_collect_errors(self.field, ""))
        warnings = []
        if data is not None:
            warnings = [f"Ignored unknown field '{key}'" for key in _collect_ignored_keys(self.field)]

        logger.debug(f"Validated form '{self.name}': valid={is_valid}, errors={len(errors)}")

        return ValidationResult(
            is_valid=is_valid,
            errors=errors,
            error_report=copy.deepcopy(self.field.errors),
            validated_data=self.field.get_serialized_value() if is_valid else None,
            warnings=warnings,
        )

    def render(self) -> dict[str, Any]:
        """Render the tree, then run post-render hooks."""
        rendered = self.field.render()
        self.field.post_render()
        return rendered

    def to_json_schema(self) -> dict[str, Any]:
        """The normalised schema this form was built from."""
        return self.schema.to_json_schema()


def validate_form(
    schema: SchemaFragment | Mapping[str, Any],
    data: Mapping[str, Any],
    options: Mapping[str, Any] | None = None,
    registry: FieldRegistry | None = None,
) -> ValidationResult:
    """
    Build a form for *schema* and validate *data* against it.

    Example:
        >>> result = validate_form(
        ...     {"type": "object", "properties": {"name": {"type": "string"}}, "required": ["name"]},
        ...     {"name": ""},
        ... )
        >>> result.to_error_dict()
        {'name': ['This field is required.']}
    """
    return Form(schema, options=options, registry=registry).validate_data(data)
