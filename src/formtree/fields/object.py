"""
Object field.

An object field owns a named set of child fields built from a schema's
``properties``. Its value is the mapping of its children's values, its
errors are the mapping of its failing children's errors, and it enforces
the ``dependencies`` declared between its children:

* a child that others depend on is only validated when at least one of
  its dependents is itself validated and is required or has a value;
* a child that fails invalidates every field that depends on it,
  directly or through a chain, whatever their own state.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from formtree.constants import ERROR_DEPENDENCY, ERROR_REQUIRED, NON_FIELD_ERRORS, PATH_SEPARATOR
from formtree.exceptions import FieldValueError
from formtree.fields.core import Field
from formtree.fields.dependencies import DependencyGraph
from formtree.models.schema import SchemaFragment

if TYPE_CHECKING:
    from formtree.registry import FieldRegistry
    from formtree.widgets import Widget

logger = logging.getLogger(__name__)


class ObjectField(Field):
    """A field whose value is a mapping of named child fields."""

    field_type = "object"
    default_widget = "object"

    def __init__(
        self,
        id: str,
        name: str,
        label: str | None = None,
        initial: Mapping[str, Any] | None = None,
        widget: str | None = None,
        validators: Sequence[Any] | None = None,
        attribs: Mapping[str, Any] | None = None,
        description: str | None = None,
        options: Mapping[str, Any] | None = None,
        order: int | None = None,
        parent: Field | None = None,
        required: bool = False,
        dependencies: Sequence[str] | None = None,
        registry: "FieldRegistry | None" = None,
        properties: Mapping[str, SchemaFragment | Mapping[str, Any]] | None = None,
        required_properties: Sequence[str] | None = None,
        property_dependencies: Mapping[str, Sequence[str]] | None = None,
    ):
        super().__init__(
            id=id,
            name=name,
            label=label,
            widget=widget,
            validators=validators,
            attribs=attribs,
            description=description,
            options=options,
            order=order,
            parent=parent,
            required=required,
            dependencies=dependencies,
            registry=registry,
        )

        required_properties = list(required_properties or [])
        property_dependencies = dict(property_dependencies or {})

        self.object: dict[str, Field] = {}
        self.ignored_keys: list[str] = []

        for field_index, (field_name, field_schema) in enumerate((properties or {}).items(), start=1):
            field_options = self.options.get(field_name, {})

            field = self.registry.factory.create(
                f"{name}_{field_name}",
                field_name,
                field_schema,
                field_options,
                parent=self,
                required=field_name in required_properties,
                depends_on=property_dependencies.get(field_name, []),
            )

            if not field.sort_order:
                field.sort_order = field_index

            self.object[field_name] = field

        self.graph = DependencyGraph(self.object, property_dependencies)
        for field_name, field in self.object.items():
            if self.graph.is_dependency(field_name):
                field.is_dependency = True
            if self.graph.is_dependent(field_name):
                field.dependencies = self.graph.depends_on(field_name)

        # Store errors as a mapping
        self._errors: dict[str, Any] = {}

        logger.debug(f"Built object field '{id}' with {len(self.object)} children")

        if initial is not None:
            self.value = initial

    @classmethod
    def from_schema(
        cls,
        id: str,
        name: str,
        schema: SchemaFragment,
        options: Mapping[str, Any],
        parent: Field | None,
        required: bool,
        depends_on: Sequence[str],
        registry: "FieldRegistry",
    ) -> "ObjectField":
        # Object options are keyed by child name
        if not isinstance(options, Mapping):
            raise TypeError(f"Object field options must be a mapping, got {type(options).__name__}")

        return cls(
            id=id,
            name=name,
            label=schema.title,
            initial=schema.default,
            description=schema.description,
            options=options,
            parent=parent,
            required=required,
            dependencies=depends_on,
            registry=registry,
            properties=schema.properties,
            required_properties=schema.required,
            property_dependencies=schema.dependencies,
        )

    # ------------------------------------------------------------------ #
    # Values                                                             #
    # ------------------------------------------------------------------ #

    @property
    def value(self) -> dict[str, Any]:
        values = {}

        for key, field in self.object.items():
            values[key] = field.value

        return values

    @value.setter
    def value(self, values: Mapping[str, Any] | None) -> None:
        if values is None:
            return

        # Nothing is written unless the whole mapping, nested ones included, is accepted
        self.check_value(values)
        self.clear_ignored_keys()

        unknown = [key for key in values if key not in self.object]
        if unknown:
            logger.debug(f"Ignoring unknown key(s) for '{self.id}': {unknown}")
        self.ignored_keys = unknown

        for key, value in values.items():
            if key in self.object:
                self.object[key].value = value

    def check_value(self, values: Any) -> None:
        """
        Raise FieldValueError if *values* cannot be assigned.

        Walks nested mappings so a bad value deep in the tree is caught
        before any child is changed.
        """
        if values is None:
            return

        if not isinstance(values, Mapping):
            raise FieldValueError(
                f"Unable to set object field '{self.id}' value(s) from {type(values).__name__}"
            )

        unknown = [key for key in values if key not in self.object]
        if unknown and self.config.strict_values:
            raise FieldValueError(
                f"Unknown field(s) for object field '{self.id}': {', '.join(map(str, unknown))}"
            )

        for key, value in values.items():
            if key in self.object:
                self.object[key].check_value(value)

    def clear_ignored_keys(self) -> None:
        """Forget unknown keys recorded by earlier assignments, here and below."""
        self.ignored_keys = []
        for field in self.object.values():
            if isinstance(field, ObjectField):
                field.clear_ignored_keys()

    def is_empty(self) -> bool:
        return all(field.is_empty() for field in self.object.values())

    def get_serialized_value(self) -> dict[str, Any]:
        values = {}

        for key, field in self.object.items():
            values[key] = field.get_serialized_value()

        return values

    # ------------------------------------------------------------------ #
    # Validation                                                         #
    # ------------------------------------------------------------------ #

    @property
    def errors(self) -> dict[str, Any]:
        return self._errors

    @errors.setter
    def errors(self, errors: Mapping[str, Any]) -> None:
        self._errors = dict(errors)
        self.error_types = ["invalid"] * len(self._errors.get(NON_FIELD_ERRORS, []))

    def add_error(self, message: str, error_type: str = "invalid") -> None:
        """Attach an error to the object itself rather than to a child."""
        self._errors.setdefault(NON_FIELD_ERRORS, []).append(message)
        self.error_types.append(error_type)

    def refresh_validation_state(self) -> None:
        super().refresh_validation_state()
        self._errors = {}

    def eligible_fields(self) -> set[str]:
        """
        Names of the children that take part in this validation pass.

        Dependencies are validated only when one of their dependents is
        itself eligible and is required or currently has a value; their
        own required flag does not count. Walking dependents first lets
        a skipped field switch off the whole chain below it.
        """
        eligible: set[str] = set()

        for key in reversed(self.graph.order):
            if not self.object[key].is_dependency:
                eligible.add(key)
                continue

            for dependent in self.graph.dependents_of(key):
                field = self.object[dependent]
                if dependent in eligible and (field.required or not field.is_empty()):
                    eligible.add(key)
                    break

        return eligible

    def is_eligible(self, key: str) -> bool:
        """Whether child *key* takes part in this validation pass."""
        return key in self.eligible_fields()

    def validate(self) -> bool:
        """
        Validate all eligible children and cascade dependency failures.

        Returns:
            True if no eligible child failed and no failure propagated.
        """
        self.refresh_validation_state()

        if self.required and self.is_empty():
            self.add_error(self.config.required_message, ERROR_REQUIRED)

        eligible = self.eligible_fields()
        failed: list[str] = []
        skipped: list[str] = []
        for key, field in self.object.items():
            if key not in eligible:
                logger.debug(f"Skipping dependency '{field.id}': no eligible dependent is required or has a value")
                field.refresh_validation_state()
                skipped.append(key)
                continue

            if not field.validate():
                failed.append(key)

        invalidated = self.graph.cascade(failed, skipped)
        for key, invalid_dependencies in invalidated.items():
            logger.debug(f"'{self.object[key].id}' invalidated by {invalid_dependencies}")
            self.object[key].add_error(
                self.config.dependency_message.format(fields=", ".join(invalid_dependencies)),
                ERROR_DEPENDENCY,
            )

        for key, field in self.object.items():
            if key in failed or key in invalidated:
                self._errors[key] = field.errors

        return not self._errors

    # ------------------------------------------------------------------ #
    # Lookup and rendering                                               #
    # ------------------------------------------------------------------ #

    def get_field_by_path(self, path: str) -> Field | None:
        """Find a descendant by dotted path, or None if any segment misses."""
        path_parts = path.split(PATH_SEPARATOR)
        search_name = path_parts.pop(0)

        for field in self.object.values():
            if field.name == search_name:
                if not path_parts:
                    return field
                if hasattr(field, "get_field_by_path"):
                    return field.get_field_by_path(PATH_SEPARATOR.join(path_parts))

        return None

    def get_widget(self) -> "Widget":
        return self.registry.get_widget(self._widget_name or "object")

    def render(self) -> dict[str, Any]:
        rendered = self.widget.render(self)
        rendered["fields"] = self.widget.render_object(self.object)
        return rendered

    def post_render(self) -> None:
        for field in self.object.values():
            field.post_render()
