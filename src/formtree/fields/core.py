"""
Base field.

Every node in a field tree, leaf or composite, shares this contract:
``value`` (get/set), ``validate()``, ``is_empty()``, ``errors``,
``get_serialized_value()``, ``post_render()`` and ``sort_order``.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from formtree.constants import ERROR_TYPE
from formtree.models.schema import FieldOptions, SchemaFragment
from formtree.validators import RequiredValidator, Validator, is_empty_value

if TYPE_CHECKING:
    from formtree.registry import FieldRegistry
    from formtree.widgets import Widget

logger = logging.getLogger(__name__)


class Field:
    """
    A single value holder that can validate itself.

    Subclasses set ``field_type`` and ``default_widget``, and override
    ``to_python`` to coerce raw input and ``build_validators`` to turn
    schema keywords into validators.
    """

    field_type = "field"
    default_widget = "text"
    invalid_message = "Enter a valid value."

    def __init__(
        self,
        id: str,
        name: str,
        label: str | None = None,
        initial: Any = None,
        widget: str | None = None,
        validators: Sequence[Validator] | None = None,
        attribs: Mapping[str, Any] | None = None,
        description: str | None = None,
        options: Mapping[str, Any] | None = None,
        order: int | None = None,
        parent: "Field | None" = None,
        required: bool = False,
        dependencies: Sequence[str] | None = None,
        registry: "FieldRegistry | None" = None,
        serializers: Sequence[str] | None = None,
    ):
        if registry is None:
            from formtree.registry import default_registry

            registry = default_registry()

        self.id = id
        self.name = name
        self._label = label
        self.initial = initial
        self.description = description
        self.validators = list(validators or [])
        self.attribs = dict(attribs or {})
        self.options = dict(options or {})
        self.parent = parent
        self.required = required
        self.registry = registry
        self.serializers = list(serializers or [])

        # Filled in by the parent composite once all siblings exist
        self.dependencies: list[str] = list(dependencies or [])
        self.is_dependency = False

        self._widget_name = widget
        self._widget: "Widget | None" = None
        self._order = order
        self._value = initial
        self._errors: list[str] = []
        self.error_types: list[str] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, name={self.name!r})"

    # ------------------------------------------------------------------ #
    # Construction                                                       #
    # ------------------------------------------------------------------ #

    @classmethod
    def new(
        cls,
        id: str,
        name: str,
        schema: SchemaFragment | Mapping[str, Any],
        options: Mapping[str, Any] | None = None,
        parent: "Field | None" = None,
        required: bool = False,
        depends_on: Sequence[str] | None = None,
        registry: "FieldRegistry | None" = None,
    ) -> "Field":
        """
        Build a field from a schema fragment.

        The concrete class is picked by the registry's factory from the
        fragment itself, so ``ObjectField.new`` and ``Field.new`` behave
        the same way.

        Raises:
            FieldConstructionError: If no field can be built.
        """
        if registry is None:
            from formtree.registry import default_registry

            registry = default_registry()

        return registry.factory.create(
            id, name, schema, options, parent=parent, required=required, depends_on=depends_on
        )

    @classmethod
    def from_schema(
        cls,
        id: str,
        name: str,
        schema: SchemaFragment,
        options: Mapping[str, Any],
        parent: "Field | None",
        required: bool,
        depends_on: Sequence[str],
        registry: "FieldRegistry",
    ) -> "Field":
        """Instantiate this class from a parsed fragment and leaf options."""
        field_options = FieldOptions.model_validate(dict(options))

        # Unknown names fail here rather than at first serialization/render
        for serializer in field_options.serializers:
            registry.get_serializer(serializer)
        if field_options.widget:
            registry.get_widget(field_options.widget)

        return cls(
            id=id,
            name=name,
            label=field_options.label or schema.title,
            initial=schema.default,
            widget=field_options.widget,
            validators=cls.build_validators(schema),
            attribs=field_options.attribs,
            description=schema.description,
            options=field_options.model_dump(),
            order=field_options.order,
            parent=parent,
            required=required,
            dependencies=depends_on,
            registry=registry,
            serializers=field_options.serializers,
            **cls.schema_kwargs(schema),
        )

    @classmethod
    def build_validators(cls, schema: SchemaFragment) -> list[Validator]:
        """Validators derived from schema keywords."""
        return []

    @classmethod
    def schema_kwargs(cls, schema: SchemaFragment) -> dict[str, Any]:
        """Extra constructor arguments a subclass reads from the schema."""
        return {}

    # ------------------------------------------------------------------ #
    # Properties                                                         #
    # ------------------------------------------------------------------ #

    @property
    def label(self) -> str:
        if self._label:
            return self._label
        return self.name.replace("_", " ").capitalize()

    @label.setter
    def label(self, label: str | None) -> None:
        self._label = label

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._value = value

    def check_value(self, value: Any) -> None:
        """Raise if *value* cannot be assigned. Leaves accept anything."""

    @property
    def errors(self) -> list[str]:
        return self._errors

    @errors.setter
    def errors(self, errors: list[str]) -> None:
        self._errors = list(errors)
        self.error_types = ["invalid"] * len(self._errors)

    @property
    def sort_order(self) -> int | None:
        return self._order

    @sort_order.setter
    def sort_order(self, order: int | None) -> None:
        self._order = order

    @property
    def config(self):
        return self.registry.config

    # ------------------------------------------------------------------ #
    # Validation                                                         #
    # ------------------------------------------------------------------ #

    def to_python(self, value: Any) -> Any:
        """Coerce a raw value, raising TypeError or ValueError if impossible."""
        return value

    def is_empty(self) -> bool:
        return is_empty_value(self.value)

    def add_error(self, message: str, error_type: str = "invalid") -> None:
        self._errors.append(message)
        self.error_types.append(error_type)

    def refresh_validation_state(self) -> None:
        """Reset errors before a validation pass."""
        self._errors = []
        self.error_types = []

    def validate(self) -> bool:
        """
        Validate the current value.

        Empty values only fail when the field is required; everything
        else is coerced with ``to_python`` and run through the validators.
        """
        self.refresh_validation_state()

        if self.is_empty():
            if self.required:
                required = RequiredValidator(self.config.required_message)
                self.add_error(required.get_message(self.value), required.error_type)
            return not self._errors

        try:
            value = self.to_python(self.value)
        except (TypeError, ValueError):
            self.add_error(self.invalid_message, ERROR_TYPE)
            return False

        for validator in self.validators:
            if not validator.validate(value):
                self.add_error(validator.get_message(value), validator.error_type)

        return not self._errors

    # ------------------------------------------------------------------ #
    # Serialization                                                      #
    # ------------------------------------------------------------------ #

    def get_serialized_value(self) -> Any:
        """
        Return the normalised value without touching the raw value.

        Values that cannot be coerced serialize as entered.
        """
        value = self.value
        if not self.is_empty():
            try:
                value = self.to_python(value)
            except (TypeError, ValueError):
                value = self.value

        for name in self.serializers:
            value = self.registry.get_serializer(name)(value)

        return value

    # ------------------------------------------------------------------ #
    # Rendering                                                          #
    # ------------------------------------------------------------------ #

    def get_widget(self) -> "Widget":
        return self.registry.get_widget(self._widget_name or self.default_widget)

    @property
    def widget(self) -> "Widget":
        if self._widget is None:
            self._widget = self.get_widget()
        return self._widget

    def render(self) -> dict[str, Any]:
        return self.widget.render(self)

    def post_render(self) -> None:
        """Hook for setup that needs the rendered output to exist."""
        self.widget.post_render(self)
