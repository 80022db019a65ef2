"""
Field registry.

A FieldRegistry is the context object threaded through tree construction:
it knows which class builds each schema type, which widgets and
serializers exist, and which configuration applies. Registries are
created explicitly (``default_registry()`` returns a fresh one each time),
so two trees never share mutable lookup state.
"""

from typing import TYPE_CHECKING

from formtree.config import FormTreeConfig, get_config
from formtree.exceptions import FieldConstructionError
from formtree.fields import BUILTIN_FIELD_CLASSES
from formtree.fields.factory import FieldFactory
from formtree.serializers import BUILTIN_SERIALIZERS, Serializer
from formtree.widgets import Widget, WidgetRegistry

if TYPE_CHECKING:
    from formtree.fields.core import Field


class FieldRegistry:
    """Field classes, widgets, serializers and config for one tree."""

    def __init__(
        self,
        field_classes: dict[str, type["Field"]] | None = None,
        widgets: WidgetRegistry | None = None,
        serializers: dict[str, Serializer] | None = None,
        config: FormTreeConfig | None = None,
    ):
        self.field_classes: dict[str, type["Field"]] = dict(field_classes or {})
        self.widgets = widgets if widgets is not None else WidgetRegistry()
        self.serializers: dict[str, Serializer] = dict(serializers or {})
        self.config = config if config is not None else get_config()
        self.factory = FieldFactory(self)

    def register_field(self, type_name: str, field_class: type["Field"]) -> None:
        self.field_classes[type_name] = field_class

    def get_field_class(self, type_name: str) -> type["Field"] | None:
        return self.field_classes.get(type_name)

    def register_serializer(self, name: str, serializer: Serializer) -> None:
        self.serializers[name] = serializer

    def get_serializer(self, name: str) -> Serializer:
        try:
            return self.serializers[name]
        except KeyError:
            raise FieldConstructionError(f"Unknown serializer '{name}'") from None

    def register_widget(self, name: str, widget: Widget) -> None:
        self.widgets.register(name, widget)

    def get_widget(self, name: str) -> Widget:
        return self.widgets.get_widget(name)


def default_registry(config: FormTreeConfig | None = None) -> FieldRegistry:
    """A new registry with the built-in fields, widgets and serializers."""
    return FieldRegistry(
        field_classes=BUILTIN_FIELD_CLASSES,
        widgets=WidgetRegistry.with_builtins(),
        serializers=BUILTIN_SERIALIZERS,
        config=config,
    )
