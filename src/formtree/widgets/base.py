"""
Widgets render fields into plain dicts in a UI-schema shape.

The output is deliberately framework-neutral: a client form library (or
a template) decides how to draw it.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from formtree.fields.core import Field


class Widget:
    """Renders a leaf field."""

    name = "text"

    def render(self, field: "Field") -> dict[str, Any]:
        rendered: dict[str, Any] = {
            "ui:widget": self.name,
            "id": field.id,
            "name": field.name,
            "label": field.label,
            "required": field.required,
            "value": field.value,
            "errors": list(field.errors),
        }
        if field.description:
            rendered["description"] = field.description
        placeholder = field.options.get("placeholder")
        if placeholder:
            rendered["ui:placeholder"] = placeholder
        if field.attribs:
            rendered["attribs"] = dict(field.attribs)
        if field.dependencies:
            rendered["dependencies"] = list(field.dependencies)
        return rendered

    def render_object(self, children: Mapping[str, "Field"]) -> dict[str, Any]:
        raise NotImplementedError(f"{type(self).__name__} cannot render objects")

    def post_render(self, field: "Field") -> None:
        """Called once the rendered output exists."""


class TextWidget(Widget):
    name = "text"


class NumberWidget(Widget):
    name = "number"


class CheckboxWidget(Widget):
    name = "checkbox"


class SelectWidget(Widget):
    name = "select"

    def render(self, field: "Field") -> dict[str, Any]:
        rendered = super().render(field)
        rendered["choices"] = list(getattr(field, "choices", []))
        return rendered


class ObjectWidget(Widget):
    """Renders an object field and its children in sort order."""

    name = "object"

    def render(self, field: "Field") -> dict[str, Any]:
        rendered: dict[str, Any] = {
            "ui:widget": self.name,
            "id": field.id,
            "name": field.name,
            "label": field.label,
            "required": field.required,
            "errors": dict(field.errors),
        }
        if field.description:
            rendered["description"] = field.description
        return rendered

    def render_object(self, children: Mapping[str, "Field"]) -> dict[str, Any]:
        ordered = sorted(children.items(), key=lambda item: item[1].sort_order or 0)
        return {key: child.render() for key, child in ordered}
