"""Widget registry."""

from formtree.exceptions import WidgetNotFoundError
from formtree.widgets.base import (
    CheckboxWidget,
    NumberWidget,
    ObjectWidget,
    SelectWidget,
    TextWidget,
    Widget,
)


class WidgetRegistry:
    """Maps widget names to widget instances."""

    def __init__(self, widgets: dict[str, Widget] | None = None):
        self._widgets: dict[str, Widget] = dict(widgets or {})

    @classmethod
    def with_builtins(cls) -> "WidgetRegistry":
        return cls({
            widget.name: widget
            for widget in (
                TextWidget(),
                NumberWidget(),
                CheckboxWidget(),
                SelectWidget(),
                ObjectWidget(),
            )
        })

    def register(self, name: str, widget: Widget) -> None:
        self._widgets[name] = widget

    def get_widget(self, name: str) -> Widget:
        try:
            return self._widgets[name]
        except KeyError:
            raise WidgetNotFoundError(f"No widget registered as '{name}'") from None

    def __contains__(self, name: object) -> bool:
        return name in self._widgets
