"""
Widgets for formtree.

Widgets turn fields into UI-schema style dicts.
"""

from formtree.widgets.base import (
    CheckboxWidget,
    NumberWidget,
    ObjectWidget,
    SelectWidget,
    TextWidget,
    Widget,
)
from formtree.widgets.registry import WidgetRegistry

__all__ = [
    "Widget",
    "TextWidget",
    "NumberWidget",
    "CheckboxWidget",
    "SelectWidget",
    "ObjectWidget",
    "WidgetRegistry",
]
