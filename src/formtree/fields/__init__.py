"""
Field classes for formtree.

Leaf fields hold a single value; ObjectField holds named children and
resolves dependencies between them. BUILTIN_FIELD_CLASSES maps schema
type names to the classes a default registry starts with.
"""

from formtree.fields.boolean import BooleanField
from formtree.fields.choice import ChoiceField
from formtree.fields.core import Field
from formtree.fields.dependencies import DependencyGraph
from formtree.fields.factory import FieldFactory
from formtree.fields.number import IntegerField, NumberField
from formtree.fields.object import ObjectField
from formtree.fields.text import StringField

BUILTIN_FIELD_CLASSES: dict[str, type[Field]] = {
    "string": StringField,
    "integer": IntegerField,
    "number": NumberField,
    "boolean": BooleanField,
    "enum": ChoiceField,
    "object": ObjectField,
}

__all__ = [
    "Field",
    "StringField",
    "IntegerField",
    "NumberField",
    "BooleanField",
    "ChoiceField",
    "ObjectField",
    "DependencyGraph",
    "FieldFactory",
    "BUILTIN_FIELD_CLASSES",
]
