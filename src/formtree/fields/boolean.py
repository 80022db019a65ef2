"""
Boolean (checkbox) field.

An unchecked box counts as empty, so a required boolean must be true and
a boolean dependent only gates its dependencies in while checked.
"""

from typing import Any

from formtree.constants import FALSE_STRINGS, INVALID_BOOLEAN_MESSAGE, TRUE_STRINGS
from formtree.fields.core import Field


class BooleanField(Field):
    field_type = "boolean"
    default_widget = "checkbox"
    invalid_message = INVALID_BOOLEAN_MESSAGE

    def to_python(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in TRUE_STRINGS:
                return True
            if lowered in FALSE_STRINGS:
                return False
        raise ValueError(f"{value!r} is not a boolean")

    def is_empty(self) -> bool:
        if self.value is None or self.value == "":
            return True
        try:
            return not self.to_python(self.value)
        except ValueError:
            return False
