"""Integer and number fields."""

from typing import Any

from formtree.constants import INVALID_INTEGER_MESSAGE, INVALID_NUMBER_MESSAGE
from formtree.fields.core import Field
from formtree.models.schema import SchemaFragment
from formtree.validators import MaximumValidator, MinimumValidator, Validator


def _range_validators(schema: SchemaFragment) -> list[Validator]:
    validators: list[Validator] = []
    if schema.minimum is not None:
        validators.append(MinimumValidator(schema.minimum))
    if schema.maximum is not None:
        validators.append(MaximumValidator(schema.maximum))
    return validators


class NumberField(Field):
    field_type = "number"
    default_widget = "number"
    invalid_message = INVALID_NUMBER_MESSAGE

    def to_python(self, value: Any) -> int | float:
        # bool is an int subclass but never a valid number here
        if isinstance(value, bool):
            raise TypeError("Booleans are not numbers")
        if isinstance(value, (int, float)):
            return value
        if isinstance(value, str):
            return float(value.strip())
        raise TypeError(f"Expected a number, got {type(value).__name__}")

    @classmethod
    def build_validators(cls, schema: SchemaFragment) -> list[Validator]:
        return _range_validators(schema)


class IntegerField(NumberField):
    field_type = "integer"
    invalid_message = INVALID_INTEGER_MESSAGE

    def to_python(self, value: Any) -> int:
        if isinstance(value, bool):
            raise TypeError("Booleans are not integers")
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(f"{value!r} is not a whole number")
            return int(value)
        if isinstance(value, str):
            return int(value.strip())
        raise TypeError(f"Expected an integer, got {type(value).__name__}")
