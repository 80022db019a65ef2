"""String field."""

from typing import Any

from formtree.constants import INVALID_STRING_MESSAGE
from formtree.fields.core import Field
from formtree.models.schema import SchemaFragment
from formtree.validators import (
    EmailValidator,
    MaxLengthValidator,
    MinLengthValidator,
    PatternValidator,
    Validator,
)


class StringField(Field):
    field_type = "string"
    default_widget = "text"
    invalid_message = INVALID_STRING_MESSAGE

    def to_python(self, value: Any) -> str:
        if not isinstance(value, str):
            raise TypeError(f"Expected a string, got {type(value).__name__}")
        return value

    @classmethod
    def build_validators(cls, schema: SchemaFragment) -> list[Validator]:
        validators: list[Validator] = []
        if schema.min_length is not None:
            validators.append(MinLengthValidator(schema.min_length))
        if schema.max_length is not None:
            validators.append(MaxLengthValidator(schema.max_length))
        if schema.pattern:
            validators.append(PatternValidator(schema.pattern))
        if schema.format == "email":
            validators.append(EmailValidator())
        return validators
