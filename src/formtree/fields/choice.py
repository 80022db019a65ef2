"""Choice field for fragments carrying an ``enum``."""

from collections.abc import Sequence
from typing import Any

from formtree.fields.core import Field
from formtree.models.schema import SchemaFragment
from formtree.validators import ChoiceValidator, Validator


class ChoiceField(Field):
    field_type = "enum"
    default_widget = "select"

    def __init__(self, *args: Any, choices: Sequence[Any] | None = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.choices = list(choices or [])

    @classmethod
    def build_validators(cls, schema: SchemaFragment) -> list[Validator]:
        return [ChoiceValidator(schema.enum or [])]

    @classmethod
    def schema_kwargs(cls, schema: SchemaFragment) -> dict[str, Any]:
        return {"choices": schema.enum or []}
