"""
Schema fragment models for field tree construction.

A schema fragment is a compact JSON Schema subset: a ``type``, leaf
constraints, and for objects ``properties`` / ``required`` /
``dependencies``. Fragments are parsed into these models before any
field is built, so malformed input fails before a tree exists.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from formtree.constants import VALID_FIELD_NAME
from formtree.exceptions import FieldConstructionError


class SchemaFragment(BaseModel):
    """Schema for a single field, leaf or composite."""

    type: str | None = Field(default=None, description="JSON Schema type: string, number, integer, boolean, object")
    title: str | None = Field(default=None, description="Human-readable label")
    description: str | None = Field(default=None, description="Help text")
    default: Any = Field(default=None, description="Initial value")
    format: str | None = Field(default=None, description="Format: email, etc.")
    enum: list[Any] | None = Field(default=None, description="Allowed values")

    # Leaf validation
    min_length: int | None = Field(default=None, alias="minLength")
    max_length: int | None = Field(default=None, alias="maxLength")
    minimum: float | None = Field(default=None)
    maximum: float | None = Field(default=None)
    pattern: str | None = Field(default=None)

    # Composite structure
    properties: dict[str, "SchemaFragment"] = Field(
        default_factory=dict, description="Child name -> child schema"
    )
    required: list[str] = Field(default_factory=list, description="Required child names")
    dependencies: dict[str, list[str]] = Field(
        default_factory=dict, description="Dependent child name -> names it depends on"
    )

    model_config = {"populate_by_name": True}

    @field_validator("properties", mode="before")
    @classmethod
    def _merge_all_of(cls, value: Any) -> Any:
        """Flatten ``{"allOf": [{...}, {...}]}`` groups into one property map."""
        if not isinstance(value, Mapping) or "allOf" not in value:
            return value

        merged: dict[str, Any] = {}
        for key, item in value.items():
            if key != "allOf":
                merged[key] = item
                continue
            if not isinstance(item, list):
                raise ValueError("allOf must be a list of property maps")
            for group in item:
                if not isinstance(group, Mapping):
                    raise ValueError("allOf entries must be property maps")
                merged.update(group)
        return merged

    @field_validator("properties")
    @classmethod
    def _check_property_names(cls, value: dict[str, "SchemaFragment"]) -> dict[str, "SchemaFragment"]:
        for name in value:
            if not VALID_FIELD_NAME.match(name):
                raise ValueError(f"Invalid property name: {name!r}")
        return value

    @property
    def is_object(self) -> bool:
        """Whether this fragment describes a composite field."""
        if self.type is not None:
            return self.type == "object"
        return bool(self.properties)

    @classmethod
    def parse(cls, schema: "SchemaFragment | Mapping[str, Any]") -> "SchemaFragment":
        """Parse a raw mapping, raising FieldConstructionError on bad input."""
        if isinstance(schema, SchemaFragment):
            return schema
        if not isinstance(schema, Mapping):
            raise FieldConstructionError(
                f"Schema fragment must be a mapping, got {type(schema).__name__}"
            )
        try:
            return cls.model_validate(dict(schema))
        except ValidationError as e:
            raise FieldConstructionError(f"Malformed schema fragment: {e}") from e

    def to_json_schema(self) -> dict[str, Any]:
        """Export as a normalised JSON Schema dict (allOf groups flattened)."""
        return self.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)


SchemaFragment.model_rebuild()


class FieldOptions(BaseModel):
    """Per-field options for leaf fields."""

    serialize: str | list[str] | None = Field(
        default=None, description="Serializer name(s) applied by get_serialized_value"
    )
    widget: str | None = Field(default=None, description="Widget name override")
    label: str | None = Field(default=None, description="Label override")
    order: int | None = Field(default=None, description="Explicit sort order")
    placeholder: str | None = Field(default=None, description="Placeholder text")
    attribs: dict[str, Any] = Field(default_factory=dict, description="Extra render attributes")

    model_config = {"extra": "allow"}

    @property
    def serializers(self) -> list[str]:
        """Serializer names as a list, in application order."""
        if self.serialize is None:
            return []
        if isinstance(self.serialize, str):
            return [self.serialize]
        return list(self.serialize)
