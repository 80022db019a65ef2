"""
Field factory.

Resolves which field class a schema fragment describes and builds it.
Object fields call back into the same factory for their children, which
is what lets objects nest to any depth.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from formtree.exceptions import FieldConstructionError
from formtree.models.schema import SchemaFragment

if TYPE_CHECKING:
    from formtree.fields.core import Field
    from formtree.registry import FieldRegistry

logger = logging.getLogger(__name__)


class FieldFactory:
    """Builds fields using the classes registered in a FieldRegistry."""

    def __init__(self, registry: "FieldRegistry"):
        self.registry = registry

    def resolve_type(self, schema: SchemaFragment) -> str | None:
        """Field type name for a fragment: enum, declared type, or shape."""
        if schema.enum is not None:
            return "enum"
        if schema.type is not None:
            return schema.type
        if schema.properties:
            return "object"
        return None

    def resolve(self, name: str, schema: SchemaFragment) -> type["Field"]:
        type_name = self.resolve_type(schema)
        if type_name is None:
            raise FieldConstructionError(
                f"Unable to create Field '{name}': schema declares no type"
            )

        field_class = self.registry.get_field_class(type_name)
        if field_class is None:
            raise FieldConstructionError(
                f"Unable to create Field '{name}': unknown field type '{type_name}'"
            )
        return field_class

    def create(
        self,
        id: str,
        name: str,
        schema: SchemaFragment | Mapping[str, Any],
        options: Mapping[str, Any] | None = None,
        parent: "Field | None" = None,
        required: bool = False,
        depends_on: Sequence[str] | None = None,
    ) -> "Field":
        """
        Build the field described by *schema*.

        Raises:
            FieldConstructionError: If the fragment is malformed, names an
                unknown type, or the chosen class rejects its arguments.
                Errors from nested fields propagate unchanged.
        """
        fragment = SchemaFragment.parse(schema)
        field_class = self.resolve(name, fragment)

        try:
            field = field_class.from_schema(
                id=id,
                name=name,
                schema=fragment,
                options=options if options is not None else {},
                parent=parent,
                required=required,
                depends_on=list(depends_on or []),
                registry=self.registry,
            )
        except FieldConstructionError:
            raise
        except (TypeError, ValueError, LookupError) as e:
            raise FieldConstructionError(
                f"Unable to create Field '{name}' as {field_class.__name__}: {e}"
            ) from e

        logger.debug(f"Created {field_class.__name__} '{id}'")
        return field
