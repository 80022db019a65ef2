"""
Named value serializers.

Serializers are applied by leaf fields in ``get_serialized_value`` and
must return a new value rather than mutate their input. Non-string values
pass through the string serializers unchanged.
"""

from collections.abc import Callable
from typing import Any

Serializer = Callable[[Any], Any]


def trim(value: Any) -> Any:
    """Strip leading and trailing whitespace."""
    return value.strip() if isinstance(value, str) else value


def lower(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


def upper(value: Any) -> Any:
    return value.upper() if isinstance(value, str) else value


def collapse_whitespace(value: Any) -> Any:
    """Replace runs of whitespace with a single space and trim."""
    return " ".join(value.split()) if isinstance(value, str) else value


def null_if_empty(value: Any) -> Any:
    """Map empty strings to None."""
    if isinstance(value, str) and value == "":
        return None
    return value


BUILTIN_SERIALIZERS: dict[str, Serializer] = {
    "trim": trim,
    "lower": lower,
    "upper": upper,
    "collapse_whitespace": collapse_whitespace,
    "null_if_empty": null_if_empty,
}
