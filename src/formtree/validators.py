"""
Value validators for leaf fields.

Validators are small callables built from schema keywords. They only see
values that are non-empty and already coerced by the field's
``to_python``; emptiness and required-ness are handled by the field.
"""

import re
from typing import Any

from formtree.constants import (
    CHOICE_MESSAGE,
    EMAIL_MESSAGE,
    EMAIL_PATTERN,
    ERROR_ENUM,
    ERROR_FORMAT,
    ERROR_MAX_LENGTH,
    ERROR_MAXIMUM,
    ERROR_MIN_LENGTH,
    ERROR_MINIMUM,
    ERROR_PATTERN,
    ERROR_REQUIRED,
    MAX_LENGTH_MESSAGE,
    MAXIMUM_MESSAGE,
    MIN_LENGTH_MESSAGE,
    MINIMUM_MESSAGE,
    PATTERN_MESSAGE,
    REQUIRED_MESSAGE,
)


def is_empty_value(value: Any) -> bool:
    """Return True for None, empty strings and empty containers."""
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict, set)):
        return len(value) == 0
    return False


class Validator:
    """Base validator: ``validate(value)`` returns True when value passes."""

    error_type = "invalid"
    message = "Enter a valid value."

    def validate(self, value: Any) -> bool:
        raise NotImplementedError

    def get_message(self, value: Any) -> str:
        """Message reported when *value* fails this validator."""
        return self.message

    def __call__(self, value: Any) -> bool:
        return self.validate(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class RequiredValidator(Validator):
    error_type = ERROR_REQUIRED

    def __init__(self, message: str = REQUIRED_MESSAGE):
        self.message = message

    def validate(self, value: Any) -> bool:
        return not is_empty_value(value)


class MinLengthValidator(Validator):
    error_type = ERROR_MIN_LENGTH

    def __init__(self, limit: int):
        self.limit = limit
        self.message = MIN_LENGTH_MESSAGE.format(limit=limit)

    def validate(self, value: Any) -> bool:
        return len(value) >= self.limit


class MaxLengthValidator(Validator):
    error_type = ERROR_MAX_LENGTH

    def __init__(self, limit: int):
        self.limit = limit
        self.message = MAX_LENGTH_MESSAGE.format(limit=limit)

    def validate(self, value: Any) -> bool:
        return len(value) <= self.limit


class MinimumValidator(Validator):
    error_type = ERROR_MINIMUM

    def __init__(self, limit: float):
        self.limit = limit
        self.message = MINIMUM_MESSAGE.format(limit=limit)

    def validate(self, value: Any) -> bool:
        return value >= self.limit


class MaximumValidator(Validator):
    error_type = ERROR_MAXIMUM

    def __init__(self, limit: float):
        self.limit = limit
        self.message = MAXIMUM_MESSAGE.format(limit=limit)

    def validate(self, value: Any) -> bool:
        return value <= self.limit


class PatternValidator(Validator):
    error_type = ERROR_PATTERN

    def __init__(self, pattern: str):
        # re.error is a ValueError, so a bad pattern fails field construction
        self.pattern = re.compile(pattern)
        self.message = PATTERN_MESSAGE.format(pattern=pattern)

    def validate(self, value: Any) -> bool:
        return self.pattern.search(value) is not None


class EmailValidator(Validator):
    error_type = ERROR_FORMAT
    message = EMAIL_MESSAGE

    def validate(self, value: Any) -> bool:
        return EMAIL_PATTERN.match(value) is not None


class ChoiceValidator(Validator):
    error_type = ERROR_ENUM

    def __init__(self, choices: list[Any]):
        self.choices = list(choices)

    def validate(self, value: Any) -> bool:
        return value in self.choices

    def get_message(self, value: Any) -> str:
        return CHOICE_MESSAGE.format(value=value)
