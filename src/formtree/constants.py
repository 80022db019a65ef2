"""
Constants for formtree.

Messages, error tokens and name patterns shared by fields, validators
and the form layer. Centralizing these keeps the wording consistent.
"""

import re

# Property names may hold anything but dots, which separate path segments
VALID_FIELD_NAME = re.compile(r"^[^.]+$")

# Path separator for get_field_by_path
PATH_SEPARATOR = "."

# Key for errors that belong to a composite itself rather than a child
NON_FIELD_ERRORS = "__all__"

# Default messages
REQUIRED_MESSAGE = "This field is required."
DEPENDENCY_MESSAGE = "This field depends on an invalid field: {fields}."
INVALID_STRING_MESSAGE = "Enter a valid text value."
INVALID_INTEGER_MESSAGE = "Enter a whole number."
INVALID_NUMBER_MESSAGE = "Enter a number."
INVALID_BOOLEAN_MESSAGE = "Enter true or false."
MIN_LENGTH_MESSAGE = "Ensure this value has at least {limit} characters."
MAX_LENGTH_MESSAGE = "Ensure this value has at most {limit} characters."
MINIMUM_MESSAGE = "Ensure this value is greater than or equal to {limit}."
MAXIMUM_MESSAGE = "Ensure this value is less than or equal to {limit}."
PATTERN_MESSAGE = "Enter a value matching the pattern {pattern}."
EMAIL_MESSAGE = "Enter a valid email address."
CHOICE_MESSAGE = "Select a valid choice. {value!r} is not one of the available choices."

# Error type tokens
ERROR_REQUIRED = "required"
ERROR_TYPE = "type"
ERROR_DEPENDENCY = "dependency"
ERROR_MIN_LENGTH = "min_length"
ERROR_MAX_LENGTH = "max_length"
ERROR_MINIMUM = "minimum"
ERROR_MAXIMUM = "maximum"
ERROR_PATTERN = "pattern"
ERROR_FORMAT = "format"
ERROR_ENUM = "enum"

# Loose email shape check, not RFC 5322
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# Accepted string spellings for boolean values
TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
FALSE_STRINGS = frozenset({"false", "0", "no", "off"})
