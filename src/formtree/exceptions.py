"""
Exceptions raised by formtree.

Construction problems are fatal and raised immediately; validation
problems are never raised, they are collected into error reports.
"""


class FormTreeError(Exception):
    """Base class for all formtree errors."""


class FieldConstructionError(FormTreeError, ValueError):
    """Raised when a field (or any part of a field tree) cannot be built."""


class UnknownDependencyError(FieldConstructionError):
    """Raised when a dependency declaration names a field that does not exist."""


class CircularDependencyError(FieldConstructionError):
    """Raised when dependency declarations form a cycle."""

    def __init__(self, message: str, cycle: list[str]):
        super().__init__(message)
        self.cycle = cycle


class FieldValueError(FormTreeError, TypeError):
    """Raised when a value cannot be assigned to a field."""


class WidgetNotFoundError(FormTreeError, LookupError):
    """Raised when no widget is registered under the requested name."""
