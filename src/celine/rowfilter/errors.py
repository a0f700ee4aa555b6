from __future__ import annotations

from typing import Any


class RowFilterError(Exception):
    """Base class for errors raised by the row filter."""


class UndefinedAttributeError(RowFilterError, AttributeError):
    """An object row does not define an attribute being filtered on.

    Only raised when undefined attributes are not ignored. Subclasses
    AttributeError so callers already catching attribute lookups keep working.
    """

    def __init__(self, attribute: str, row: Any):
        super().__init__(
            f"Row of type {type(row).__name__} has no attribute '{attribute}'"
        )
        self.attribute = attribute
        self.row = row
