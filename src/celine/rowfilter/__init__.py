from __future__ import annotations

from .comparators import ComparatorRegistry, MatchResult, get_comparator_registry
from .engine import RowFilter, filter_rows
from .errors import RowFilterError, UndefinedAttributeError
from .model import FilterModel
from .owner import AttributeOwner, reference_attributes

__all__ = [
    "ComparatorRegistry",
    "MatchResult",
    "get_comparator_registry",
    "RowFilter",
    "filter_rows",
    "RowFilterError",
    "UndefinedAttributeError",
    "FilterModel",
    "AttributeOwner",
    "reference_attributes",
]
