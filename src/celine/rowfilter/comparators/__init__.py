from __future__ import annotations

from .models import Comparator, MatchResult
from .registry import ComparatorRegistry, get_comparator_registry
from .defaults import default_compare, is_empty, loose_equals
from .dispatcher import compare

__all__ = [
    "Comparator",
    "MatchResult",
    "ComparatorRegistry",
    "get_comparator_registry",
    "default_compare",
    "is_empty",
    "loose_equals",
    "compare",
]
