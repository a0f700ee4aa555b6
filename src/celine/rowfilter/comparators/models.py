from __future__ import annotations

from enum import Enum
from typing import Any, Callable

# (attribute name, reference value, original row) -> MatchResult or legacy value
Comparator = Callable[[str, Any, Any], Any]


class MatchResult(Enum):
    """Outcome of comparing one attribute of one row.

    - KEEP: the attribute does not disqualify the row
    - DISQUALIFY: the row is dropped
    - DEFER: a custom comparator hands the decision to the built-in rules
    """

    KEEP = "keep"
    DISQUALIFY = "disqualify"
    DEFER = "defer"

    @classmethod
    def from_comparator(cls, value: Any) -> "MatchResult":
        # Legacy comparators only disqualify by returning exactly False
        if isinstance(value, MatchResult):
            return value
        if value is False:
            return cls.DISQUALIFY
        return cls.KEEP
