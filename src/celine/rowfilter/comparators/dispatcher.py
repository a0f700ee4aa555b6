from __future__ import annotations

from typing import Any, Optional

from celine.rowfilter.comparators.defaults import default_compare
from celine.rowfilter.comparators.models import Comparator, MatchResult


def compare(
    name: str,
    reference: Any,
    row: Any,
    value: Any,
    comparator: Optional[Comparator] = None,
) -> MatchResult:
    """Decide whether attribute ``name`` disqualifies ``row``.

    A custom comparator sees the original row, not the resolved value, and
    always wins unless it explicitly returns ``MatchResult.DEFER``.
    Never returns DEFER.
    """
    if comparator is not None:
        result = MatchResult.from_comparator(comparator(name, reference, row))
        if result is not MatchResult.DEFER:
            return result
    return default_compare(reference, value)
