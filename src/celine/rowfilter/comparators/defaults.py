# rowfilter/comparators/defaults.py
"""
Built-in comparison rules, used for every attribute without a custom comparator.

In order, the first rule that applies decides:

1. an empty reference value never disqualifies
2. text row value, sequence reference: exact membership
3. text row value, scalar reference: case-insensitive substring
4. other row value, sequence reference: loose membership
5. other row value, scalar reference: loose equality

Anything else disqualifies the row.
"""
from __future__ import annotations

import re
from collections.abc import Collection, Mapping, Sized
from decimal import Decimal, InvalidOperation
from enum import Enum
from numbers import Number
from typing import Any, Iterable, Optional

from celine.rowfilter.comparators.models import MatchResult
from celine.rowfilter.rows import is_scalar

_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def is_empty(value: Any) -> bool:
    """Python truthiness, except objects refusing a boolean answer are not empty."""
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    try:
        return not value
    except (TypeError, ValueError):
        return False


def is_sequence(value: Any) -> bool:
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, Collection)


def _members(reference: Any) -> Iterable[Any]:
    if isinstance(reference, Mapping):
        return reference.values()
    return reference


def _text(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="replace")
    return str(value)


def _to_number(text: str) -> Optional[Number]:
    if not _NUMERIC_RE.match(text):
        return None
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        return float(text)


def _truthy(value: Any) -> bool:
    if isinstance(value, str) and value.strip() == "0":
        return False
    return not is_empty(value)


def loose_equals(left: Any, right: Any) -> bool:
    """Type-coercing equality.

    Numbers match numeric strings (``30 == "30"``), ``None`` matches any empty
    value, booleans compare by truthiness and enum members by their value.
    Other scalars (dates, UUIDs...) match a string equal to their ``str()``,
    containers and arbitrary objects never equal a string.
    """
    if left is None or right is None:
        return is_empty(left) and is_empty(right)
    if isinstance(left, bool) or isinstance(right, bool):
        return _truthy(left) == _truthy(right)
    if isinstance(left, Enum):
        return loose_equals(left.value, right)
    if isinstance(right, Enum):
        return loose_equals(left, right.value)

    if left == right:
        return True

    if isinstance(left, str):
        left, right = right, left
    if not isinstance(right, str) or isinstance(left, str):
        return False

    if isinstance(left, Decimal):
        try:
            return left == Decimal(right.strip())
        except InvalidOperation:
            return False
    if isinstance(left, Number):
        number = _to_number(right)
        if number is not None:
            return left == number
    if not is_scalar(left):
        return False
    return _text(left) == right


def default_compare(reference: Any, value: Any) -> MatchResult:
    """Apply the built-in rules to a resolved row value."""
    if is_empty(reference):
        return MatchResult.KEEP

    if isinstance(value, (bytes, bytearray)):
        value = _text(value)

    if isinstance(value, str):
        if is_sequence(reference):
            matched = any(
                isinstance(member, str) and member == value
                for member in _members(reference)
            )
        else:
            matched = _text(reference).lower() in value.lower()
    elif is_sequence(reference):
        matched = any(loose_equals(value, member) for member in _members(reference))
    else:
        matched = loose_equals(value, reference)

    return MatchResult.KEEP if matched else MatchResult.DISQUALIFY
