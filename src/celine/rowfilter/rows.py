# rowfilter/rows.py
"""
Attribute resolution for the rows being filtered.

A row is one of three shapes, each wrapped in its own variant:

- ``MappingRow``: a mapping of attribute name to value
- ``ObjectRow``: any object exposing named attributes (dataclasses,
  pydantic models, ORM rows, namespaces...)
- ``ScalarRow``: a bare value, compared as-is against every attribute

Every variant answers ``resolve(name, ignore_undefined)`` with either the
row's value for ``name`` or the ``UNRESOLVED`` marker, meaning the attribute
must be skipped for this row.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, Union
from uuid import UUID

from celine.rowfilter.errors import UndefinedAttributeError

SCALAR_TYPES = (
    str, bytes, bytearray, int, float, complex, Decimal, Fraction,
    Enum, date, time, timedelta, UUID,
)


class _Unresolved:
    __slots__ = ()

    def __repr__(self) -> str:
        return "UNRESOLVED"

    def __bool__(self) -> bool:
        return False


UNRESOLVED: Any = _Unresolved()


def is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, SCALAR_TYPES)


@dataclass(frozen=True)
class MappingRow:
    data: Mapping[str, Any]

    def resolve(self, name: str, ignore_undefined: bool) -> Any:
        if name in self.data:
            return self.data[name]
        if ignore_undefined:
            return UNRESOLVED
        # A missing key still resolves, to nothing
        return self.data.get(name)


@dataclass(frozen=True)
class ObjectRow:
    obj: Any

    def resolve(self, name: str, ignore_undefined: bool) -> Any:
        try:
            return getattr(self.obj, name)
        except AttributeError as e:
            if ignore_undefined:
                return UNRESOLVED
            raise UndefinedAttributeError(name, self.obj) from e


@dataclass(frozen=True)
class ScalarRow:
    value: Any

    def resolve(self, name: str, ignore_undefined: bool) -> Any:
        return self.value


Row = Union[MappingRow, ObjectRow, ScalarRow]


def wrap_row(row: Any) -> Row:
    """Pick the row variant matching the shape of ``row``."""
    if isinstance(row, (MappingRow, ObjectRow, ScalarRow)):
        return row
    if isinstance(row, Mapping):
        return MappingRow(row)
    if is_scalar(row):
        return ScalarRow(row)
    return ObjectRow(row)
