# rowfilter/engine.py
"""
Row filter engine.

Filters a collection of rows against reference attribute values, usually the
values bound to a search form, keeping the rows every attribute accepts.

For each row and each reference attribute, in order:

1. resolve the row's value for the attribute (see ``celine.rowfilter.rows``);
   an attribute the row does not define is skipped when undefined attributes
   are ignored
2. record the resolved value for normalization
3. compare (see ``celine.rowfilter.comparators``); the first disqualifying
   attribute drops the row and the remaining attributes are not evaluated

The input collection is never modified: survivors are copied into a new
collection under their original ids, so gaps remain where rows were dropped.
"""
from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from celine.rowfilter.comparators import (
    Comparator,
    ComparatorRegistry,
    MatchResult,
    compare,
    get_comparator_registry,
)
from celine.rowfilter.core.config import settings
from celine.rowfilter.errors import RowFilterError
from celine.rowfilter.owner import AttributeNames, reference_attributes
from celine.rowfilter.rows import UNRESOLVED, wrap_row

logger = logging.getLogger(__name__)

Comparators = Union[ComparatorRegistry, Mapping[str, Comparator]]


def normalize_row(row: Any, resolved: Mapping[str, Any]) -> Any:
    """Reshape ``row`` into a mapping of its resolved attributes.

    A row for which nothing was resolved keeps its original shape.
    """
    if not resolved:
        return row
    return dict(resolved)


def match_row(
    row: Any,
    attributes: Mapping[str, Any],
    comparators: ComparatorRegistry,
    ignore_undefined_attributes: bool = True,
) -> Tuple[Optional[str], Dict[str, Any]]:
    """Compare one row against every reference attribute.

    Returns the name of the attribute that disqualified the row (None when
    the row is kept) and the values resolved up to that point.
    """
    wrapped = wrap_row(row)
    resolved: Dict[str, Any] = {}
    for name, reference in attributes.items():
        value = wrapped.resolve(name, ignore_undefined_attributes)
        if value is UNRESOLVED:
            continue
        resolved[name] = value
        result = compare(name, reference, row, value, comparators.get(name))
        if result is MatchResult.DISQUALIFY:
            return name, resolved
    return None, resolved


def _empty_like(rows: Mapping) -> MutableMapping:
    try:
        out = type(rows)()
    except TypeError:
        return {}
    return out if isinstance(out, MutableMapping) else {}


def filter_rows(
    rows: Union[Mapping[Hashable, Any], Iterable[Any]],
    attributes: Mapping[str, Any],
    comparators: Optional[Comparators] = None,
    normalize: bool = True,
    ignore_undefined_attributes: bool = True,
) -> MutableMapping[Hashable, Any]:
    """Filter ``rows`` by ``attributes``.

    Args:
        rows: mapping of row id to row, or any iterable of rows (ids are then
            the 0-based positions)
        attributes: ordered mapping of attribute name to reference value
        comparators: custom comparators by attribute name
        normalize: return survivors as mappings of their resolved attributes
        ignore_undefined_attributes: skip attributes an object row does not
            define, instead of raising ``UndefinedAttributeError``

    Returns:
        Survivors keyed by their original ids, in input order. A mapping
        input gives back the same mapping type when it can be built empty.
        Any other iterable gives back a dict keyed by position, not a list,
        so ``filter_rows(rows, {})`` equals ``dict(enumerate(rows))`` rather
        than ``rows`` itself.
    """
    registry = ComparatorRegistry.of(comparators)
    # snapshot so the reference set cannot change during the pass
    reference = dict(attributes)

    if isinstance(rows, Mapping):
        items: Iterable[Tuple[Hashable, Any]] = rows.items()
        result = _empty_like(rows)
    else:
        items = enumerate(rows)
        result = {}

    total = 0
    for row_id, row in items:
        total += 1
        disqualified_by, resolved = match_row(
            row, reference, registry, ignore_undefined_attributes
        )
        if disqualified_by is not None:
            logger.debug(
                "Row %r disqualified by attribute '%s'", row_id, disqualified_by
            )
            continue
        result[row_id] = normalize_row(row, resolved) if normalize else row

    logger.debug(
        "Filtered %d rows by %s: %d kept", total, list(reference), len(result)
    )
    return result


@dataclass(frozen=True)
class RowFilter:
    """Reusable filter configuration.

    Every option left to None falls back to the settings (comparators fall
    back to the shared registry). ``attribute_names`` selects which owner
    attributes are filtered on: True for the owner's safe attributes, None
    for all of them, or explicit names.
    """

    comparators: Optional[Comparators] = None
    normalize: Optional[bool] = None
    ignore_undefined_attributes: Optional[bool] = None
    attribute_names: AttributeNames = True

    def filter(
        self,
        rows: Union[Mapping[Hashable, Any], Iterable[Any]],
        attributes: Optional[Mapping[str, Any]] = None,
        comparators: Optional[Comparators] = None,
        normalize: Optional[bool] = None,
        ignore_undefined_attributes: Optional[bool] = None,
        owner: Any = None,
        attribute_names: AttributeNames = None,
    ) -> MutableMapping[Hashable, Any]:
        if attributes is None:
            if owner is None:
                raise RowFilterError(
                    "No reference attributes: pass attributes or an owner"
                )
            if attribute_names is None:
                attribute_names = self.attribute_names
            attributes = reference_attributes(owner, attribute_names)

        if comparators is None:
            comparators = self.comparators
        if comparators is None:
            comparators = get_comparator_registry()

        return filter_rows(
            rows,
            attributes,
            comparators=comparators,
            normalize=self._pick(normalize, self.normalize, settings.normalize_data),
            ignore_undefined_attributes=self._pick(
                ignore_undefined_attributes,
                self.ignore_undefined_attributes,
                settings.ignore_undefined_attributes,
            ),
        )

    @staticmethod
    def _pick(call_value: Any, instance_value: Any, default: Any) -> Any:
        if call_value is not None:
            return call_value
        if instance_value is not None:
            return instance_value
        return default
