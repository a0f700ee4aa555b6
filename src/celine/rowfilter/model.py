# rowfilter/model.py
"""
Search form models that filter rows with their own field values.

    class PersonSearch(FilterModel):
        name: Optional[str] = None
        age: Optional[int] = None

    PersonSearch(name="al").filter(rows)

Fields left to None or "" do not filter anything. Fields declared with
``Field(exclude=True)`` are not safe and only take part in filtering when
named explicitly.
"""
from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping, MutableMapping
from typing import Any, ClassVar, List, Optional, Union

from pydantic import BaseModel

from celine.rowfilter.engine import Comparators, RowFilter
from celine.rowfilter.owner import AttributeNames


class FilterModel(BaseModel):
    # per subclass defaults; override with e.g. RowFilter(comparators={...})
    row_filter: ClassVar[RowFilter] = RowFilter()

    def attribute_names(self) -> List[str]:
        return list(type(self).model_fields)

    def safe_attribute_names(self) -> List[str]:
        return [
            name
            for name, info in type(self).model_fields.items()
            if not info.exclude
        ]

    def filter(
        self,
        rows: Union[Mapping[Hashable, Any], Iterable[Any]],
        attribute_names: AttributeNames = None,
        comparators: Optional[Comparators] = None,
        normalize: Optional[bool] = None,
        ignore_undefined_attributes: Optional[bool] = None,
    ) -> MutableMapping[Hashable, Any]:
        """Filter ``rows`` by this model's attribute values.

        Options left to None use ``row_filter``'s defaults.
        """
        return self.row_filter.filter(
            rows,
            comparators=comparators,
            normalize=normalize,
            ignore_undefined_attributes=ignore_undefined_attributes,
            owner=self,
            attribute_names=attribute_names,
        )
