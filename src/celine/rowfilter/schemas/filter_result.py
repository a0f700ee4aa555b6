# rowfilter/schemas/filter_result.py
from __future__ import annotations

from typing import Any, Dict, Union

from pydantic import BaseModel


class FilterResult(BaseModel):
    items: Dict[Union[int, str], Any]
    input_count: int
    count: int
