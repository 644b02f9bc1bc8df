from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

RowValue = Union[str, int, float, bool, None]
Row = Dict[str, RowValue]


@dataclass
class QueryResponse:
    """
    Uniform outcome of every keep-alive step.

    No exception crosses a helper boundary for remote errors; they are
    folded into successful=False plus a readable message.
    """

    successful: bool
    message: str


@dataclass
class QueryResponseWithData(QueryResponse):
    data: Optional[List[Row]] = None


def as_rows(data: Any) -> Optional[List[Row]]:
    # rows are counted as returned; a non-list payload counts as no payload
    if isinstance(data, list):
        return data
    return None
