"""
Client-side view pipeline: filter -> sort -> paginate.

`compute` is a pure function of a collection snapshot and a ViewState. It
performs no I/O, never mutates the input records, and does not raise for
empty collections, unknown sort fields or empty search terms.

Sort policy:
- strings compare case-folded;
- values are grouped first: numbers (bool, int, float), then strings, then
  everything else ordered by type name; within a group values use their
  natural ordering, and values that cannot be ordered tie;
- a path that does not resolve sorts after every present value, in both
  directions;
- descending negates the comparison of present values, so ties keep their
  input order either way.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, List, Sequence, Tuple

from user_dashboard.domain.models import (
    Record,
    SortDirection,
    ViewResult,
    ViewState,
    count_pages,
)
from user_dashboard.utils.logging import get_logger
from user_dashboard.view.accessor import MISSING, resolve

log = get_logger(__name__)

SEARCH_FIELD = "name"


def filter_records(records: Sequence[Record], term: str) -> List[Record]:
    """
    Keep records whose ``name`` contains ``term``, ignoring case.

    An empty term keeps everything in the original order.
    """
    if not term:
        return list(records)

    needle = term.casefold()
    kept: List[Record] = []
    for record in records:
        name = resolve(record, SEARCH_FIELD)
        if isinstance(name, str) and needle in name.casefold():
            kept.append(record)
    return kept


def _group_key(value: Any) -> Tuple[int, str]:
    if isinstance(value, (int, float)):
        return (0, "")
    if isinstance(value, str):
        return (1, "")
    return (2, type(value).__name__)


def _compare_present(left: Any, right: Any) -> int:
    left_group, right_group = _group_key(left), _group_key(right)
    if left_group != right_group:
        return -1 if left_group < right_group else 1
    if isinstance(left, str):
        left, right = left.casefold(), right.casefold()
    try:
        if left < right:
            return -1
        if left > right:
            return 1
    except TypeError:
        pass
    return 0


def sort_records(
    records: Sequence[Record],
    sort_field: str,
    direction: SortDirection = SortDirection.ASCENDING,
) -> List[Record]:
    """
    Stable sort by the value at ``sort_field``.

    An empty field leaves the order untouched.
    """
    if not sort_field:
        return list(records)

    sign = -1 if direction == SortDirection.DESCENDING else 1

    def compare(left: Record, right: Record) -> int:
        left_value = resolve(left, sort_field)
        right_value = resolve(right, sort_field)
        if left_value is MISSING or right_value is MISSING:
            # Missing goes last regardless of direction.
            return (left_value is MISSING) - (right_value is MISSING)
        return sign * _compare_present(left_value, right_value)

    return sorted(records, key=cmp_to_key(compare))


def paginate(records: Sequence[Record], page_index: int, page_size: int) -> List[Record]:
    """
    Return the ``[page_index * page_size, + page_size)`` slice.

    Pages past the end come back empty.
    """
    if page_size <= 0:
        return []
    start = max(page_index, 0) * page_size
    if start >= len(records):
        return []
    return list(records[start : start + page_size])


def compute(collection: Sequence[Record], state: ViewState) -> ViewResult:
    """
    Produce the rows to render for ``state``.

    Parameters
    ----------
    collection : Sequence[Record]
        Records in arrival order. Not modified.
    state : ViewState
        Search, sort and pagination parameters.

    Returns
    -------
    ViewResult
        Visible rows plus filtered/page totals.
    """
    filtered = filter_records(collection, state.search_term)
    ordered = sort_records(filtered, state.sort_field, state.sort_direction)
    rows = paginate(ordered, state.page_index, state.page_size)
    total_pages = count_pages(len(ordered), state.page_size)

    log.debug(
        "View recomputed",
        extra={
            "collection": len(collection),
            "filtered": len(ordered),
            "page_index": state.page_index,
            "total_pages": total_pages,
        },
    )

    return ViewResult(
        visible_rows=rows,
        total_filtered=len(ordered),
        total_pages=total_pages,
        page_index=state.page_index,
        page_size=state.page_size,
    )


def toggle_sort(state: ViewState, sort_field: str) -> ViewState:
    """Column-header press: flip direction on the active field, else switch field."""
    return state.with_sort(sort_field)


__all__ = [
    "SEARCH_FIELD",
    "filter_records",
    "sort_records",
    "paginate",
    "compute",
    "toggle_sort",
]
