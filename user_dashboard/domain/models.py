"""
Domain models for the User Dashboard.

ViewState is the caller-owned listing state handed to the view pipeline by
value; transitions return new instances instead of mutating in place.
ViewResult is what the pipeline produces for one recomputation. Credentials
and SessionRecord model the login boundary.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping

from pydantic import BaseModel, Field, SecretStr

Record = Mapping[str, Any]


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    def flipped(self) -> "SortDirection":
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING


class ViewState(BaseModel):
    """
    Search, sort and pagination parameters for one listing screen.
    """

    search_term: str = Field("", description="Substring matched against `name`.")
    sort_field: str = Field("name", description="Dotted path to sort by; empty disables sorting.")
    sort_direction: SortDirection = Field(SortDirection.ASCENDING)
    page_index: int = Field(0, ge=0, description="Zero-based page index.")
    page_size: int = Field(5, gt=0, description="Rows per page.")

    model_config = {
        "frozen": True,
    }

    def with_search(self, term: str) -> "ViewState":
        """New search term; the page resets to the first one."""
        return self.model_copy(update={"search_term": term, "page_index": 0})

    def with_page_size(self, size: int) -> "ViewState":
        if size <= 0:
            raise ValueError(f"page_size must be positive, got {size}")
        return self.model_copy(update={"page_size": size, "page_index": 0})

    def with_page(self, index: int, total_pages: int) -> "ViewState":
        """Move to ``index``, clamped to the pages that exist (at least one)."""
        last = max(total_pages, 1) - 1
        return self.model_copy(update={"page_index": min(max(index, 0), last)})

    def with_sort(self, sort_field: str) -> "ViewState":
        """
        Select a sort column.

        Re-selecting the active column flips the direction; a different
        column becomes active in ascending order.
        """
        if sort_field == self.sort_field:
            return self.model_copy(update={"sort_direction": self.sort_direction.flipped()})
        return self.model_copy(
            update={"sort_field": sort_field, "sort_direction": SortDirection.ASCENDING}
        )


@dataclass(frozen=True)
class ViewResult:
    """
    Rows to render plus the totals needed by the pagination control.
    """

    visible_rows: List[Record] = field(default_factory=list)
    total_filtered: int = 0
    total_pages: int = 0
    page_index: int = 0
    page_size: int = 5

    @property
    def display_pages(self) -> int:
        """An empty result is still shown as one page of zero rows."""
        return max(self.total_pages, 1)

    @property
    def range_label(self) -> str:
        """Pagination label in ``"<from>-<to> of <total>"`` form."""
        if not self.visible_rows:
            return f"0-0 of {self.total_filtered}"
        start = self.page_index * self.page_size + 1
        end = min((self.page_index + 1) * self.page_size, self.total_filtered)
        return f"{start}-{end} of {self.total_filtered}"


def count_pages(total: int, page_size: int) -> int:
    """ceil(total / page_size); zero when either side is non-positive."""
    if total <= 0 or page_size <= 0:
        return 0
    return math.ceil(total / page_size)


class Credentials(BaseModel):
    """
    Identity submitted at the login gate.
    """

    email: str
    password: SecretStr

    model_config = {
        "frozen": True,
    }


class SessionRecord(BaseModel):
    """
    Payload persisted under the session key after a successful login.
    """

    email: str = Field(..., description="Email the session was created for.")

    model_config = {
        "frozen": True,
    }


__all__ = [
    "Record",
    "SortDirection",
    "ViewState",
    "ViewResult",
    "count_pages",
    "Credentials",
    "SessionRecord",
]
