"""
Domain package for the User Dashboard.

Exports the listing state, pipeline result, and login models shared by the
view pipeline, screens, and CLI. Keep this package focused on data
definitions and validation concerns.
"""

from user_dashboard.domain.models import (
    Credentials,
    Record,
    SessionRecord,
    SortDirection,
    ViewResult,
    ViewState,
    count_pages,
)

__all__ = [
    "Credentials",
    "Record",
    "SessionRecord",
    "SortDirection",
    "ViewResult",
    "ViewState",
    "count_pages",
]
