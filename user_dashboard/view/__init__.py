"""
View package for the User Dashboard.

Holds the pure filter/sort/paginate pipeline and the dotted-path accessor it
sorts with. Nothing in here performs I/O.
"""

from user_dashboard.view.accessor import MISSING, resolve
from user_dashboard.view.pipeline import (
    compute,
    filter_records,
    paginate,
    sort_records,
    toggle_sort,
)

__all__ = [
    "MISSING",
    "resolve",
    "compute",
    "filter_records",
    "paginate",
    "sort_records",
    "toggle_sort",
]
