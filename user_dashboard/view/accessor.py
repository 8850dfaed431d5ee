"""
Dotted-path lookups against user records.

    resolve({"address": {"city": "Gwenborough"}}, "address.city")  # "Gwenborough"
    resolve({"address": None}, "address.city") is MISSING            # True
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final


class _Missing:
    """Marker for a path that does not resolve. Distinct from ``None``."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()


def resolve(record: Mapping[str, Any], dotted_path: str) -> Any:
    """
    Walk ``record`` one path segment at a time.

    Returns MISSING when the path is empty, a segment is absent, or an
    intermediate value is not a mapping.
    """
    if not dotted_path:
        return MISSING

    current: Any = record
    for part in dotted_path.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return MISSING
        current = current[part]
    return current


__all__ = ["MISSING", "resolve"]
