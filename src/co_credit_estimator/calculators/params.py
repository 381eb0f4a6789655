"""Helpers shared by the calculator parameter tables."""

from types import MappingProxyType
from typing import Any, Mapping

PART_YEAR_REASON = "Part-year resident - benefit may be prorated"


def frozen(params: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only view of a parameter table, nested tables included."""
    return MappingProxyType(
        {
            key: frozen(value) if isinstance(value, dict) else value
            for key, value in params.items()
        }
    )
