"""
Structural clone for JSON-like documents.

Walks mappings and sequences recursively and rebuilds them, so the result
shares no mutable container with the input. Unlike a serialize/deserialize
round-trip, values that JSON cannot represent (datetimes, Decimals, tuples,
sets) come back with their original types.
"""

import copy
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Mapping
from uuid import UUID

# Immutable leaves returned as-is
_ATOMIC_TYPES = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    Decimal,
    datetime,
    date,
    time,
    UUID,
)


def structural_clone(value: Any) -> Any:
    """Return a deep, alias-free copy of ``value``."""
    if isinstance(value, _ATOMIC_TYPES):
        return value
    if isinstance(value, Mapping):
        return {key: structural_clone(val) for key, val in value.items()}
    if isinstance(value, list):
        return [structural_clone(element) for element in value]
    if isinstance(value, tuple):
        return tuple(structural_clone(element) for element in value)
    if isinstance(value, (set, frozenset)):
        return type(value)(structural_clone(element) for element in value)
    # Anything else (custom objects): fall back to the generic deep copy
    return copy.deepcopy(value)
