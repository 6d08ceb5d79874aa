"""
Override applier.

Applies an ordered list of add/remove/replace edits to the working case-card
sections. Overrides run strictly in order, so later entries see the effect of
earlier ones. Edits that find nothing to act on are no-ops, which keeps
re-applying the same overrides safe.
"""

import logging
from numbers import Number
from typing import Any, Iterable, List, Mapping, MutableMapping, Optional

from ..domain.entities import Override
from ..utils.structural_clone import structural_clone
from .sections import ensure_items_section

logger = logging.getLogger(__name__)


def strict_equals(left: Any, right: Any) -> bool:
    """Equality without cross-type coercion.

    Booleans never equal numbers and strings never equal numbers. Numbers
    compare by value. Mappings and lists compare element-wise.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if isinstance(left, Number) and isinstance(right, Number):
        return left == right
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if left.keys() != right.keys():
            return False
        return all(strict_equals(left[key], right[key]) for key in left)
    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        return len(left) == len(right) and all(
            strict_equals(a, b) for a, b in zip(left, right)
        )
    if type(left) is not type(right):
        return False
    return left == right


def matches(candidate: Any, match: Mapping[str, Any]) -> bool:
    """True when every key in ``match`` equals the candidate's field.

    Extra fields on the candidate are ignored; a missing field never matches.
    """
    if not isinstance(candidate, Mapping):
        return False
    return all(
        key in candidate and strict_equals(candidate[key], value)
        for key, value in match.items()
    )


def find_first_match(items: List[Any], match: Mapping[str, Any]) -> Optional[int]:
    for index, candidate in enumerate(items):
        if matches(candidate, match):
            return index
    return None


def apply_override(
    sections: MutableMapping[str, Any], override: Override, position: int = 0
) -> bool:
    """Apply a single override to ``sections`` in place.

    Returns:
        True when the items of the target section changed.
    """
    key = override.target_section
    if key is None:
        logger.debug(
            "Skipping override without a target section",
            extra={"context": {"position": position, "op": override.op}},
        )
        return False

    section = ensure_items_section(sections, key)
    items: List[Any] = section["items"]

    if override.op == "add" and override.item is not None:
        section["items"] = items + [structural_clone(override.item)]
        return True

    if override.op == "remove" and override.match is not None:
        index = find_first_match(items, override.match)
        if index is None:
            _log_no_match(override, position)
            return False
        section["items"] = items[:index] + items[index + 1 :]
        return True

    if (
        override.op == "replace"
        and override.match is not None
        and override.item is not None
    ):
        index = find_first_match(items, override.match)
        if index is None:
            _log_no_match(override, position)
            return False
        merged = {**items[index], **structural_clone(override.item)}
        section["items"] = items[:index] + [merged] + items[index + 1 :]
        return True

    logger.debug(
        "Skipping override with unknown op or missing payload",
        extra={"context": {"position": position, "op": override.op, "section": key}},
    )
    return False


def apply_overrides(sections: MutableMapping[str, Any], overrides: Iterable[Any]) -> int:
    """Apply raw override entries in order.

    Returns:
        Number of overrides that changed a section.
    """
    applied = 0
    for position, raw in enumerate(overrides):
        override = Override.from_dict(raw)
        if override is None:
            logger.debug(
                "Skipping non-object override",
                extra={"context": {"position": position}},
            )
            continue
        if apply_override(sections, override, position):
            applied += 1
    return applied


def _log_no_match(override: Override, position: int) -> None:
    logger.debug(
        "Override matched no item",
        extra={
            "context": {
                "position": position,
                "op": override.op,
                "section": override.section,
                "match": override.match,
            }
        },
    )
