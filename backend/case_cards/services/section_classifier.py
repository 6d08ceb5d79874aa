"""
Section classifier for preference-card items.

Maps an item's free-text ``section`` (or, failing that, ``category``) hint
to one of the six item-holding case-card sections. Rules are an ordered
table of (predicate, section) pairs; the first rule that matches wins, so
table order is the precedence rule. Items that match nothing land in
``supplies``.
"""

from typing import Any, Callable, Mapping, Tuple

Rule = Tuple[Callable[[str], bool], str]

DEFAULT_SECTION = "supplies"


def _contains(*needles: str) -> Callable[[str], bool]:
    return lambda hint: any(needle in hint for needle in needles)


# Order matters: "medication positioning" is a medications item.
CLASSIFICATION_RULES: Tuple[Rule, ...] = (
    (_contains("instrument"), "instrumentation"),
    (_contains("equip"), "equipment"),
    (_contains("med"), "medications"),
    (_contains("setup", "position"), "setup_positioning"),
    (_contains("note"), "surgeon_notes"),
)


def section_hint(item: Any) -> str:
    """Lower-cased classification hint: ``section``, else ``category``, else ''.

    Empty or non-string values count as absent.
    """
    if not isinstance(item, Mapping):
        return ""
    for key in ("section", "category"):
        value = item.get(key)
        if isinstance(value, str) and value:
            return value.lower()
    return ""


def classify(item: Any) -> str:
    """Return the section key for a preference item. Never raises."""
    hint = section_hint(item)
    for predicate, section in CLASSIFICATION_RULES:
        if predicate(hint):
            return section
    return DEFAULT_SECTION
