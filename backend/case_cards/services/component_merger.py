"""
Component merger.

Appends the items of each referenced preference-card version into the
case-card section chosen by the section classifier, tagging every merged
item with its provenance. Components are processed in list order and items
in stored order; nothing is reordered, deduplicated or aggregated.
"""

import logging
from typing import Any, Iterable, List, Mapping, MutableMapping, Optional

from ..domain.entities import (
    COMPONENT_ID_FIELD,
    PREFERENCE_SOURCE,
    SOURCE_FIELD,
    Component,
)
from ..utils.structural_clone import structural_clone
from .section_classifier import classify
from .sections import section_items

logger = logging.getLogger(__name__)


def tag_preference_item(item: Mapping[str, Any], component_id: str) -> dict:
    """Clone a preference item and stamp it with its source component."""
    tagged = structural_clone(item)
    tagged[SOURCE_FIELD] = PREFERENCE_SOURCE
    tagged[COMPONENT_ID_FIELD] = component_id
    return tagged


def unresolvable_component_id(position: int) -> str:
    return f"components[{position}]"


def merge_components(
    sections: MutableMapping[str, Any],
    components: Iterable[Any],
    items_by_component_id: Mapping[str, Any],
    version_id: Optional[str] = None,
) -> List[str]:
    """Merge component items into ``sections`` in place.

    Args:
        sections: Working (already cloned) case-card sections
        components: Raw component entries in case-card order
        items_by_component_id: Preference-card version id -> stored items
        version_id: Case-card version id, used for log context only

    Returns:
        Preference-card version ids referenced by components whose items
        could not be found (dangling references), in component order.
        Components with no usable id are reported as ``components[<index>]``.
    """
    dangling: List[str] = []

    for position, raw in enumerate(components):
        component = Component.from_dict(raw)
        if component is None or not component.is_resolvable:
            placeholder = unresolvable_component_id(position)
            dangling.append(placeholder)
            logger.warning(
                "Skipping component without a preference card version reference",
                extra={
                    "context": {"version_id": version_id, "component_id": placeholder}
                },
            )
            continue

        component_id = component.preference_card_version_id
        items = items_by_component_id.get(component_id)
        if not isinstance(items, list):
            dangling.append(component_id)
            logger.warning(
                "Preference card version not found for component; skipping",
                extra={
                    "context": {
                        "version_id": version_id,
                        "component_id": component_id,
                        "role": component.role,
                    }
                },
            )
            continue

        for index, item in enumerate(items):
            if not isinstance(item, Mapping):
                logger.warning(
                    "Skipping non-object preference item",
                    extra={
                        "context": {
                            "component_id": component_id,
                            "index": index,
                            "type": type(item).__name__,
                        }
                    },
                )
                continue
            target = classify(item)
            section_items(sections, target).append(
                tag_preference_item(item, component_id)
            )

    return dangling
