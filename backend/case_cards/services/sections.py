"""Helpers shared by the merge and override steps for items sections."""

import logging
from typing import Any, Dict, List, MutableMapping

logger = logging.getLogger(__name__)


def ensure_items_section(sections: MutableMapping[str, Any], key: str) -> Dict[str, Any]:
    """Make ``sections[key]`` a dict holding an ``items`` list and return it.

    A missing or ``None`` section becomes ``{"items": []}``. A non-dict
    section is replaced the same way. A dict whose ``items`` is not a list
    gets an empty list; its other keys are kept.
    """
    section = sections.get(key)
    if section is None:
        section = {"items": []}
    elif not isinstance(section, dict):
        logger.warning(
            "Replacing non-object section with an empty items section",
            extra={"context": {"section": key, "type": type(section).__name__}},
        )
        section = {"items": []}
    if not isinstance(section.get("items"), list):
        section["items"] = []
    sections[key] = section
    return section


def section_items(sections: MutableMapping[str, Any], key: str) -> List[Any]:
    return ensure_items_section(sections, key)["items"]
