"""
Case card composer.

Single Responsibility: turn a stored case-card version into the final,
procedure-specific card by
    1. cloning the version's eight sections,
    2. merging the items of every referenced preference-card version,
    3. applying the version's overrides in order.

The composer only reads from its repository and never writes; each call
works on call-local copies, so concurrent calls need no coordination.
"""

import logging
import time
from typing import Any, Dict, List, Optional

from ..core import config
from ..core.exceptions import (
    CaseCardVersionNotFoundError,
    DanglingComponentReferenceError,
)
from ..core.logging_config import log_performance
from ..domain.entities import (
    ITEM_SECTION_KEYS,
    CaseCardVersion,
    Component,
    CompositionResult,
)
from ..domain.interfaces import ICaseCardComposer, ICaseCardRepository
from ..utils.structural_clone import structural_clone
from .component_merger import merge_components
from .override_applier import apply_overrides

logger = logging.getLogger(__name__)


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _item_counts(sections: Dict[str, Any]) -> Dict[str, int]:
    counts = {}
    for key in ITEM_SECTION_KEYS:
        section = sections.get(key)
        items = section.get("items") if isinstance(section, dict) else None
        counts[key] = len(items) if isinstance(items, list) else 0
    return counts


class CaseCardComposer(ICaseCardComposer):
    """Composes case-card versions read through a case-card repository."""

    def __init__(
        self,
        repository: ICaseCardRepository,
        strict_component_refs: Optional[bool] = None,
    ):
        self.repository = repository
        if strict_component_refs is None:
            strict_component_refs = config.CASE_CARD_STRICT_COMPONENT_REFS
        self.strict_component_refs = strict_component_refs

    def compose(self, version_id: str) -> CompositionResult:
        """
        Compose the final case card for a version.

        Args:
            version_id: Case-card version identifier

        Returns:
            CompositionResult with the version id, the stored components list
            (unmodified) and the composed sections

        Raises:
            CaseCardVersionNotFoundError: The version does not exist
            DanglingComponentReferenceError: Strict mode only, when a component
                references a missing preference-card version
        """
        started = time.perf_counter()

        version = self.repository.get_case_card_version(version_id)
        if version is None:
            logger.info(
                "Case card version not found",
                extra={"context": {"version_id": version_id}},
            )
            raise CaseCardVersionNotFoundError(version_id)

        composed = self.clone_sections(version)
        components = _as_list(version.components)
        overrides = _as_list(version.overrides)

        if components:
            items_by_id = self._load_component_items(components)
            dangling = merge_components(
                composed, components, items_by_id, version_id=version_id
            )
            if dangling and self.strict_component_refs:
                raise DanglingComponentReferenceError(version_id, dangling)

        applied = apply_overrides(composed, overrides)

        logger.info(
            "Case card composed",
            extra={
                "context": {
                    "version_id": version_id,
                    "item_counts": _item_counts(composed),
                }
            },
        )

        duration_ms = (time.perf_counter() - started) * 1000
        log_performance(
            "compose_case_card_version",
            duration_ms,
            version_id=version_id,
            components=len(components),
            overrides=len(overrides),
            overrides_applied=applied,
        )

        return CompositionResult(
            version_id=version_id, components=components, composed=composed
        )

    @staticmethod
    def clone_sections(version: CaseCardVersion) -> Dict[str, Any]:
        """Deep-copy the version's sections into a fresh working document."""
        return {
            key: structural_clone(value) for key, value in version.sections().items()
        }

    def _load_component_items(self, components: List[Any]) -> Dict[str, Any]:
        """Batch-fetch the preference-card versions referenced by components."""
        ids: List[str] = []
        for raw in components:
            component = Component.from_dict(raw)
            if component is not None and component.is_resolvable:
                if component.preference_card_version_id not in ids:
                    ids.append(component.preference_card_version_id)

        if not ids:
            return {}

        rows = self.repository.get_preference_card_versions_by_ids(ids)
        return {row.id: row.items for row in rows}


def compose_case_card_version(
    version_id: str, repository: Optional[ICaseCardRepository] = None
) -> CompositionResult:
    """Compose a version using ``repository`` or a database-backed default."""
    if repository is not None:
        return CaseCardComposer(repository).compose(version_id)

    from ..db.session import SessionLocal
    from ..repositories.case_card_repository import CaseCardRepository

    db = SessionLocal()
    try:
        return CaseCardComposer(CaseCardRepository(db)).compose(version_id)
    finally:
        db.close()
