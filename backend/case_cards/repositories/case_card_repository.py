from typing import List, Optional, Sequence

from case_cards.db.base import CaseCardVersionRecord, PreferenceCardVersionRecord
from case_cards.domain.entities import CaseCardVersion, PreferenceCardVersion
from case_cards.domain.interfaces import ICaseCardRepository


class CaseCardRepository(ICaseCardRepository):
    """Read-only SQLAlchemy access to case-card and preference-card versions."""

    def __init__(self, db_session):
        self.db = db_session

    def get_case_card_version(self, version_id: str) -> Optional[CaseCardVersion]:
        db_version = self.db.get(CaseCardVersionRecord, version_id)
        return self._version_to_domain(db_version) if db_version else None

    def get_preference_card_versions_by_ids(
        self, ids: Sequence[str]
    ) -> List[PreferenceCardVersion]:
        # Missing ids are simply absent from the result
        if not ids:
            return []
        rows = (
            self.db.query(PreferenceCardVersionRecord)
            .filter(PreferenceCardVersionRecord.id.in_(list(ids)))
            .all()
        )
        return [self._preference_to_domain(row) for row in rows]

    def _version_to_domain(self, db_version: CaseCardVersionRecord) -> CaseCardVersion:
        return CaseCardVersion(
            id=db_version.id,
            case_card_id=getattr(db_version, "case_card_id", None),
            version_number=getattr(db_version, "version_number", None),
            header_info=db_version.header_info,
            patient_flags=db_version.patient_flags,
            instrumentation=db_version.instrumentation,
            equipment=db_version.equipment,
            supplies=db_version.supplies,
            medications=db_version.medications,
            setup_positioning=db_version.setup_positioning,
            surgeon_notes=db_version.surgeon_notes,
            components=db_version.components,
            overrides=db_version.overrides,
            created_at=getattr(db_version, "created_at", None),
        )

    def _preference_to_domain(
        self, db_pref: PreferenceCardVersionRecord
    ) -> PreferenceCardVersion:
        return PreferenceCardVersion(
            id=db_pref.id,
            items=db_pref.items,
            preference_card_id=getattr(db_pref, "preference_card_id", None),
            version_number=getattr(db_pref, "version_number", None),
            created_at=getattr(db_pref, "created_at", None),
        )
