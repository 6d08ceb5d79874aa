"""
Domain entities - Pure business logic, no framework dependencies.

Case-card composition works on loosely structured JSON documents (sections,
preference items, override payloads). The entities below give names to the
records the composer reads without forcing a schema onto section contents.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

# Sections that hold an ``items`` list built by merge + override
ITEM_SECTION_KEYS = (
    "instrumentation",
    "equipment",
    "supplies",
    "medications",
    "setup_positioning",
    "surgeon_notes",
)

# Free-form sections passed through unchanged
FREEFORM_SECTION_KEYS = ("header_info", "patient_flags")

SECTION_KEYS = FREEFORM_SECTION_KEYS + ITEM_SECTION_KEYS

OVERRIDE_OPS = ("add", "remove", "replace")

# Provenance tags stamped on merged preference items
SOURCE_FIELD = "_source"
COMPONENT_ID_FIELD = "_componentId"
PREFERENCE_SOURCE = "preference"


@dataclass
class Component:
    """Reference from a case-card version to one preference-card version.

    ``role`` and ``label`` are display metadata only; merging ignores them.
    """

    preference_card_version_id: Optional[str] = None
    role: Optional[str] = None
    label: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Any) -> Optional["Component"]:
        if not isinstance(raw, Mapping):
            return None
        ref = raw.get("preferenceCardVersionId")
        return cls(
            preference_card_version_id=ref if isinstance(ref, str) and ref else None,
            role=raw.get("role"),
            label=raw.get("label"),
        )

    @property
    def is_resolvable(self) -> bool:
        return self.preference_card_version_id is not None


@dataclass
class Override:
    """Structured add/remove/replace edit applied after merging."""

    op: Optional[str] = None
    section: Optional[str] = None
    match: Optional[Dict[str, Any]] = None
    item: Optional[Dict[str, Any]] = None

    @classmethod
    def from_dict(cls, raw: Any) -> Optional["Override"]:
        if not isinstance(raw, Mapping):
            return None
        match = raw.get("match")
        item = raw.get("item")
        return cls(
            op=raw.get("op"),
            section=raw.get("section"),
            match=dict(match) if isinstance(match, Mapping) else None,
            item=dict(item) if isinstance(item, Mapping) else None,
        )

    @property
    def target_section(self) -> Optional[str]:
        """Section key this override edits, or None when it has no usable key."""
        if isinstance(self.section, str) and self.section:
            return self.section
        return None


@dataclass
class PreferenceCardVersion:
    """Immutable snapshot of a surgeon's preference card items."""

    id: str = ""
    items: Any = field(default_factory=list)
    preference_card_id: Optional[str] = None
    version_number: Optional[int] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate domain rules."""
        if not self.id:
            raise ValueError("Preference card version id is required")


@dataclass
class CaseCardVersion:
    """Facility case-card template version, read-only to the composer.

    ``components`` and ``overrides`` hold the lists exactly as stored; they are
    coerced to lists at composition time, not here.
    """

    id: str = ""
    header_info: Any = field(default_factory=dict)
    patient_flags: Any = field(default_factory=dict)
    instrumentation: Any = field(default_factory=dict)
    equipment: Any = field(default_factory=dict)
    supplies: Any = field(default_factory=dict)
    medications: Any = field(default_factory=dict)
    setup_positioning: Any = field(default_factory=dict)
    surgeon_notes: Any = field(default_factory=dict)
    components: Any = field(default_factory=list)
    overrides: Any = field(default_factory=list)
    case_card_id: Optional[str] = None
    version_number: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate domain rules."""
        if not self.id:
            raise ValueError("Case card version id is required")

    def sections(self) -> Dict[str, Any]:
        """Return the eight stored sections keyed by section name (not cloned)."""
        return {key: getattr(self, key) for key in SECTION_KEYS}


@dataclass
class CompositionResult:
    """Output of one compose call. Never persisted by the composer."""

    version_id: str
    components: List[Any]
    composed: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "versionId": self.version_id,
            "components": self.components,
            "composed": self.composed,
        }
