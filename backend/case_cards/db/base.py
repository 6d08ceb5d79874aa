from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, Integer, String, UniqueConstraint, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from .session import Base

# JSONB on PostgreSQL, plain JSON on SQLite and other databases
JsonDocument = JSON().with_variant(JSONB(), "postgresql")


def _new_id() -> str:
    return str(uuid.uuid4())


class CaseCardVersionRecord(Base):
    """Immutable snapshot of a facility case card.

    Sections are free-form JSON documents. ``components`` is a list of
    ``{preferenceCardVersionId, role?, label?}`` refs and ``overrides`` a list
    of ``{op, section, match?, item?}`` edits applied after merging.
    """

    __tablename__ = "case_card_version"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    case_card_id: Mapped[Optional[str]] = mapped_column(
        String(36), nullable=True, index=True
    )
    version_number: Mapped[str] = mapped_column(
        String(20), nullable=False, default="1.0.0"
    )  # Semantic: MAJOR.MINOR.PATCH

    header_info: Mapped[Any] = mapped_column(JsonDocument, nullable=False, default=dict)
    patient_flags: Mapped[Any] = mapped_column(
        JsonDocument, nullable=False, default=dict
    )
    instrumentation: Mapped[Any] = mapped_column(
        JsonDocument, nullable=False, default=dict
    )
    equipment: Mapped[Any] = mapped_column(JsonDocument, nullable=False, default=dict)
    supplies: Mapped[Any] = mapped_column(JsonDocument, nullable=False, default=dict)
    medications: Mapped[Any] = mapped_column(JsonDocument, nullable=False, default=dict)
    setup_positioning: Mapped[Any] = mapped_column(
        JsonDocument, nullable=False, default=dict
    )
    surgeon_notes: Mapped[Any] = mapped_column(
        JsonDocument, nullable=False, default=dict
    )

    components: Mapped[Any] = mapped_column(JsonDocument, nullable=False, default=list)
    overrides: Mapped[Any] = mapped_column(JsonDocument, nullable=False, default=list)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<CaseCardVersionRecord(id={self.id}, version={self.version_number})>"


class PreferenceCardVersionRecord(Base):
    """Immutable snapshot of a surgeon preference card's items."""

    __tablename__ = "preference_card_version"
    __table_args__ = (
        UniqueConstraint(
            "preference_card_id", "version_number", name="uq_pref_card_version"
        ),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    preference_card_id: Mapped[Optional[str]] = mapped_column(
        String(36), nullable=True, index=True
    )
    version_number: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    # Array of {catalogId, quantity, notes, section?, category?}
    items: Mapped[Any] = mapped_column(JsonDocument, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<PreferenceCardVersionRecord(id={self.id}, version={self.version_number})>"
