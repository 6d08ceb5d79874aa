"""
Integration tests for CaseCardRepository against in-memory SQLite.
"""

from unittest.mock import Mock

import pytest

from case_cards.db.base import CaseCardVersionRecord, PreferenceCardVersionRecord
from case_cards.domain.entities import CaseCardVersion, PreferenceCardVersion
from case_cards.repositories.case_card_repository import CaseCardRepository


def add_version(db_session, **fields):
    record = CaseCardVersionRecord(**fields)
    db_session.add(record)
    db_session.commit()
    db_session.refresh(record)
    return record


def add_preference(db_session, version_number=1, **fields):
    record = PreferenceCardVersionRecord(version_number=version_number, **fields)
    db_session.add(record)
    db_session.commit()
    db_session.refresh(record)
    return record


def test_get_case_card_version_returns_none_when_missing(db_session):
    repo = CaseCardRepository(db_session)

    assert repo.get_case_card_version("does-not-exist") is None


def test_get_case_card_version_maps_all_columns(db_session):
    record = add_version(
        db_session,
        case_card_id="card-1",
        version_number="1.2.0",
        header_info={"procedure": "Total Knee Arthroplasty"},
        instrumentation={"items": [{"catalogId": "tray-1"}]},
        components=[{"preferenceCardVersionId": "pv-1", "role": "SURGEON"}],
        overrides=[{"op": "remove", "section": "supplies", "match": {"catalogId": "x"}}],
    )
    repo = CaseCardRepository(db_session)

    version = repo.get_case_card_version(record.id)

    assert isinstance(version, CaseCardVersion)
    assert version.id == record.id
    assert version.case_card_id == "card-1"
    assert version.version_number == "1.2.0"
    assert version.header_info == {"procedure": "Total Knee Arthroplasty"}
    assert version.instrumentation == {"items": [{"catalogId": "tray-1"}]}
    assert version.supplies == {}
    assert version.components == [{"preferenceCardVersionId": "pv-1", "role": "SURGEON"}]
    assert version.overrides[0]["op"] == "remove"


def test_new_version_defaults_to_empty_lists(db_session):
    record = add_version(db_session)
    repo = CaseCardRepository(db_session)

    version = repo.get_case_card_version(record.id)

    assert version.components == []
    assert version.overrides == []


def test_get_preference_versions_by_ids_skips_missing(db_session):
    first = add_preference(
        db_session, preference_card_id="pc-1", items=[{"catalogId": "a"}]
    )
    second = add_preference(
        db_session, preference_card_id="pc-2", items=[{"catalogId": "b"}]
    )
    repo = CaseCardRepository(db_session)

    rows = repo.get_preference_card_versions_by_ids([first.id, "missing", second.id])

    assert all(isinstance(row, PreferenceCardVersion) for row in rows)
    by_id = {row.id: row.items for row in rows}
    assert by_id == {first.id: [{"catalogId": "a"}], second.id: [{"catalogId": "b"}]}


def test_get_preference_versions_with_no_ids_does_not_query():
    session = Mock()
    repo = CaseCardRepository(session)

    assert repo.get_preference_card_versions_by_ids([]) == []
    session.query.assert_not_called()


def test_repository_requires_a_session():
    with pytest.raises(TypeError):
        CaseCardRepository()
