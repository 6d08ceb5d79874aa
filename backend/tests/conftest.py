"""
Central pytest configuration for the case-card engine tests.

This file provides common fixtures, test markers, and setup
for both unit and integration tests.
"""

import logging
import os
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add backend directory to sys.path so `case_cards` and `manage` import
backend_root = Path(__file__).parent.parent  # backend/
sys.path.insert(0, str(backend_root))

# Test database configuration (set early so import-time engines use it)
TEST_DATABASE_URL = "sqlite:///:memory:"  # In-memory SQLite for fast tests
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ.setdefault("CASE_CARD_STRICT_COMPONENT_REFS", "false")

from case_cards.db import base as models  # noqa: E402,F401
from case_cards.db.session import Base  # noqa: E402
from case_cards.domain.entities import CaseCardVersion  # noqa: E402
from tests.config.markers import (  # noqa: E402,F401
    pytest_collection_modifyitems,
    pytest_configure,
)


def make_version(**fields) -> CaseCardVersion:
    """Build a case-card version with empty items sections."""
    data = {
        "id": "v1",
        "components": [],
        "overrides": [],
        "header_info": {},
        "patient_flags": {},
        "instrumentation": {"items": []},
        "equipment": {"items": []},
        "supplies": {"items": []},
        "medications": {"items": []},
        "setup_positioning": {"items": []},
        "surgeon_notes": {"items": []},
    }
    data.update(fields)
    return CaseCardVersion(**data)


@pytest.fixture
def version_factory():
    """Factory fixture returning make_version."""
    return make_version


@pytest.fixture
def db_engine():
    """Fresh in-memory SQLite engine with all tables created."""
    engine = create_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    """Provide an isolated database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging() side effects on the root and package loggers."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
    logging.getLogger("case_cards").setLevel(logging.NOTSET)


@pytest.fixture
def app_db():
    """Tables on the application's lazy engine (shared in-memory SQLite)."""
    from case_cards.db.session import create_tables, get_engine

    create_tables()
    yield get_engine()
    Base.metadata.drop_all(bind=get_engine())
