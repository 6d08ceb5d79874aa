"""
Pytest markers and configuration for the case-card engine tests.

Marker definitions and collection hooks live here instead of conftest.py
so test categorization stays consistent across the suite.
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "database: mark test as database-related")
    config.addinivalue_line("markers", "services: mark test as service layer test")
    config.addinivalue_line("markers", "repositories: mark test as repository test")
    config.addinivalue_line("markers", "cli: mark test as management command test")


def pytest_collection_modifyitems(config, items):
    """Modify test items during collection."""
    for item in items:
        # Add markers based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)

        # Add service layer markers
        if "services" in str(item.fspath) or "composer" in str(item.fspath):
            item.add_marker(pytest.mark.services)

        # Add repository markers
        if "repo" in str(item.fspath) or "repository" in str(item.fspath):
            item.add_marker(pytest.mark.repositories)
            item.add_marker(pytest.mark.database)

        if "manage" in str(item.fspath):
            item.add_marker(pytest.mark.cli)
