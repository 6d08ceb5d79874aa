"""
Test configuration package initialization.

Exports marker hooks for conftest.py.
"""

from .markers import pytest_collection_modifyitems, pytest_configure

__all__ = [
    "pytest_configure",
    "pytest_collection_modifyitems",
]
