"""
Domain package - Pure business logic layer.

This package contains:
- entities.py: Domain entities and section-key constants
- interfaces.py: Repository and service contracts

Following SOLID principles:
- Single Responsibility: Each module has one purpose
- Dependency Inversion: Interfaces define contracts
"""

from .entities import (
    ITEM_SECTION_KEYS,
    SECTION_KEYS,
    CaseCardVersion,
    Component,
    CompositionResult,
    Override,
    PreferenceCardVersion,
)
from .interfaces import (
    ICaseCardComposer,
    ICaseCardRepository,
    ICaseCardVersionReader,
    IPreferenceCardVersionReader,
)

__all__ = [
    # Section keys
    "SECTION_KEYS",
    "ITEM_SECTION_KEYS",
    # Domain entities
    "CaseCardVersion",
    "Component",
    "CompositionResult",
    "Override",
    "PreferenceCardVersion",
    # Repository interfaces
    "ICaseCardRepository",
    # Segregated interfaces
    "ICaseCardVersionReader",
    "IPreferenceCardVersionReader",
    # Service interfaces
    "ICaseCardComposer",
]
