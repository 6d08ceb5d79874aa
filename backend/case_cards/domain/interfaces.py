"""
Abstract interfaces following Interface Segregation Principle.

These interfaces define contracts without implementation details,
enabling dependency injection and easier testing.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from .entities import CaseCardVersion, CompositionResult, PreferenceCardVersion


class ICaseCardVersionReader(ABC):
    """Interface for case-card version read operations."""

    @abstractmethod
    def get_case_card_version(self, version_id: str) -> Optional[CaseCardVersion]:
        """Get a case-card version by ID, or None when it does not exist."""
        pass


class IPreferenceCardVersionReader(ABC):
    """Interface for preference-card version read operations."""

    @abstractmethod
    def get_preference_card_versions_by_ids(
        self, ids: Sequence[str]
    ) -> List[PreferenceCardVersion]:
        """Batch-fetch preference-card versions. Missing ids are simply absent."""
        pass


class ICaseCardRepository(ICaseCardVersionReader, IPreferenceCardVersionReader):
    """Complete read interface consumed by the composer."""

    pass


class ICaseCardComposer(ABC):
    """Interface for the case-card composition service."""

    @abstractmethod
    def compose(self, version_id: str) -> CompositionResult:
        """Compose the final case card for a version."""
        pass
