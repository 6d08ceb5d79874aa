"""
Custom exceptions for the case-card engine.
Following SOLID principles - centralized error handling.
"""

from typing import Sequence


class CaseCardError(Exception):
    """Base class for case-card composition errors."""

    pass


class CaseCardVersionNotFoundError(CaseCardError):
    """
    Raised when the requested case-card version does not exist.
    Fatal to the compose call; never retried internally.
    """

    def __init__(self, version_id: str):
        self.version_id = version_id
        super().__init__(f"Case card version {version_id} not found")


class DanglingComponentReferenceError(CaseCardError):
    """
    Raised in strict mode when components point at preference-card versions
    that could not be loaded.
    """

    def __init__(self, version_id: str, component_ids: Sequence[str]):
        self.version_id = version_id
        self.component_ids = list(component_ids)
        super().__init__(
            f"Case card version {version_id} references missing preference card "
            f"versions: {', '.join(self.component_ids)}"
        )
