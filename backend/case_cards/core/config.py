"""
Centralized configuration module for application-wide settings.

Values are read from environment variables once at import time. The
management CLI loads a ``.env`` file before importing this module.
"""

import logging
import os

logger = logging.getLogger(__name__)

_TRUTHY = ("true", "1", "yes")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in _TRUTHY


# ===========================
# Database Configuration
# ===========================


def get_database_url() -> str:
    """
    Get the SQLAlchemy database URL.

    Environment Variables:
        DATABASE_URL: SQLAlchemy URL
            Default: 'sqlite:///./case_cards.db'
            Tests: 'sqlite:///:memory:'
    """
    return os.getenv("DATABASE_URL", "sqlite:///./case_cards.db")


# ===========================
# Logging Configuration
# ===========================


def get_log_level() -> str:
    """Log level name from LOG_LEVEL (default 'INFO')."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_json() -> bool:
    """Whether console logs use the JSON formatter (LOG_JSON, default false)."""
    return _env_flag("LOG_JSON", "false")


# ===========================
# Composition Configuration
# ===========================


def get_strict_component_refs() -> bool:
    """
    Get whether dangling component references abort composition.

    Returns:
        bool: True to raise DanglingComponentReferenceError, False to skip
        the component and log a warning

    Environment Variables:
        CASE_CARD_STRICT_COMPONENT_REFS: Whether to fail on dangling refs
            Default: 'false' (skip silently, keep composing)

    Truthy values: "true", "1", "yes" (case-insensitive)
    """
    strict_str = os.getenv("CASE_CARD_STRICT_COMPONENT_REFS", "false")
    strict = strict_str.lower() in _TRUTHY

    if strict:
        logger.warning(
            "Strict component references ENABLED - dangling preference card "
            "references will abort composition",
            extra={"context": {"CASE_CARD_STRICT_COMPONENT_REFS": strict_str}},
        )

    return strict


# Global flags
LOG_LEVEL = get_log_level()
LOG_JSON = get_log_json()
CASE_CARD_STRICT_COMPONENT_REFS = get_strict_component_refs()


def log_composition_config():
    """
    Log the active composition configuration.

    Should be called during startup to provide visibility into how
    dangling component references will be handled.
    """
    logger.info(
        "Case card composition configuration initialized",
        extra={
            "context": {
                "strict_component_refs": CASE_CARD_STRICT_COMPONENT_REFS,
                "log_level": LOG_LEVEL,
            }
        },
    )
