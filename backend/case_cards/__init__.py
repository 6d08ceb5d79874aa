"""Case-card composition engine: merges preference cards into case cards."""

__version__ = "1.0.0"
