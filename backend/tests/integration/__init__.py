"""
Integration tests package.

Exercises the repository, composer and management CLI against
in-memory SQLite.
"""
