"""Custom exceptions for site-migrator."""

from __future__ import annotations


class SiteMigratorError(Exception):
    """Base exception for site-migrator operations."""


class TreeValidationError(SiteMigratorError):
    """Input could not be read as a config tree or migration report."""

    def __init__(self, source: str, cause: Exception) -> None:
        self.source = source
        super().__init__(f"Cannot read {source}: {cause}")


class InvalidChangePathError(SiteMigratorError, ValueError):
    """A change record path does not address a node of its category."""

    def __init__(self, path: str, expected: str) -> None:
        self.path = path
        self.expected = expected
        super().__init__(f"Cannot parse change path {path!r}, expected {expected}")


class NoUpdateAvailableError(SiteMigratorError):
    """The site already tracks the latest template version."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Site is already on template version {version!r}")
