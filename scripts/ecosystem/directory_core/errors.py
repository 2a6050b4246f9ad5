"""Exception types raised at the directory's I/O boundaries."""

from __future__ import annotations


class DirectoryError(Exception):
    """Base class for directory errors."""


class DataSourceError(DirectoryError):
    """Raised when a bundled dataset cannot be read or parsed."""


class LookupServiceError(DirectoryError):
    """Raised when the remote lookup service fails or returns bad data."""
