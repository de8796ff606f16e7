"""Listing errors.

Only the I/O touching parts of the listing (metadata extraction,
directory enumeration) raise these. Callers decide whether an error
is fatal or degrades to a placeholder.
"""


class ListingError(Exception):
    """Base exception for listing errors."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class PathNotFoundError(ListingError):
    """Raised when the listing target does not exist."""


class MetadataUnavailableError(ListingError):
    """Raised when neither lstat nor stat succeeds for an entry."""


class DirectoryUnreadableError(ListingError):
    """Raised when a directory cannot be enumerated."""
