"""Listing core.

This module provides metadata extraction, classification, identity
resolution, sorting and tree walking for filesystem entries.
"""

from nls.listing.classify import classify_mode
from nls.listing.errors import (
    DirectoryUnreadableError,
    ListingError,
    MetadataUnavailableError,
    PathNotFoundError,
)
from nls.listing.extractor import extract_record
from nls.listing.identity import IdentityResolver
from nls.listing.models import (
    DEFAULT_MAX_DEPTH,
    AttributeRecord,
    DisplayCategory,
    EntryKind,
    Placeholder,
    RenderMode,
    SortKey,
    TreeEvent,
    display_category,
)
from nls.listing.options import ListingOptions
from nls.listing.permissions import decode_permissions, decode_triad
from nls.listing.scanner import EntryScanner, resolve_target
from nls.listing.sorter import sort_records
from nls.listing.walker import TreeWalker

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "AttributeRecord",
    "DirectoryUnreadableError",
    "DisplayCategory",
    "EntryKind",
    "EntryScanner",
    "IdentityResolver",
    "ListingError",
    "ListingOptions",
    "MetadataUnavailableError",
    "PathNotFoundError",
    "Placeholder",
    "RenderMode",
    "SortKey",
    "TreeEvent",
    "TreeWalker",
    "classify_mode",
    "decode_permissions",
    "decode_triad",
    "display_category",
    "extract_record",
    "resolve_target",
    "sort_records",
]
