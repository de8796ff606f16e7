"""Flat directory scanner.

Collects attribute records for a target path: the children of a
directory, or the target itself when it is not a directory. Every
failure is fatal here; the whole record set is built before anything
is rendered.
"""

import logging
from pathlib import Path

from nls.listing.errors import DirectoryUnreadableError, PathNotFoundError
from nls.listing.extractor import extract_record
from nls.listing.identity import IdentityResolver
from nls.listing.models import AttributeRecord, SortKey
from nls.listing.sorter import sort_records

logger = logging.getLogger(__name__)


def resolve_target(path: Path) -> Path:
    """Canonicalise a listing target.

    Args:
        path: User supplied path, possibly relative.

    Returns:
        Absolute path with symlinks resolved.

    Raises:
        PathNotFoundError: If the path does not exist.
    """
    try:
        return path.resolve(strict=True)
    except (FileNotFoundError, NotADirectoryError) as e:
        msg = f"No such file or directory: {path}"
        raise PathNotFoundError(msg, str(path)) from e
    except RuntimeError as e:
        # Raised for symlink loops.
        msg = f"Cannot resolve {path}: {e}"
        raise PathNotFoundError(msg, str(path)) from e


class EntryScanner:
    """Builds sorted attribute records for a flat listing.

    Args:
        sort_key: Attribute to sort by.
        reverse: Reverse the sorted order.
    """

    def __init__(self, *, sort_key: SortKey = SortKey.NAME, reverse: bool = False) -> None:
        self._sort_key = sort_key
        self._reverse = reverse
        self._resolver = IdentityResolver()

    def scan(self, target: Path) -> list[AttributeRecord]:
        """Scan a target and return its sorted records.

        Args:
            target: Directory or single entry to list.

        Returns:
            Records sorted by the configured key.

        Raises:
            PathNotFoundError: If the target does not exist.
            DirectoryUnreadableError: If the directory cannot be enumerated.
            MetadataUnavailableError: If an entry's metadata cannot be read.
        """
        target = resolve_target(target)

        if not target.is_dir():
            return [extract_record(target, self._resolver)]

        records = [extract_record(child, self._resolver) for child in self._children(target)]
        logger.debug("Collected %d entries from %s", len(records), target)
        return sort_records(records, self._sort_key, self._reverse)

    @staticmethod
    def _children(directory: Path) -> list[Path]:
        try:
            return list(directory.iterdir())
        except OSError as e:
            msg = f"Cannot open directory {directory}: {e.strerror or e}"
            raise DirectoryUnreadableError(msg, str(directory)) from e
