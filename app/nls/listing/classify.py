"""Entry kind classification from raw mode bits."""

import stat
from collections.abc import Callable

from nls.listing.models import EntryKind

# Evaluated in order; the first matching predicate wins.
_PREDICATES: tuple[tuple[Callable[[int], bool], str, EntryKind], ...] = (
    (stat.S_ISDIR, "d", EntryKind.DIRECTORY),
    (stat.S_ISREG, "-", EntryKind.FILE),
    (stat.S_ISLNK, "l", EntryKind.SYMLINK),
    (stat.S_ISCHR, "c", EntryKind.CHAR_DEVICE),
    (stat.S_ISBLK, "b", EntryKind.BLOCK_DEVICE),
    (stat.S_ISFIFO, "p", EntryKind.FIFO),
    (stat.S_ISSOCK, "s", EntryKind.SOCKET),
)

UNKNOWN_GLYPH = "?"


def classify_mode(mode: int) -> tuple[str, EntryKind]:
    """Classify an entry by its ``st_mode`` file type bits.

    Args:
        mode: Raw ``st_mode`` value.

    Returns:
        Tuple of (glyph, kind). Unrecognised types yield ("?", FILE).
    """
    for predicate, glyph, kind in _PREDICATES:
        if predicate(mode):
            return glyph, kind
    return UNKNOWN_GLYPH, EntryKind.FILE
