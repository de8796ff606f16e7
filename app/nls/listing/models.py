"""Listing domain models.

This module defines the core data structures for representing
filesystem entries observed during a single listing pass, including
entry kinds, display categories, sort keys and tree walk events.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_MAX_DEPTH = 10


class EntryKind(str, Enum):
    """Kind of filesystem entry as reported by the OS.

    Declaration order is only used to break ties deterministically.

    Attributes:
        FILE: Regular file (also the fallback for unknown types).
        DIRECTORY: Directory.
        SYMLINK: Symbolic link (classified, never followed).
        CHAR_DEVICE: Character special file.
        BLOCK_DEVICE: Block special file.
        FIFO: Named pipe.
        SOCKET: Unix domain socket.
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    CHAR_DEVICE = "char_device"
    BLOCK_DEVICE = "block_device"
    FIFO = "fifo"
    SOCKET = "socket"

    @property
    def is_special(self) -> bool:
        """Check if this kind is a device, pipe or socket."""
        return self not in (EntryKind.FILE, EntryKind.DIRECTORY, EntryKind.SYMLINK)


class DisplayCategory(str, Enum):
    """Semantic display category used to pick a name style.

    Attributes:
        FILE: Regular files.
        DIRECTORY: Directories.
        SYMLINK: Symbolic links.
        SPECIAL: Devices, pipes and sockets (shared category).
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    SPECIAL = "special"


_KIND_CATEGORIES: dict[EntryKind, DisplayCategory] = {
    EntryKind.FILE: DisplayCategory.FILE,
    EntryKind.DIRECTORY: DisplayCategory.DIRECTORY,
    EntryKind.SYMLINK: DisplayCategory.SYMLINK,
    EntryKind.CHAR_DEVICE: DisplayCategory.SPECIAL,
    EntryKind.BLOCK_DEVICE: DisplayCategory.SPECIAL,
    EntryKind.FIFO: DisplayCategory.SPECIAL,
    EntryKind.SOCKET: DisplayCategory.SPECIAL,
}


def display_category(kind: EntryKind) -> DisplayCategory:
    """Map an entry kind to its display category."""
    return _KIND_CATEGORIES[kind]


class SortKey(str, Enum):
    """Sort key for flat listings."""

    NAME = "name"
    SIZE = "size"
    TIME = "time"


class RenderMode(str, Enum):
    """Output mode for a listing.

    Attributes:
        NAMES: Names only, padded into fixed-width cells.
        DETAILS: One detailed row per entry.
        TREE: Recursive, indented tree.
    """

    NAMES = "names"
    DETAILS = "details"
    TREE = "tree"


class Placeholder(str, Enum):
    """Inline placeholder emitted when a tree branch cannot be shown."""

    MISSING = "No such file or directory"
    PERMISSION_DENIED = "Permission denied"


@dataclass(frozen=True, slots=True)
class AttributeRecord:
    """Attributes of one filesystem entry.

    This is an immutable data structure created once per observed path
    and discarded after the listing pass has been rendered.

    Attributes:
        name: Final path component.
        path: Path the record was built from.
        kind: Entry kind.
        glyph: Single character kind marker used in detailed output.
        permissions: Nine character owner/group/other permission string.
        link_count: Number of hard links.
        owner_name: Resolved owner name.
        group_name: Resolved group name.
        size_bytes: Size in bytes.
        modified_at: Local modification time.
        is_hidden: True if the name starts with a dot.
    """

    name: str
    path: str
    kind: EntryKind
    glyph: str
    permissions: str
    link_count: int
    owner_name: str
    group_name: str
    size_bytes: int
    modified_at: datetime
    is_hidden: bool

    def __post_init__(self) -> None:
        """Validate record data after initialization."""
        if not self.name:
            msg = "Entry name cannot be empty"
            raise ValueError(msg)
        if len(self.glyph) != 1:
            msg = f"Glyph must be a single character, got {self.glyph!r}"
            raise ValueError(msg)
        if len(self.permissions) != 9:
            msg = f"Permissions must be 9 characters, got {self.permissions!r}"
            raise ValueError(msg)
        if self.is_hidden != self.name.startswith("."):
            msg = f"Hidden flag does not match name {self.name!r}"
            raise ValueError(msg)
        if self.size_bytes < 0 or self.link_count < 0:
            msg = "Size and link count cannot be negative"
            raise ValueError(msg)

    @property
    def mode_string(self) -> str:
        """Return the glyph followed by the permission string."""
        return f"{self.glyph}{self.permissions}"

    @property
    def modified_display(self) -> str:
        """Return the modification time as YYYY-MM-DD HH:MM:SS."""
        return self.modified_at.strftime(TIMESTAMP_FORMAT)

    @property
    def category(self) -> DisplayCategory:
        """Return the display category for this entry."""
        return display_category(self.kind)


@dataclass(frozen=True, slots=True)
class TreeEvent:
    """One visited node of a tree walk.

    Exactly one of ``record`` and ``placeholder`` is set.

    Attributes:
        depth: Nesting level, 0 for the walk root.
        record: Attributes of the visited entry.
        placeholder: Placeholder shown instead of an entry.
    """

    depth: int
    record: AttributeRecord | None = None
    placeholder: Placeholder | None = None

    def __post_init__(self) -> None:
        """Validate that exactly one payload is set."""
        if (self.record is None) == (self.placeholder is None):
            msg = "TreeEvent needs exactly one of record or placeholder"
            raise ValueError(msg)
        if self.depth < 0:
            msg = f"Depth cannot be negative, got {self.depth}"
            raise ValueError(msg)
