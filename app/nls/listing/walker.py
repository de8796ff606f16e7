"""Depth-bounded recursive tree walk.

Visits a directory tree in enumeration order, building one attribute
record per node and reporting each visited node as a TreeEvent.
Failures below the root degrade to placeholder events; failures at
the root are raised to the caller.
"""

import logging
import os
from collections.abc import Callable
from pathlib import Path

from nls.listing.errors import DirectoryUnreadableError, MetadataUnavailableError
from nls.listing.extractor import extract_record
from nls.listing.identity import IdentityResolver
from nls.listing.models import DEFAULT_MAX_DEPTH, EntryKind, Placeholder, TreeEvent

logger = logging.getLogger(__name__)

Visitor = Callable[[TreeEvent], None]


class TreeWalker:
    """Walks a directory tree down to a maximum depth.

    Symlinks are classified but never followed, so the walk cannot
    cycle. Children are visited in the order the OS returns them.

    Args:
        max_depth: Deepest level to visit; the root is level 0.
        show_hidden: If False, hidden entries below the root are skipped
            together with their subtrees.
    """

    def __init__(self, *, max_depth: int = DEFAULT_MAX_DEPTH, show_hidden: bool = False) -> None:
        if max_depth < 0:
            msg = f"max_depth cannot be negative, got {max_depth}"
            raise ValueError(msg)
        self._max_depth = max_depth
        self._show_hidden = show_hidden
        self._resolver = IdentityResolver()

    @property
    def max_depth(self) -> int:
        """Deepest level visited."""
        return self._max_depth

    def walk(self, root: Path, visit: Visitor) -> None:
        """Walk the tree below ``root``, calling ``visit`` per node.

        Args:
            root: Entry to start from.
            visit: Callback receiving one TreeEvent per visited node.

        Raises:
            MetadataUnavailableError: If the root's metadata cannot be read.
            DirectoryUnreadableError: If the root directory cannot be enumerated.
        """
        self._walk(root, 0, visit)

    def collect(self, root: Path) -> list[TreeEvent]:
        """Walk the tree and return every event in visiting order."""
        events: list[TreeEvent] = []
        self.walk(root, events.append)
        return events

    def _walk(self, path: Path, depth: int, visit: Visitor) -> None:
        if not os.path.lexists(path):
            visit(TreeEvent(depth=depth, placeholder=Placeholder.MISSING))
            return

        if depth > self._max_depth:
            return

        if depth > 0 and not self._show_hidden and path.name.startswith("."):
            return

        try:
            record = extract_record(path, self._resolver)
        except MetadataUnavailableError as e:
            if depth == 0:
                raise
            logger.warning("Skipping %s: %s", path, e)
            placeholder = (
                Placeholder.MISSING
                if isinstance(e.__cause__, FileNotFoundError)
                else Placeholder.PERMISSION_DENIED
            )
            visit(TreeEvent(depth=depth, placeholder=placeholder))
            return

        visit(TreeEvent(depth=depth, record=record))

        # Children of the deepest level would all be cut off anyway.
        if record.kind != EntryKind.DIRECTORY or depth >= self._max_depth:
            return

        try:
            children = list(path.iterdir())
        except OSError as e:
            if depth == 0:
                msg = f"Cannot open directory {path}: {e.strerror or e}"
                raise DirectoryUnreadableError(msg, str(path)) from e
            logger.warning("Cannot open directory %s: %s", path, e)
            visit(TreeEvent(depth=depth + 1, placeholder=Placeholder.PERMISSION_DENIED))
            return

        for child in children:
            self._walk(child, depth + 1, visit)
