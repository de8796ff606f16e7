"""Owner and group name resolution.

Resolves numeric uid/gid values to display names via the system
name-service databases. Lookups never fail: unresolvable ids fall back
to ``"Unknown"``, except group names of device, pipe and socket entries
which fall back to an empty string.
"""

import grp
import logging
import pwd

from nls.listing.models import EntryKind

logger = logging.getLogger(__name__)

UNKNOWN_NAME = "Unknown"
SPECIAL_GROUP_FALLBACK = ""


class IdentityResolver:
    """Resolves numeric owner and group ids to names.

    Results are cached per instance, so one resolver should be used for
    a whole listing pass.

    Example:
        >>> resolver = IdentityResolver()
        >>> resolver.resolve(0, 0, EntryKind.FILE)
        ('root', 'root')
    """

    def __init__(self) -> None:
        self._users: dict[int, str | None] = {}
        self._groups: dict[int, str | None] = {}

    def resolve(self, uid: int, gid: int, kind: EntryKind) -> tuple[str, str]:
        """Resolve owner and group names for an entry.

        Args:
            uid: Numeric owner id.
            gid: Numeric group id.
            kind: Kind of the entry, selects the group fallback.

        Returns:
            Tuple of (owner_name, group_name).
        """
        return self.owner_name(uid), self.group_name(gid, kind)

    def owner_name(self, uid: int) -> str:
        """Return the user name for ``uid`` or ``"Unknown"``."""
        if uid not in self._users:
            self._users[uid] = _lookup_user(uid)
        return self._users[uid] or UNKNOWN_NAME

    def group_name(self, gid: int, kind: EntryKind) -> str:
        """Return the group name for ``gid`` with a kind-specific fallback."""
        if gid not in self._groups:
            self._groups[gid] = _lookup_group(gid)
        name = self._groups[gid]
        if name is not None:
            return name
        return SPECIAL_GROUP_FALLBACK if kind.is_special else UNKNOWN_NAME


def _lookup_user(uid: int) -> str | None:
    try:
        return pwd.getpwuid(uid).pw_name
    except (KeyError, OverflowError):
        logger.debug("No user entry for uid %d", uid)
        return None


def _lookup_group(gid: int) -> str | None:
    try:
        return grp.getgrgid(gid).gr_name
    except (KeyError, OverflowError):
        logger.debug("No group entry for gid %d", gid)
        return None
