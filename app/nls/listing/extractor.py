"""Metadata extraction into attribute records."""

import logging
import os
from datetime import datetime
from pathlib import Path

from nls.listing.classify import classify_mode
from nls.listing.errors import MetadataUnavailableError
from nls.listing.identity import IdentityResolver
from nls.listing.models import AttributeRecord
from nls.listing.permissions import decode_permissions

logger = logging.getLogger(__name__)


def extract_record(path: Path, resolver: IdentityResolver | None = None) -> AttributeRecord:
    """Build the attribute record for a single path.

    Uses link-aware ``lstat`` first and falls back to ``stat`` if that
    fails, so broken symlinks still produce a record.

    Args:
        path: Path of an existing entry.
        resolver: Identity resolver to reuse across a listing pass.
            A fresh one is created if omitted.

    Returns:
        AttributeRecord for the path.

    Raises:
        MetadataUnavailableError: If neither lstat nor stat succeeds, or
            the modification time cannot be represented.
    """
    st = _read_metadata(path)

    glyph, kind = classify_mode(st.st_mode)
    permissions = decode_permissions(st.st_mode)

    name = _entry_name(path)

    modified_at = _modified_at(path, st)

    resolver = resolver or IdentityResolver()
    owner_name, group_name = resolver.resolve(st.st_uid, st.st_gid, kind)

    return AttributeRecord(
        name=name,
        path=str(path),
        kind=kind,
        glyph=glyph,
        permissions=permissions,
        link_count=st.st_nlink,
        owner_name=owner_name,
        group_name=group_name,
        size_bytes=st.st_size,
        modified_at=modified_at,
        is_hidden=name.startswith("."),
    )


def _read_metadata(path: Path) -> os.stat_result:
    try:
        return path.lstat()
    except OSError as lstat_error:
        logger.debug("lstat failed for %s, retrying with stat: %s", path, lstat_error)
        try:
            return path.stat()
        except OSError as e:
            msg = f"Cannot read metadata of {path}: {e.strerror or e}"
            raise MetadataUnavailableError(msg, str(path)) from e


def _modified_at(path: Path, st: os.stat_result) -> datetime:
    try:
        return datetime.fromtimestamp(st.st_mtime)
    except (OverflowError, ValueError, OSError) as e:
        msg = f"Cannot read modification time of {path}: {e}"
        raise MetadataUnavailableError(msg, str(path)) from e


def _entry_name(path: Path) -> str:
    # The filesystem root has no final component. Undecodable bytes
    # become U+FFFD so the name can always be printed.
    return os.fsencode(path.name or str(path)).decode("utf-8", "replace")
