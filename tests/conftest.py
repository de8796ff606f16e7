"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import pytest
from nls.listing.models import AttributeRecord, EntryKind

_GLYPHS: dict[EntryKind, str] = {
    EntryKind.FILE: "-",
    EntryKind.DIRECTORY: "d",
    EntryKind.SYMLINK: "l",
    EntryKind.CHAR_DEVICE: "c",
    EntryKind.BLOCK_DEVICE: "b",
    EntryKind.FIFO: "p",
    EntryKind.SOCKET: "s",
}

RecordFactory = Callable[..., AttributeRecord]


@pytest.fixture
def make_record() -> RecordFactory:
    """Factory for AttributeRecord instances with sensible defaults."""

    def _make(
        name: str,
        *,
        kind: EntryKind = EntryKind.FILE,
        size: int = 0,
        modified_at: datetime | None = None,
        permissions: str = "rw-r--r--",
        owner: str = "alice",
        group: str = "staff",
        links: int = 1,
    ) -> AttributeRecord:
        return AttributeRecord(
            name=name,
            path=f"/data/{name}",
            kind=kind,
            glyph=_GLYPHS[kind],
            permissions=permissions,
            link_count=links,
            owner_name=owner,
            group_name=group,
            size_bytes=size,
            modified_at=modified_at or datetime(2024, 1, 15, 10, 30, 0),
            is_hidden=name.startswith("."),
        )

    return _make


@pytest.fixture
def listing_dir(tmp_path: Path) -> Path:
    """Directory with a.txt (500 bytes), .hidden (10 bytes) and sub/."""
    root = tmp_path / "listing"
    root.mkdir()
    (root / "a.txt").write_bytes(b"x" * 500)
    (root / ".hidden").write_bytes(b"y" * 10)
    (root / "sub").mkdir()
    return root


@pytest.fixture
def nested_dir(tmp_path: Path) -> Path:
    """Directory tree root/child/grandchild/leaf.txt."""
    root = tmp_path / "root"
    grandchild = root / "child" / "grandchild"
    grandchild.mkdir(parents=True)
    (grandchild / "leaf.txt").write_text("leaf")
    return root
