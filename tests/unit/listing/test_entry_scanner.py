"""Tests for the flat directory scanner."""

from pathlib import Path
from unittest.mock import patch

import pytest
from nls.listing.errors import (
    DirectoryUnreadableError,
    MetadataUnavailableError,
    PathNotFoundError,
)
from nls.listing.models import EntryKind, SortKey
from nls.listing.scanner import EntryScanner, resolve_target


class TestResolveTarget:
    """Tests for resolve_target."""

    def test_returns_absolute_path(self, listing_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Relative targets are made absolute."""
        monkeypatch.chdir(listing_dir)
        assert resolve_target(Path("sub")) == (listing_dir / "sub").resolve()

    def test_missing_target_raises(self, tmp_path: Path) -> None:
        """Missing targets raise PathNotFoundError."""
        missing = tmp_path / "nope"
        with pytest.raises(PathNotFoundError) as exc_info:
            resolve_target(missing)
        assert exc_info.value.path == str(missing)


class TestScanDirectory:
    """Tests for scanning a directory."""

    def test_returns_all_children_sorted_by_name(self, listing_dir: Path) -> None:
        """All children, hidden included, are returned name sorted."""
        records = EntryScanner().scan(listing_dir)
        assert [r.name for r in records] == [".hidden", "a.txt", "sub"]

    def test_records_carry_kinds_and_sizes(self, listing_dir: Path) -> None:
        """Each child gets its own record."""
        by_name = {r.name: r for r in EntryScanner().scan(listing_dir)}

        assert by_name["a.txt"].kind == EntryKind.FILE
        assert by_name["a.txt"].size_bytes == 500
        assert by_name[".hidden"].size_bytes == 10
        assert by_name[".hidden"].is_hidden is True
        assert by_name["sub"].kind == EntryKind.DIRECTORY

    def test_sort_by_size_reversed(self, listing_dir: Path) -> None:
        """Files can be sorted by size, largest first."""
        records = EntryScanner(sort_key=SortKey.SIZE, reverse=True).scan(listing_dir)
        names = [r.name for r in records]
        assert names.index("a.txt") < names.index(".hidden")

    def test_empty_directory(self, tmp_path: Path) -> None:
        """Empty directories yield no records."""
        assert EntryScanner().scan(tmp_path) == []

    def test_unreadable_directory_raises(self, listing_dir: Path) -> None:
        """Enumeration failures are fatal."""
        with (
            patch.object(Path, "iterdir", side_effect=PermissionError(13, "Permission denied")),
            pytest.raises(DirectoryUnreadableError, match="Permission denied"),
        ):
            EntryScanner().scan(listing_dir)

    def test_child_metadata_failure_raises(self, listing_dir: Path) -> None:
        """A child whose metadata cannot be read aborts the scan."""
        ghost = listing_dir / "ghost"
        with (
            patch.object(Path, "iterdir", return_value=iter([ghost])),
            pytest.raises(MetadataUnavailableError),
        ):
            EntryScanner().scan(listing_dir)


class TestScanSingleEntry:
    """Tests for scanning a target that is not a directory."""

    def test_file_target_yields_single_record(self, listing_dir: Path) -> None:
        """A file target lists just itself."""
        records = EntryScanner().scan(listing_dir / "a.txt")
        assert len(records) == 1
        assert records[0].name == "a.txt"

    def test_missing_target_raises(self, tmp_path: Path) -> None:
        """A missing target is fatal."""
        with pytest.raises(PathNotFoundError):
            EntryScanner().scan(tmp_path / "nope")
