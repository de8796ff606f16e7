"""Tests for owner and group name resolution."""

from types import SimpleNamespace
from unittest.mock import patch

import pytest
from nls.listing.identity import IdentityResolver
from nls.listing.models import EntryKind


def _user(name: str) -> SimpleNamespace:
    return SimpleNamespace(pw_name=name)


def _group(name: str) -> SimpleNamespace:
    return SimpleNamespace(gr_name=name)


class TestOwnerName:
    """Tests for owner name lookup."""

    @patch("nls.listing.identity.pwd.getpwuid", return_value=_user("alice"))
    def test_resolves_known_user(self, _mock_pwd: object) -> None:
        """Known uid resolves to its login name."""
        assert IdentityResolver().owner_name(1000) == "alice"

    @patch("nls.listing.identity.pwd.getpwuid", side_effect=KeyError("uid not found"))
    def test_unknown_user_falls_back(self, _mock_pwd: object) -> None:
        """Unknown uid yields 'Unknown'."""
        assert IdentityResolver().owner_name(424242) == "Unknown"

    def test_lookups_are_cached(self) -> None:
        """Each uid is looked up once per resolver."""
        with patch(
            "nls.listing.identity.pwd.getpwuid", return_value=_user("alice")
        ) as mock_pwd:
            resolver = IdentityResolver()
            resolver.owner_name(1000)
            resolver.owner_name(1000)

        mock_pwd.assert_called_once_with(1000)


class TestGroupName:
    """Tests for group name lookup and kind-specific fallbacks."""

    @pytest.mark.parametrize("kind", list(EntryKind))
    def test_resolves_known_group_for_every_kind(self, kind: EntryKind) -> None:
        """Known gid resolves regardless of entry kind."""
        with patch("nls.listing.identity.grp.getgrgid", return_value=_group("staff")):
            assert IdentityResolver().group_name(20, kind) == "staff"

    @pytest.mark.parametrize("kind", [EntryKind.FILE, EntryKind.DIRECTORY, EntryKind.SYMLINK])
    def test_standard_kinds_fall_back_to_unknown(self, kind: EntryKind) -> None:
        """Files, directories and symlinks fall back to 'Unknown'."""
        with patch("nls.listing.identity.grp.getgrgid", side_effect=KeyError("gid")):
            assert IdentityResolver().group_name(4242, kind) == "Unknown"

    @pytest.mark.parametrize(
        "kind",
        [EntryKind.CHAR_DEVICE, EntryKind.BLOCK_DEVICE, EntryKind.FIFO, EntryKind.SOCKET],
    )
    def test_special_kinds_fall_back_to_empty(self, kind: EntryKind) -> None:
        """Devices, pipes and sockets fall back to an empty string."""
        with patch("nls.listing.identity.grp.getgrgid", side_effect=KeyError("gid")):
            assert IdentityResolver().group_name(4242, kind) == ""

    def test_cached_failure_keeps_kind_fallback(self) -> None:
        """A cached failed lookup still applies the fallback of each kind."""
        with patch(
            "nls.listing.identity.grp.getgrgid", side_effect=KeyError("gid")
        ) as mock_grp:
            resolver = IdentityResolver()
            assert resolver.group_name(4242, EntryKind.FIFO) == ""
            assert resolver.group_name(4242, EntryKind.FILE) == "Unknown"

        mock_grp.assert_called_once_with(4242)


class TestResolve:
    """Tests for the combined resolve method."""

    def test_returns_owner_and_group(self) -> None:
        """resolve returns (owner, group)."""
        with (
            patch("nls.listing.identity.pwd.getpwuid", return_value=_user("root")),
            patch("nls.listing.identity.grp.getgrgid", return_value=_group("wheel")),
        ):
            assert IdentityResolver().resolve(0, 0, EntryKind.FILE) == ("root", "wheel")

    def test_failures_never_raise(self) -> None:
        """Failed lookups degrade to fallback strings."""
        with (
            patch("nls.listing.identity.pwd.getpwuid", side_effect=KeyError("uid")),
            patch("nls.listing.identity.grp.getgrgid", side_effect=KeyError("gid")),
        ):
            assert IdentityResolver().resolve(1, 2, EntryKind.SOCKET) == ("Unknown", "")
