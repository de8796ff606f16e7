"""Ordering of flat listings."""

from collections.abc import Callable, Iterable
from typing import Any

from nls.listing.models import AttributeRecord, SortKey

_SORT_KEYS: dict[SortKey, Callable[[AttributeRecord], Any]] = {
    SortKey.NAME: lambda r: r.name,
    SortKey.SIZE: lambda r: r.size_bytes,
    SortKey.TIME: lambda r: r.modified_at,
}


def sort_records(
    records: Iterable[AttributeRecord],
    key: SortKey = SortKey.NAME,
    reverse: bool = False,
) -> list[AttributeRecord]:
    """Sort records by name, size or modification time.

    The sort is stable. Reversal flips the already sorted list as a
    whole, so entries with equal keys also appear in reverse order.

    Args:
        records: Records to order.
        key: Attribute to sort by.
        reverse: Reverse the sorted list.

    Returns:
        New list of records.
    """
    ordered = sorted(records, key=_SORT_KEYS[key])
    if reverse:
        ordered.reverse()
    return ordered
