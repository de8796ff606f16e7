"""Listing renderers.

Builds the Rich text for the three output modes (names, details, tree)
and prints it to the shared console. Entry names are styled by their
display category; devices, pipes and sockets share one style.
"""

from collections.abc import Iterable

from rich.console import Console
from rich.text import Text

from nls.core.theme import entry_style
from nls.listing.models import AttributeRecord, TreeEvent
from nls.utils.formatting import console, human_readable_size

NAME_CELL_WIDTH = 20
TREE_INDENT = 5
TREE_BRANCH = "| - "


def visible_records(records: Iterable[AttributeRecord], show_hidden: bool) -> list[AttributeRecord]:
    """Drop hidden records unless ``show_hidden`` is set."""
    return [r for r in records if show_hidden or not r.is_hidden]


def styled_name(record: AttributeRecord) -> Text:
    """Return the record's name styled by its display category."""
    return Text(record.name, style=entry_style(record.category))


def render_names(records: Iterable[AttributeRecord], show_hidden: bool = False) -> Text:
    """Render visible names as fixed-width cells on a single line.

    Args:
        records: Sorted records.
        show_hidden: Include hidden entries.

    Returns:
        Text with one padded cell per visible entry.
    """
    line = Text()
    for record in visible_records(records, show_hidden):
        cell = styled_name(record)
        cell.pad_right(max(NAME_CELL_WIDTH - cell.cell_len, 0))
        line.append_text(cell)
    return line


def format_detail_prefix(record: AttributeRecord, human_readable: bool = False) -> str:
    """Format every detailed column except the name.

    Args:
        record: Record to format.
        human_readable: Show the size with a unit instead of raw bytes.

    Returns:
        Space separated, padded columns ending with a single space.
    """
    size = human_readable_size(record.size_bytes) if human_readable else str(record.size_bytes)
    return (
        f"{record.mode_string} {record.link_count:>3} {record.owner_name:>8} "
        f"{record.group_name:>8} {size:>8} {record.modified_display:>20} "
    )


def render_details(
    records: Iterable[AttributeRecord],
    show_hidden: bool = False,
    human_readable: bool = False,
) -> list[Text]:
    """Render one detailed row per visible record.

    Args:
        records: Sorted records.
        show_hidden: Include hidden entries.
        human_readable: Show sizes with units.

    Returns:
        One Text line per visible record.
    """
    lines: list[Text] = []
    for record in visible_records(records, show_hidden):
        line = Text(format_detail_prefix(record, human_readable))
        line.append_text(styled_name(record))
        lines.append(line)
    return lines


def render_tree_event(event: TreeEvent) -> Text:
    """Render a single tree event as an indented line."""
    line = Text(" " * (event.depth * TREE_INDENT) + TREE_BRANCH)
    if event.record is not None:
        line.append_text(styled_name(event.record))
    elif event.placeholder is not None:
        line.append(event.placeholder.value, style="placeholder")
    return line


def render_tree(events: Iterable[TreeEvent]) -> list[Text]:
    """Render every tree event, one line each, in visiting order."""
    return [render_tree_event(event) for event in events]


def print_lines(lines: Iterable[Text], out: Console | None = None) -> None:
    """Print rendered lines without wrapping them to the terminal width."""
    out = out or console
    for line in lines:
        out.print(line, soft_wrap=True)
