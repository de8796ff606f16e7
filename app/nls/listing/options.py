"""Listing options.

Validated configuration for one invocation, as produced by the CLI.
The render mode is derived directly from the flags.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from nls.listing.models import DEFAULT_MAX_DEPTH, RenderMode, SortKey


class ListingOptions(BaseModel):
    """Options controlling what is listed and how it is rendered.

    Attributes:
        path: Target path.
        show_hidden: Include entries whose name starts with a dot.
        long_format: Render detailed rows.
        human_readable: Show sizes with B/K/M/G/T/P units.
        sort_key: Sort key for flat listings.
        reverse: Reverse the sorted order.
        tree: Render a recursive tree.
        max_depth: Deepest tree level shown (tree mode only).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: Path = Path(".")
    show_hidden: bool = False
    long_format: bool = False
    human_readable: bool = False
    sort_key: SortKey = SortKey.NAME
    reverse: bool = False
    tree: bool = False
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=0, le=255)

    @property
    def render_mode(self) -> RenderMode:
        """Select the render mode: tree, then details, then names."""
        if self.tree:
            return RenderMode.TREE
        if self.long_format:
            return RenderMode.DETAILS
        return RenderMode.NAMES
