"""Main CLI application entry point.

Defines the Typer application: flags are validated into ListingOptions,
the whole listing is collected, then rendered in one go.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.text import Text

from nls import __version__
from nls.cli.render import print_lines, render_details, render_names, render_tree
from nls.listing.errors import ListingError
from nls.listing.models import DEFAULT_MAX_DEPTH, RenderMode, SortKey
from nls.listing.options import ListingOptions
from nls.listing.scanner import EntryScanner, resolve_target
from nls.listing.walker import TreeWalker
from nls.utils.formatting import print_error

app = typer.Typer(
    name="nls",
    help="List directory contents with classification, sorting and tree view.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"nls version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _sort_key(by_size: bool, by_time: bool) -> SortKey:
    """Pick the sort key; size wins when both flags are given."""
    if by_size:
        return SortKey.SIZE
    if by_time:
        return SortKey.TIME
    return SortKey.NAME


def collect_lines(options: ListingOptions) -> list[Text]:
    """Collect and render the complete listing for ``options``.

    Nothing is printed here, so a fatal error leaves no partial output.

    Args:
        options: Validated listing options.

    Returns:
        Rendered output lines.

    Raises:
        ListingError: If the target cannot be listed.
    """
    mode = options.render_mode

    if mode == RenderMode.TREE:
        walker = TreeWalker(max_depth=options.max_depth, show_hidden=options.show_hidden)
        return render_tree(walker.collect(resolve_target(options.path)))

    scanner = EntryScanner(sort_key=options.sort_key, reverse=options.reverse)
    records = scanner.scan(options.path)

    if mode == RenderMode.DETAILS:
        return render_details(records, options.show_hidden, options.human_readable)
    return [render_names(records, options.show_hidden)]


@app.command()
def main(
    path: Annotated[
        Path,
        typer.Argument(help="File or directory to list."),
    ] = Path("."),
    long_format: Annotated[
        bool,
        typer.Option("-l", help="Show details of files and directories."),
    ] = False,
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Show hidden files and directories."),
    ] = False,
    human_readable: Annotated[
        bool,
        typer.Option("--human-readable", "-H", help="Show human readable file sizes."),
    ] = False,
    by_size: Annotated[
        bool,
        typer.Option("--size", "-s", help="Sort by file size."),
    ] = False,
    by_time: Annotated[
        bool,
        typer.Option("--time", "-t", help="Sort by modification time."),
    ] = False,
    reverse: Annotated[
        bool,
        typer.Option("--reverse", "-r", help="Reverse the sort order."),
    ] = False,
    tree: Annotated[
        bool,
        typer.Option("--tree", "-T", help="Show files and directories as a tree."),
    ] = False,
    depth: Annotated[
        int,
        typer.Option(
            "--depth",
            "-d",
            min=0,
            max=255,
            help="Maximum depth of the tree.",
        ),
    ] = DEFAULT_MAX_DEPTH,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """nls - list directory contents.

    Shows names by default, a detailed table with [bold]-l[/bold], or a
    recursive tree with [bold]--tree[/bold].
    """
    _configure_logging(verbose)

    try:
        options = ListingOptions(
            path=path,
            show_hidden=show_all,
            long_format=long_format,
            human_readable=human_readable,
            sort_key=_sort_key(by_size, by_time),
            reverse=reverse,
            tree=tree,
            max_depth=depth,
        )
    except ValidationError as e:
        print_error(f"Invalid options: {e}")
        raise typer.Exit(code=1) from e

    try:
        lines = collect_lines(options)
    except ListingError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_lines(lines)


if __name__ == "__main__":
    app()
