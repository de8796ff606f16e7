"""CLI package for nls.

This package contains the Typer application and the listing renderers.
"""

from nls.cli.main import app

__all__ = ["app"]
