"""nls - a classified, sortable directory listing tool."""

__version__ = "0.1.0"
