"""Bundled data files for nls."""
