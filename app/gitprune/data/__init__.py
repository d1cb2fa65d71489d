"""Bundled data files for gitprune."""
