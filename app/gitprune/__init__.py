"""gitprune - stale branch and tag cleanup for a fixed set of git repositories."""

__version__ = "0.1.0"
