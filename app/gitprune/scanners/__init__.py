"""Ref scanners for gitprune.

This module provides scanners that list the branches and tags of a
repository.
"""

from gitprune.scanners.base import RefScanner
from gitprune.scanners.branches import BranchScanner
from gitprune.scanners.tags import TagScanner

__all__ = ["BranchScanner", "RefScanner", "TagScanner"]
