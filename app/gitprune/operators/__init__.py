"""Ref operators for gitprune.

This module provides operators that delete branches and tags.
"""

from gitprune.operators.base import RefOperator
from gitprune.operators.branches import BranchOperator
from gitprune.operators.tags import TagOperator

__all__ = ["BranchOperator", "RefOperator", "TagOperator"]
