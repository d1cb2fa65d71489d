"""Data models for gitprune.

This module exports the core data structures used throughout the application.
"""

from gitprune.models.action import AreaReport, DeletionResult
from gitprune.models.area import Area
from gitprune.models.partition import RefPartition
from gitprune.models.ref import REF_FIELD_DELIMITER, REF_FORMAT, RefKind

__all__ = [
    "REF_FIELD_DELIMITER",
    "REF_FORMAT",
    "Area",
    "AreaReport",
    "DeletionResult",
    "RefKind",
    "RefPartition",
]
