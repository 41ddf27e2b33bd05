"""
Core grouping engine — comparator, grouper, models and errors.

This package contains the foundation of diffplus:
- DiffComparatorImpl: runs the external diff tool and maps its exit status
- FileGrouperImpl: partitions files into groups of identical content by
  comparing each file against group representatives
- Models: Group, GroupingResult, GroupingStats, SessionParams and enums
- Errors: the DiffPlusError hierarchy

No terminal or pager dependencies, so it can be used from scripts.
"""

from .comparator import DiffComparatorImpl
from .grouper import FileGrouperImpl
from .errors import (
    DiffPlusError, UsageError, FileAccessError, ComparisonError,
    ResolutionError, UnrecognizedCommandError, PagerError)
from .models import (
    CompareResult, CommandKind, Group, GroupingResult, GroupingStats, SessionParams, Stage)

__all__ = [
    "DiffComparatorImpl",
    "FileGrouperImpl",
    "DiffPlusError",
    "UsageError",
    "FileAccessError",
    "ComparisonError",
    "ResolutionError",
    "UnrecognizedCommandError",
    "PagerError",
    "CompareResult",
    "CommandKind",
    "Group",
    "GroupingResult",
    "GroupingStats",
    "SessionParams",
    "Stage",
]
