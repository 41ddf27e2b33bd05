"""
diffplus — group files by identical content and diff the groups interactively.

Core features:
- Groups any number of files into classes of identical content using an
  external comparator (diff by default), comparing only against group representatives
- Interactive session: pick a base group, diff groups, list members, resolve groups
  by index, by the `base` keyword or by a regular expression over file paths
- Diff output shown in a pager running in secure mode
"""
from pathlib import Path

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("diffplus")
except Exception:
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        import tomli as tomllib  # Python < 3.11: pip install tomli

    with open(Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API: only what users should import directly
from diffplus.commands import GroupingCommand
from diffplus.core import (
    SessionParams, Group, GroupingResult, CompareResult, DiffComparatorImpl, FileGrouperImpl)
from diffplus.session import Session, SessionController
from diffplus.services import PagerService
from diffplus.utils.format_utils import FormatUtils

__all__ = [
    "GroupingCommand",
    "SessionParams",
    "Group",
    "GroupingResult",
    "CompareResult",
    "DiffComparatorImpl",
    "FileGrouperImpl",
    "Session",
    "SessionController",
    "PagerService",
    "FormatUtils",
    "__version__",
]
