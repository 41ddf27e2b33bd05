"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exception hierarchy shared by the grouping engine, the session and the CLI.

Startup errors (UsageError, FileAccessError, ComparisonError during grouping)
are fatal and handled by the CLI. Interactive errors (ResolutionError,
UnrecognizedCommandError, PagerError) are caught by the session loop and
only abort the current command.
"""
from typing import Optional


class DiffPlusError(RuntimeError):
    """Base class for all diffplus errors."""


class UsageError(DiffPlusError):
    """Raised when the tool is started without anything to compare."""


class FileAccessError(DiffPlusError):
    """An input file is missing, not a regular file, or unreadable."""

    def __init__(self, path: str, reason: str = "cannot read file"):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class ComparisonError(DiffPlusError):
    """The external comparator reported something other than equal/different."""

    def __init__(self, file_a: str, file_b: str, status: Optional[int] = None, detail: str = ""):
        self.file_a = file_a
        self.file_b = file_b
        self.status = status
        self.detail = detail.strip()

        message = f"Comparison of '{file_a}' and '{file_b}' failed"
        if status is not None:
            message += f" (exit status {status})"
        if self.detail:
            message += f": {self.detail}"
        super().__init__(message)


class ResolutionError(DiffPlusError):
    """A group spec did not resolve to a group."""


class UnrecognizedCommandError(DiffPlusError):
    def __init__(self, word: str):
        self.word = word
        super().__init__(f"Unrecognized command: '{word}' (type 'help' for a list of commands)")


class PagerError(DiffPlusError):
    """The pager could not be launched."""
