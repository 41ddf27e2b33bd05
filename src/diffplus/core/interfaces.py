"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used by the grouping engine and the session.
These protocols enforce structural typing using Python's `typing.Protocol`, so the
engine can be driven by the real `diff` subprocess or by an in-memory fake in tests.

Key Components:
---------------
- Comparator: Judges two files equal/different and writes a pairwise diff on demand.
- FileGrouper: Partitions an ordered list of files into groups of identical content.
- Pager: Displays a file of captured comparator output.
"""

from typing import Protocol, List, Optional, Callable, IO
from diffplus.core.models import CompareResult, GroupingResult


class Comparator(Protocol):
    """Interface for the external two-file comparator."""

    def compare(self, file_a: str, file_b: str) -> CompareResult:
        """Compare two files, discarding any diff output."""
        ...

    def write_diff(self, file_a: str, file_b: str, stream: IO) -> int:
        """
        Write the comparator's output for two files into an open binary stream.

        Returns:
            The comparator's exit status.
        """
        ...


class FileGrouper(Protocol):
    """
    Interface for building groups of identical files.
    """
    def build_groups(
        self,
        files: List[str],
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> GroupingResult:
        """
        Group files by content.

        Args:
            files: Paths in input order. The first file of each group becomes its representative.
            progress_callback: Optional callback for progress updates (stage, current, total).

        Returns:
            GroupingResult with groups sorted by descending size.
        """
        ...


class Pager(Protocol):
    """Interface for displaying captured comparator output."""
    def page(self, path: str) -> None:
        ...

    def show_diff(self, comparator: Comparator, file_a: str, file_b: str) -> int:
        """Capture the comparator output for two files and page it. Returns the exit status."""
        ...
