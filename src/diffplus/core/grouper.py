"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Builds groups of identical files by comparing each new file against the
representative (first member) of every group found so far.

Exact content equality is transitive, so comparing against representatives
only is enough: O(n * g) comparator runs, where g is the number of groups.
"""

import logging
import os
import time
from typing import List, Optional, Callable

from diffplus.core.errors import ComparisonError, FileAccessError
from diffplus.core.interfaces import Comparator
from diffplus.core.models import CompareResult, Group, GroupingResult, GroupingStats, Stage

logger = logging.getLogger(__name__)


class FileGrouperImpl:
    """
    A concrete FileGrouper using an injected Comparator.
    Any unreadable file or comparator failure aborts the whole run: no partial
    grouping is ever returned.
    """

    def __init__(self, comparator: Comparator):
        self.comparator = comparator

    def build_groups(
            self,
            files: List[str],
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> GroupingResult:
        start_time = time.time()
        stats = GroupingStats()
        total = len(files)

        for index, path in enumerate(files, 1):
            self.validate_file(path)
            if progress_callback:
                progress_callback(Stage.VALIDATE.value, index, total)

        groups: List[Group] = []
        for index, path in enumerate(files, 1):
            group = self._find_group(path, groups, stats)
            if group is None:
                logger.debug(f"New group #{len(groups)} for {path}")
                groups.append(Group(files=[path]))
            else:
                group.add_file(path)

            stats.files_processed += 1
            if progress_callback:
                progress_callback(Stage.COMPARE.value, index, total)

        groups = self.sort_groups(groups)
        stats.groups_found = len(groups)
        stats.total_time = time.time() - start_time
        logger.debug(f"Grouped {stats.files_processed} files into {stats.groups_found} groups "
                     f"({stats.comparisons} comparisons, {stats.total_time:.3f}s)")

        return GroupingResult(
            groups=groups,
            file_count=total,
            base_index=self.find_largest(groups),
            stats=stats,
        )

    def _find_group(self, path: str, groups: List[Group], stats: GroupingStats) -> Optional[Group]:
        """Return the first group whose representative is equal to path, or None."""
        for group in groups:
            stats.comparisons += 1
            # comparators either raise ComparisonError themselves or report ERROR
            result = self.comparator.compare(group.representative, path)
            if result is CompareResult.EQUAL:
                return group
            if result is CompareResult.ERROR:
                raise ComparisonError(group.representative, path)
        return None

    @staticmethod
    def validate_file(path: str) -> None:
        """
        Check that path names an existing, readable, regular file.

        Raises:
            FileAccessError: naming the offending path.
        """
        if not os.path.exists(path):
            raise FileAccessError(path, "No such file")
        if not os.path.isfile(path):
            raise FileAccessError(path, "Not a regular file")
        if not os.access(path, os.R_OK):
            raise FileAccessError(path, "Permission denied")

    @staticmethod
    def sort_groups(groups: List[Group]) -> List[Group]:
        """Sort by descending size. sorted() is stable, so equal-size groups keep discovery order."""
        return sorted(groups, key=lambda g: g.file_count, reverse=True)

    @staticmethod
    def find_largest(groups: List[Group]) -> int:
        """Index of the first group with the maximum member count (0 for no groups)."""
        best = 0
        for index, group in enumerate(groups):
            if group.file_count > groups[best].file_count:
                best = index
        return best
