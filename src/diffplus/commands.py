"""
Command orchestrator for grouping.
Used by the CLI (and any script) to turn SessionParams into a GroupingResult.
"""
import logging
from typing import Optional, Callable

from diffplus.core.comparator import DiffComparatorImpl
from diffplus.core.grouper import FileGrouperImpl
from diffplus.core.interfaces import Comparator, FileGrouper
from diffplus.core.models import GroupingResult, SessionParams

logger = logging.getLogger(__name__)


class GroupingCommand:
    """
    Orchestrates the grouping workflow:
    1. Build the comparator from the configured command and options
    2. Validate every input file
    3. Group files by content and sort groups by size

    Usage:
        command = GroupingCommand(params)
        result = command.execute(progress_callback=cli_progress_printer)
        controller = SessionController(Session(result), command.comparator, pager)
    """

    def __init__(self, params: SessionParams, comparator: Optional[Comparator] = None):
        self.params = params
        self.comparator = comparator or DiffComparatorImpl(params.diff_command, params.diff_options)
        self._grouper: FileGrouper = FileGrouperImpl(self.comparator)

    def execute(
            self,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> GroupingResult:
        """
        Build groups for the configured files.

        Returns:
            GroupingResult with groups sorted by descending size

        Raises:
            FileAccessError: If an input file is missing or unreadable
            ComparisonError: If the comparator fails
        """
        logger.debug(f"Grouping {len(self.params.files)} files with {self.params.diff_command} "
                     f"{' '.join(self.params.diff_options)}")
        result = self._grouper.build_groups(self.params.files, progress_callback=progress_callback)
        logger.debug(f"Found {result.group_count} groups in {result.file_count} files")
        return result
