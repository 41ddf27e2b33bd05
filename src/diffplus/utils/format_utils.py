"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/format_utils.py
"""
import shutil
from typing import List, Optional

from diffplus.core.models import Group

DEFAULT_WIDTH = 80
ELLIPSIS = "..."
BASE_MARKER = "*"


class FormatUtils:
    @staticmethod
    def terminal_width(override: Optional[int] = None) -> int:
        """
        Display width in columns: the override if given, otherwise the terminal
        width, otherwise 80.
        """
        if override:
            return override
        columns = shutil.get_terminal_size(fallback=(DEFAULT_WIDTH, 24)).columns
        return columns if columns > 0 else DEFAULT_WIDTH

    @staticmethod
    def count_label(count: int, noun: str) -> str:
        """count_label(1, "file") -> '1 file', count_label(3, "file") -> '3 files'"""
        return f"{count} {noun}" if count == 1 else f"{count} {noun}s"

    @staticmethod
    def index_digits(group_count: int) -> int:
        """Width of the index column so every bracket prefix lines up (at least 2)."""
        return max(2, len(str(max(group_count - 1, 0))))

    @staticmethod
    def render_group(
            group: Group,
            index: Optional[int] = None,
            base_index: Optional[int] = None,
            width: int = DEFAULT_WIDTH,
            index_digits: int = 2,
    ) -> str:
        """
        Render one group on a single line, e.g. '[ 0*]: 2 files : a.txt b.txt'.

        Paths are appended one at a time until all are in or the line reaches
        the width. If anything is left out, or the line is longer than the width,
        the tail is replaced by '...' so the result never exceeds the width.
        """
        line = ""
        if index is not None:
            marker = BASE_MARKER if index == base_index else " "
            line = f"[{index:>{index_digits}}{marker}]: "
        line += FormatUtils.count_label(group.file_count, "file") + " : "

        truncated = False
        for position, path in enumerate(group.files):
            if len(line) >= width:
                truncated = True
                break
            line += path if position == 0 else " " + path

        if truncated or len(line) > width:
            if width <= len(ELLIPSIS):
                return ELLIPSIS[:width]
            line = line[:width - len(ELLIPSIS)] + ELLIPSIS
        return line

    @staticmethod
    def render_listing(
            groups: List[Group],
            base_index: int,
            file_count: int,
            width: int = DEFAULT_WIDTH,
    ) -> List[str]:
        """Full listing: two header lines, then one rendered line per group in index order."""
        lines = [
            f"{FormatUtils.count_label(len(groups), 'group')}, {FormatUtils.count_label(file_count, 'file')}",
            f"('{BASE_MARKER}' marks the base group)",
        ]
        digits = FormatUtils.index_digits(len(groups))
        for index, group in enumerate(groups):
            lines.append(FormatUtils.render_group(group, index, base_index, width, digits))
        return lines
