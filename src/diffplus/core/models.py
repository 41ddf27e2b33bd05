"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for content grouping and the interactive session.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Union
from enum import Enum


# =============================
# Enums
# =============================

class CompareResult(Enum):
    """
    Outcome of comparing two files with the external comparator.
    Maps the comparator's exit status: 0 -> EQUAL, 1 -> DIFFERENT, anything else -> ERROR.
    """
    EQUAL = "equal"
    DIFFERENT = "different"
    ERROR = "error"

    @classmethod
    def from_exit_status(cls, status: int) -> "CompareResult":
        if status == 0:
            return cls.EQUAL
        if status == 1:
            return cls.DIFFERENT
        return cls.ERROR

    def __repr__(self) -> str:
        return self.value


class CommandKind(Enum):
    """Interactive session commands. Aliases are mapped in diffplus.aliases."""
    BASE = "base"
    DIFF = "diff"
    LIST = "list"
    VIEW = "view"
    HELP = "help"
    WHAT = "what"
    QUIT = "quit"


class Stage(str, Enum):
    VALIDATE = "Validating"
    COMPARE = "Comparing"


# ======================
#  Core Data Models
# ======================

@dataclass
class Group:
    """
    A group of files with identical content.
    The first file is the representative: every later comparison against
    this group, and every diff involving it, uses that file.
    """
    files: List[str] = field(default_factory=list)

    @property
    def representative(self) -> str:
        if not self.files:
            raise ValueError("Empty group has no representative")
        return self.files[0]

    @property
    def file_count(self) -> int:
        """How many files are in this group."""
        return len(self.files)

    def add_file(self, path: str) -> None:
        self.files.append(path)

    def __len__(self) -> int:
        return len(self.files)

    def __repr__(self):
        return f"<Group representative={self.files[0] if self.files else None}, count={len(self.files)}>"


@dataclass
class GroupingStats:
    """
    Statistics collected while building groups.
    """
    files_processed: int = 0
    groups_found: int = 0
    comparisons: int = 0
    total_time: float = 0.0

    def as_dict(self) -> Dict[str, Union[int, float]]:
        return {
            "files": self.files_processed,
            "groups": self.groups_found,
            "comparisons": self.comparisons,
            "time": self.total_time,
        }

    def print_summary(self) -> str:
        lines = [
            "📊 Grouping Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s",
            f"Files processed: {self.files_processed}",
            f"Groups found: {self.groups_found}",
            f"Comparator runs: {self.comparisons}",
        ]
        return "\n".join(lines)


@dataclass
class GroupingResult:
    """
    Output of the grouping engine: groups sorted by descending size,
    the total number of input files and the index of the initial base group.
    """
    groups: List[Group]
    file_count: int
    base_index: int = 0
    stats: GroupingStats = field(default_factory=GroupingStats)

    @property
    def group_count(self) -> int:
        return len(self.groups)


# ======================
#  Session parameters
# ======================

DEFAULT_DIFF_COMMAND = "diff"
DEFAULT_PAGER_COMMAND = ["less", "-R"]


@dataclass
class SessionParams:
    """Parameters for a grouping run and the interactive session that follows."""
    files: List[str]
    diff_options: List[str] = field(default_factory=list)
    diff_command: str = DEFAULT_DIFF_COMMAND
    pager_command: List[str] = field(default_factory=lambda: list(DEFAULT_PAGER_COMMAND))
    width: Optional[int] = None
    interactive: bool = True

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.files:
            raise ValueError("At least one file is required")

        if not self.diff_command or not self.diff_command.strip():
            raise ValueError("Comparator command cannot be empty")

        if not self.pager_command:
            raise ValueError("Pager command cannot be empty")

        if self.width is not None and self.width <= 0:
            raise ValueError("Display width must be positive")

    @staticmethod
    def split_options(option_strings: Optional[List[str]]) -> List[str]:
        """
        Split each option string on whitespace and concatenate the pieces in order.
        ["-u", "-w --color=always"] -> ["-u", "-w", "--color=always"]
        """
        options = []
        for item in option_strings or []:
            options.extend(item.split())
        return options

    @staticmethod
    def from_human_readable(
            files: List[str],
            diff_options: Optional[List[str]] = None,
            diff_command: str = DEFAULT_DIFF_COMMAND,
            pager: str = "",
            width: Optional[int] = None,
            interactive: bool = True,
    ) -> 'SessionParams':
        """
        Factory method to create params from raw option strings.
        The pager string is split on whitespace; an empty string selects the default pager.
        """
        pager_command = pager.split() if pager and pager.strip() else list(DEFAULT_PAGER_COMMAND)

        return SessionParams(
            files=list(files),
            diff_options=SessionParams.split_options(diff_options),
            diff_command=diff_command.strip() if diff_command else diff_command,
            pager_command=pager_command,
            width=width,
            interactive=interactive,
        )
