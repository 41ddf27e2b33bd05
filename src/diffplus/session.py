"""
Interactive session over a fixed set of groups.
Resolves group specs, dispatches commands and renders group listings.
The only mutable state is the base group index, changed by the `base` command.
"""
import logging
import re
from typing import List, Optional, Callable, Dict, Tuple

from diffplus.aliases import COMMAND_ALIASES, BASE_TOKENS, PROMPT, FAREWELL, HELP_TEXT
from diffplus.core.errors import DiffPlusError, ResolutionError, UnrecognizedCommandError
from diffplus.core.interfaces import Comparator, Pager
from diffplus.core.models import CommandKind, Group, GroupingResult
from diffplus.utils.format_utils import FormatUtils

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"^[+-]?\d+$")


class Session:
    """Session state: the groups and file count are fixed, the base index is not."""

    def __init__(self, result: GroupingResult):
        self.groups: List[Group] = result.groups
        self.file_count: int = result.file_count
        self.base_index: int = result.base_index

    @property
    def last_index(self) -> int:
        return len(self.groups) - 1

    def set_base(self, index: int) -> None:
        if not 0 <= index <= self.last_index:
            raise ResolutionError(f"Group {index} is out of range (0-{self.last_index})")
        logger.debug(f"Base group changed {self.base_index} -> {index}")
        self.base_index = index


class SessionController:
    """
    Read-eval loop over a Session.

    Every error raised while running a command is reported and the loop goes on;
    only `quit` or end of input ends it.
    """

    def __init__(
            self,
            session: Session,
            comparator: Comparator,
            pager: Pager,
            width: Optional[int] = None,
            input_func: Optional[Callable[[str], str]] = None,
    ):
        self.session = session
        self.comparator = comparator
        self.pager = pager
        self.width = width
        self.input_func = input_func or input

        self._handlers: Dict[CommandKind, Callable[[List[str]], None]] = {
            CommandKind.BASE: self.cmd_base,
            CommandKind.DIFF: self.cmd_diff,
            CommandKind.LIST: self.cmd_list,
            CommandKind.VIEW: self.cmd_view,
            CommandKind.HELP: self.cmd_help,
            CommandKind.WHAT: self.cmd_what,
        }

    # =============================
    # Group spec resolution
    # =============================

    def resolve(self, spec: str) -> Optional[int]:
        """
        Resolve a group spec to a group index, printing a diagnostic on failure.
        Returns None if the spec does not name a group.
        """
        try:
            return self.resolve_or_raise(spec)
        except ResolutionError as e:
            print(e)
            return None

    def resolve_or_raise(self, spec: str) -> int:
        """
        Try each parser in order: integer, base token, regular expression.
        The first parser that recognises the spec decides the outcome, so '3'
        is always index 3 and 'b' is always the base group.
        """
        for parser in (self._parse_integer, self._parse_base_token, self._parse_pattern):
            index = parser(spec)
            if index is not None:
                return index
        raise ResolutionError(f"Cannot resolve group '{spec}'")

    def _parse_integer(self, spec: str) -> Optional[int]:
        if not _INTEGER_RE.match(spec):
            return None
        index = int(spec)
        if not 0 <= index <= self.session.last_index:
            raise ResolutionError(f"Group {index} is out of range (0-{self.session.last_index})")
        return index

    def _parse_base_token(self, spec: str) -> Optional[int]:
        if spec in BASE_TOKENS:
            return self.session.base_index
        return None

    def _parse_pattern(self, spec: str) -> int:
        try:
            pattern = re.compile(spec)
        except re.error as e:
            raise ResolutionError(f"Invalid pattern '{spec}': {e}") from e

        for index, group in enumerate(self.session.groups):
            for path in group.files:
                if pattern.search(path):
                    print(f"'{spec}' matches {path} in group {index}")
                    return index
        raise ResolutionError(f"No file matches '{spec}'")

    def _resolve_all(self, specs: List[str]) -> Optional[List[int]]:
        """Resolve every spec, or None as soon as one fails."""
        indexes = []
        for spec in specs:
            index = self.resolve(spec)
            if index is None:
                return None
            indexes.append(index)
        return indexes

    # =============================
    # Command decoding and loop
    # =============================

    @staticmethod
    def decode(line: str) -> Optional[Tuple[CommandKind, List[str]]]:
        """
        Split a line on whitespace into a command and its arguments.
        Returns None for a blank line.

        Raises:
            UnrecognizedCommandError: If the command word is not a known alias.
        """
        words = line.split()
        if not words:
            return None
        kind = COMMAND_ALIASES.get(words[0])
        if kind is None:
            raise UnrecognizedCommandError(words[0])
        return kind, words[1:]

    def execute(self, line: str) -> bool:
        """
        Run one input line. Returns False when the session should end.
        """
        try:
            decoded = self.decode(line)
        except UnrecognizedCommandError as e:
            print(e)
            return True
        if decoded is None:
            return True

        kind, args = decoded
        if kind is CommandKind.QUIT:
            print(FAREWELL)
            return False

        logger.debug(f"Command {kind.value} args={args}")
        try:
            self._handlers[kind](args)
        except DiffPlusError as e:
            logger.debug(f"Command {kind.value} failed: {e}")
            print(f"Error: {e}")
        return True

    def run(self) -> None:
        """Read-eval loop. Ends on `quit` or end of input."""
        self.cmd_view([])
        while True:
            try:
                line = self.input_func(PROMPT)
            except EOFError:
                print()
                logger.debug("End of input, leaving session")
                return
            if not self.execute(line):
                return

    # =============================
    # Commands
    # =============================

    def cmd_base(self, args: List[str]) -> None:
        if len(args) != 1:
            print("Usage: base GROUP")
            return
        index = self.resolve(args[0])
        if index is None:
            return
        self.session.set_base(index)
        self.cmd_view([])

    def cmd_diff(self, args: List[str]) -> None:
        if not 1 <= len(args) <= 2:
            print("Usage: diff GROUP [GROUP]")
            return
        indexes = self._resolve_all(args)
        if indexes is None:
            return
        first = indexes[0]
        second = indexes[1] if len(indexes) == 2 else self.session.base_index

        file_a = self.session.groups[first].representative
        file_b = self.session.groups[second].representative
        logger.debug(f"Diffing group {first} ({file_a}) against group {second} ({file_b})")
        self.pager.show_diff(self.comparator, file_a, file_b)

    def cmd_list(self, args: List[str]) -> None:
        indexes = self._resolve_all(args) if args else [self.session.base_index]
        if indexes is None:
            return
        for index in indexes:
            group = self.session.groups[index]
            marker = " (base)" if index == self.session.base_index else ""
            print(f"Group {index}{marker}: {FormatUtils.count_label(group.file_count, 'file')}")
            for path in group.files:
                print(f"  {path}")

    def cmd_view(self, args: List[str]) -> None:
        width = FormatUtils.terminal_width(self.width)
        for line in FormatUtils.render_listing(
                self.session.groups, self.session.base_index, self.session.file_count, width):
            print(line)

    def cmd_help(self, args: List[str]) -> None:
        print(HELP_TEXT)

    def cmd_what(self, args: List[str]) -> None:
        if not args:
            print(f"base -> {self.session.base_index}")
            return
        for spec in args:
            index = self.resolve(spec)
            if index is not None:
                print(f"{spec} -> {index}")
