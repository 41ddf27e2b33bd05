#!/usr/bin/env python3
"""
diff+ CLI — group files by identical content and explore the differences
between groups interactively.
Comparison and diff output come from an external diff tool; diffs are shown in a pager.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import shutil
import time
from typing import List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from diffplus.core.errors import UsageError, FileAccessError, ComparisonError
from diffplus.core.models import SessionParams, GroupingResult, DEFAULT_DIFF_COMMAND
from diffplus.commands import GroupingCommand
from diffplus.services.pager_service import PagerService
from diffplus.session import Session, SessionController
from diffplus.utils.format_utils import FormatUtils
from diffplus.aliases import FILES_HELP_TEXT, DIFF_OPTIONS_HELP_TEXT, EPILOG_TEXT

logger = logging.getLogger(__name__)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        sys.stdout.reconfigure(encoding='utf-8')
        sys.stderr.reconfigure(encoding='utf-8')

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="diff+",
            description="diff+ — group identical files and diff the groups interactively",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "files",
            nargs="*",
            metavar="FILE",
            help=FILES_HELP_TEXT
        )

        # Comparator options
        parser.add_argument(
            "--diff-options", "-o",
            action="append",
            default=[],
            type=str,
            metavar="OPTS",
            dest="diff_options",
            help=DIFF_OPTIONS_HELP_TEXT
        )
        parser.add_argument(
            "--diff-cmd",
            default=DEFAULT_DIFF_COMMAND,
            type=str,
            metavar="CMD",
            dest="diff_cmd",
            help="External comparator. Exit status 0 = equal, 1 = different. Default: diff"
        )
        parser.add_argument(
            "--pager",
            default="",
            type=str,
            metavar="CMD",
            help="Pager for diff output, split on whitespace. Default: less -R"
        )

        # Output options
        parser.add_argument(
            "--width", "-w",
            default=None,
            type=int,
            metavar="COLS",
            help="Width of group listings. Default: terminal width, or 80"
        )
        parser.add_argument(
            "--list", "-l",
            action="store_true",
            dest="list_only",
            help="Print the groups and exit without starting the interactive session"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show progress and grouping statistics"
        )
        parser.add_argument(
            "--debug",
            action="store_true",
            help="Enable debug logging"
        )

        return parser

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        if args is None:
            args = sys.argv[1:]
        return CLIApplication.build_parser().parse_args(CLIApplication.attach_option_values(args))

    @staticmethod
    def attach_option_values(args: List[str]) -> List[str]:
        """
        Rewrite `-o X` and `--diff-options X` into `--diff-options=X`.

        Comparator options start with a dash, which argparse would otherwise
        read as the next flag instead of the option's value.
        """
        result: List[str] = []
        i = 0
        while i < len(args):
            arg = args[i]
            if arg == "--":
                result.extend(args[i:])
                break
            if arg in ("-o", "--diff-options") and i + 1 < len(args):
                result.append(f"--diff-options={args[i + 1]}")
                i += 2
                continue
            result.append(arg)
            i += 1
        return result

    def validate_args(self, args: argparse.Namespace) -> None:
        """
        Validate command-line arguments before execution.

        Raises:
            UsageError: If no files were given.
        """
        if not args.files:
            raise UsageError("No input files given")

        if args.quiet and args.verbose:
            self.error_exit("--quiet and --verbose cannot be used together")

        if args.width is not None and args.width <= 0:
            self.error_exit(f"Invalid width: {args.width}")

        if shutil.which(args.diff_cmd) is None:
            self.error_exit(f"Comparator not found: {args.diff_cmd}")

        if len(args.files) == 1:
            self.warning("Only one file given, there is nothing to compare it with")

    def create_params(self, args: argparse.Namespace) -> SessionParams:
        """Create SessionParams from CLI arguments."""
        try:
            return SessionParams.from_human_readable(
                files=args.files,
                diff_options=args.diff_options,
                diff_command=args.diff_cmd,
                pager=args.pager,
                width=args.width,
                interactive=not args.list_only,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(
                f"\r  [{stage}] {current}/{total} ({percent:.1f}%)"
            )
            sys.stderr.flush()
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files processed...")
            sys.stderr.flush()

    def run_grouping(self, command: GroupingCommand) -> GroupingResult:
        """Execute grouping workflow. Any failure here is fatal."""
        try:
            result = command.execute(
                progress_callback=self.progress_callback if self.verbose else None
            )
        except FileAccessError as e:
            self.error_exit(f"Cannot access input file: {e}")
        except ComparisonError as e:
            self.error_exit(f"Comparator failed: {e}")

        if self.verbose:
            sys.stderr.write("\n")
            print(result.stats.print_summary(), file=sys.stderr)
        return result

    def output_results(self, result: GroupingResult, params: SessionParams) -> None:
        """Print the full group listing (non-interactive mode)."""
        width = FormatUtils.terminal_width(params.width)
        for line in FormatUtils.render_listing(result.groups, result.base_index, result.file_count, width):
            print(line)

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point: group files, then list them or start the session."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        if args.debug:
            logging.getLogger().setLevel(logging.DEBUG)

        try:
            self.validate_args(args)
        except UsageError as e:
            self.build_parser().print_usage(sys.stderr)
            self.error_exit(str(e))
        params = self.create_params(args)
        logger.debug(f"Session parameters: {params}")

        if self.verbose:
            print(f"Comparing {len(params.files)} files...", file=sys.stderr)

        command = GroupingCommand(params)
        result = self.run_grouping(command)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Grouped in {elapsed:.2f} seconds", file=sys.stderr)

        if not params.interactive:
            self.output_results(result, params)
            return

        controller = SessionController(
            Session(result),
            command.comparator,
            PagerService(params.pager_command),
            width=params.width,
        )
        controller.run()


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
