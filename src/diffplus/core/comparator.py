"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/comparator.py
Runs the external line-diff tool to decide whether two files are identical.

Invocation: <command> <options...> <file_a> <file_b>
Exit status 0 means equal, 1 means different, anything else is an error.
"""
import logging
import subprocess
from typing import List, Optional, IO

from diffplus.core.errors import ComparisonError
from diffplus.core.models import CompareResult, DEFAULT_DIFF_COMMAND

logger = logging.getLogger(__name__)


class DiffComparatorImpl:
    """
    Comparator backed by an external diff process.
    The same options are passed verbatim to every invocation.
    """

    def __init__(self, command: str = DEFAULT_DIFF_COMMAND, options: Optional[List[str]] = None):
        self.command = command
        self.options = list(options or [])

    def build_command(self, file_a: str, file_b: str) -> List[str]:
        return [self.command, *self.options, file_a, file_b]

    def compare(self, file_a: str, file_b: str) -> CompareResult:
        """
        Compare two files, discarding the comparator's standard output.

        Raises:
            ComparisonError: If the comparator cannot be started or exits with an unexpected status.
        """
        cmd = self.build_command(file_a, file_b)
        logger.debug(f"Running comparator: {cmd}")
        try:
            completed = subprocess.run(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            raise ComparisonError(file_a, file_b, detail=f"cannot run '{self.command}': {e}") from e

        result = CompareResult.from_exit_status(completed.returncode)
        if result is CompareResult.ERROR:
            detail = completed.stderr.decode(errors="replace") if completed.stderr else ""
            logger.error(f"Comparator exited with status {completed.returncode} for {file_a} / {file_b}")
            raise ComparisonError(file_a, file_b, completed.returncode, detail)
        return result

    def write_diff(self, file_a: str, file_b: str, stream: IO) -> int:
        """
        Write comparator output for two files into an open binary stream.
        Returns the comparator's exit status; the caller decides what an error status means.

        Raises:
            ComparisonError: If the comparator cannot be started.
        """
        cmd = self.build_command(file_a, file_b)
        logger.debug(f"Capturing comparator output: {cmd}")
        try:
            completed = subprocess.run(cmd, stdout=stream, stderr=stream)
        except OSError as e:
            raise ComparisonError(file_a, file_b, detail=f"cannot run '{self.command}': {e}") from e
        return completed.returncode
