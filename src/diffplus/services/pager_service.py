"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/pager_service.py
Shows captured comparator output in an external pager.
The pager runs in secure mode (LESSSECURE=1) because the paged content is
derived from user-supplied filenames.
"""
import logging
import os
import subprocess
import tempfile
from typing import List, Optional

from diffplus.core.errors import ComparisonError, PagerError
from diffplus.core.interfaces import Comparator
from diffplus.core.models import DEFAULT_PAGER_COMMAND

logger = logging.getLogger(__name__)


class PagerService:
    """
    Runs a pager on a file. The pager command is split ahead of time,
    e.g. ["less", "-R"]; the file path is appended as the last argument.
    """

    def __init__(self, command: Optional[List[str]] = None):
        self.command = list(command or DEFAULT_PAGER_COMMAND)

    def page(self, path: str) -> None:
        """Blocks until the pager exits."""
        cmd = [*self.command, path]
        logger.debug(f"Launching pager: {cmd}")
        try:
            subprocess.run(cmd, env=PagerService._get_secure_env())
        except OSError as e:
            raise PagerError(f"Failed to launch pager '{self.command[0]}': {e}") from e

    def show_diff(self, comparator: Comparator, file_a: str, file_b: str) -> int:
        """
        Capture the comparator output for two files into a temporary file and page it.
        The temporary file is removed on every exit path.

        Returns:
            The comparator's exit status.

        Raises:
            ComparisonError: If the comparator fails (status other than 0 or 1); nothing is paged.
            PagerError: If the pager cannot be launched.
        """
        fd, tmp_path = tempfile.mkstemp(prefix="diffplus-", suffix=".diff")
        try:
            with os.fdopen(fd, "wb") as stream:
                status = comparator.write_diff(file_a, file_b, stream)

            if status not in (0, 1):
                with open(tmp_path, "rb") as f:
                    detail = f.read().decode(errors="replace")
                raise ComparisonError(file_a, file_b, status, detail)

            self.page(tmp_path)
            return status
        finally:
            try:
                os.unlink(tmp_path)
            except FileNotFoundError:
                pass

    @staticmethod
    def _get_secure_env():
        """
        Returns a copy of the environment with pager shell escapes disabled.
        """
        env = os.environ.copy()
        env["LESSSECURE"] = "1"
        return env
