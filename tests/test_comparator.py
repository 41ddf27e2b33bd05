"""
Tests for DiffComparatorImpl against the real diff tool (skipped when not installed)
and against a mocked subprocess for exit-status mapping.
"""
import shutil
import subprocess
from unittest import mock
import pytest
from diffplus.core import DiffComparatorImpl, CompareResult
from diffplus.core.errors import ComparisonError

requires_diff = pytest.mark.skipif(shutil.which("diff") is None, reason="diff is not installed")


class TestExitStatusMapping:
    """Exit status 0 = equal, 1 = different, anything else = error."""

    @pytest.mark.parametrize("status, expected", [
        (0, CompareResult.EQUAL),
        (1, CompareResult.DIFFERENT),
        (2, CompareResult.ERROR),
        (-9, CompareResult.ERROR),
    ])
    def test_from_exit_status(self, status, expected):
        assert CompareResult.from_exit_status(status) is expected

    def test_unexpected_status_raises(self):
        completed = subprocess.CompletedProcess(args=[], returncode=2, stderr=b"diff: boom\n")
        with mock.patch("diffplus.core.comparator.subprocess.run", return_value=completed):
            with pytest.raises(ComparisonError) as exc_info:
                DiffComparatorImpl().compare("x", "y")

        assert exc_info.value.status == 2
        assert "boom" in str(exc_info.value)

    def test_missing_command_raises(self):
        comparator = DiffComparatorImpl(command="no-such-comparator-xyz")
        with pytest.raises(ComparisonError, match="cannot run"):
            comparator.compare("x", "y")

    def test_options_are_passed_verbatim_before_files(self):
        completed = subprocess.CompletedProcess(args=[], returncode=0, stderr=b"")
        comparator = DiffComparatorImpl(command="diff", options=["-w", "--strip-trailing-cr"])
        with mock.patch("diffplus.core.comparator.subprocess.run", return_value=completed) as run:
            comparator.compare("a.txt", "b.txt")

        assert run.call_args.args[0] == ["diff", "-w", "--strip-trailing-cr", "a.txt", "b.txt"]
        assert run.call_args.kwargs["stdout"] is subprocess.DEVNULL


@requires_diff
class TestRealDiff:
    def test_identical_files_are_equal(self, test_files):
        comparator = DiffComparatorImpl()
        assert comparator.compare(str(test_files["a"]), str(test_files["b"])) is CompareResult.EQUAL

    def test_distinct_files_are_different(self, test_files):
        comparator = DiffComparatorImpl()
        assert comparator.compare(str(test_files["a"]), str(test_files["c"])) is CompareResult.DIFFERENT

    def test_options_change_equality(self, temp_dir):
        """With -w, whitespace-only differences compare equal."""
        spaced = temp_dir / "spaced.txt"
        tight = temp_dir / "tight.txt"
        spaced.write_text("a  b\n")
        tight.write_text("a b\n")

        assert DiffComparatorImpl().compare(str(spaced), str(tight)) is CompareResult.DIFFERENT
        assert DiffComparatorImpl(options=["-w"]).compare(str(spaced), str(tight)) is CompareResult.EQUAL

    def test_missing_file_is_an_error(self, test_files, temp_dir):
        with pytest.raises(ComparisonError):
            DiffComparatorImpl().compare(str(test_files["a"]), str(temp_dir / "missing.txt"))

    def test_write_diff_captures_output(self, test_files, tmp_path):
        out = tmp_path / "out.diff"
        with open(out, "wb") as stream:
            status = DiffComparatorImpl(options=["-u"]).write_diff(
                str(test_files["a"]), str(test_files["c"]), stream)

        assert status == 1
        text = out.read_text()
        assert "-beta" in text
        assert "+gamma" in text
