"""
Integration tests for GroupingCommand: the orchestration layer between the CLI and core.
"""
import shutil
import pytest
from diffplus import GroupingCommand, SessionParams
from diffplus.core import DiffComparatorImpl
from diffplus.core.errors import FileAccessError


class TestGroupingCommand:
    def test_builds_comparator_from_params(self, test_files):
        params = SessionParams(files=[str(test_files["a"])], diff_options=["-w"], diff_command="diff")

        command = GroupingCommand(params)

        assert isinstance(command.comparator, DiffComparatorImpl)
        assert command.comparator.command == "diff"
        assert command.comparator.options == ["-w"]

    def test_execute_with_injected_comparator(self, test_files, fake_comparator):
        """
        End-to-end: [a, b, c] with a == b gives {a, b} (index 0, base) and {c} (index 1).
        """
        files = [str(test_files[k]) for k in ("a", "b", "c")]
        command = GroupingCommand(SessionParams(files=files), comparator=fake_comparator)

        result = command.execute()

        assert [g.files for g in result.groups] == [files[:2], files[2:]]
        assert result.base_index == 0

    def test_execute_reports_progress(self, test_files, fake_comparator):
        files = [str(test_files[k]) for k in ("a", "b")]
        events = []

        GroupingCommand(SessionParams(files=files), comparator=fake_comparator).execute(
            progress_callback=lambda stage, current, total: events.append(stage))

        assert "Validating" in events and "Comparing" in events

    def test_execute_propagates_access_errors(self, test_files, temp_dir, fake_comparator):
        params = SessionParams(files=[str(test_files["a"]), str(temp_dir / "gone.txt")])

        with pytest.raises(FileAccessError, match="gone.txt"):
            GroupingCommand(params, comparator=fake_comparator).execute()

    @pytest.mark.skipif(shutil.which("diff") is None, reason="diff is not installed")
    def test_execute_with_real_diff(self, test_files):
        files = [str(p) for p in test_files.values()]

        result = GroupingCommand(SessionParams(files=files)).execute()

        assert [g.file_count for g in result.groups] == [3, 2, 1]
