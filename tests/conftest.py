"""
Shared fixtures for grouping and session tests.
Creates isolated temporary directories with controlled test files and an
in-memory comparator so most tests do not depend on an installed diff.
"""
import io
import pytest
import tempfile
from pathlib import Path
from typing import Dict, List, Tuple
import sys

# Add src/ to sys.path so 'diffplus' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from diffplus.core.models import CompareResult, Group, GroupingResult


class FakeComparator:
    """
    Compares file contents in Python and records every call.
    Paths listed in `failing` make compare() report ERROR.
    """

    def __init__(self, failing=None):
        self.calls: List[Tuple[str, str]] = []
        self.diff_calls: List[Tuple[str, str]] = []
        self.failing = set(failing or [])

    def compare(self, file_a: str, file_b: str) -> CompareResult:
        self.calls.append((file_a, file_b))
        if file_a in self.failing or file_b in self.failing:
            return CompareResult.ERROR
        if Path(file_a).read_bytes() == Path(file_b).read_bytes():
            return CompareResult.EQUAL
        return CompareResult.DIFFERENT

    def write_diff(self, file_a: str, file_b: str, stream) -> int:
        self.diff_calls.append((file_a, file_b))
        stream.write(f"--- {file_a}\n+++ {file_b}\n".encode())
        return 0 if Path(file_a).read_bytes() == Path(file_b).read_bytes() else 1


class FakePager:
    """Records show_diff() calls instead of launching a pager."""

    def __init__(self):
        self.shown: List[Tuple[str, str]] = []

    def page(self, path: str) -> None:
        pass

    def show_diff(self, comparator, file_a: str, file_b: str) -> int:
        self.shown.append((file_a, file_b))
        return comparator.write_diff(file_a, file_b, io.BytesIO())


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files:
    - a, b: identical content
    - c: distinct content
    - d, e, f: identical to each other, distinct from a and c
    """
    files = {}

    files["a"] = temp_dir / "a.txt"
    files["b"] = temp_dir / "b.txt"
    files["a"].write_text("alpha\nbeta\n")
    files["b"].write_text("alpha\nbeta\n")

    files["c"] = temp_dir / "c.txt"
    files["c"].write_text("alpha\ngamma\n")

    for name in ("d", "e", "f"):
        files[name] = temp_dir / f"{name}.txt"
        files[name].write_text("delta\n")

    return files


@pytest.fixture
def fake_comparator():
    return FakeComparator()


@pytest.fixture
def fake_pager():
    return FakePager()


@pytest.fixture
def abc_result(test_files) -> GroupingResult:
    """Grouping of [a, b, c] with a == b: {a, b} at index 0 (base), {c} at index 1."""
    return GroupingResult(
        groups=[
            Group(files=[str(test_files["a"]), str(test_files["b"])]),
            Group(files=[str(test_files["c"])]),
        ],
        file_count=3,
        base_index=0,
    )
