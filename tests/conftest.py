"""
Shared fixtures for duplicate detection tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'dupetree' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files (names chosen so sorted visit order is predictable):
    - a_dup1.txt / b_dup1.txt: identical 1KB files
    - c_other.txt: 1KB, different content (size collision only)
    - d_unique.txt: 1500 bytes, no other file of that size
    - e_empty.txt / f_empty.txt: two zero-byte files
    - sub/g_dup1.txt: third copy of the 1KB content, visited after the root files
    """
    files = {}

    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "a_dup1.txt"
    files["dup1_b"] = temp_dir / "b_dup1.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    files["other"] = temp_dir / "c_other.txt"
    files["other"].write_bytes(b"B" * 1024)

    files["unique"] = temp_dir / "d_unique.txt"
    files["unique"].write_bytes(b"C" * 1500)

    files["empty1"] = temp_dir / "e_empty.txt"
    files["empty1"].write_bytes(b"")
    files["empty2"] = temp_dir / "f_empty.txt"
    files["empty2"].write_bytes(b"")

    subdir = temp_dir / "sub"
    subdir.mkdir()
    files["sub_dup"] = subdir / "g_dup1.txt"
    files["sub_dup"].write_bytes(content_a)

    return files


@pytest.fixture
def abc_tree(temp_dir) -> Dict[str, Path]:
    """Three 10-byte files: A and C identical, B different."""
    files = {
        "A": temp_dir / "A.txt",
        "B": temp_dir / "B.txt",
        "C": temp_dir / "C.txt",
    }
    files["A"].write_bytes(b"aaaaaaaaaa")
    files["B"].write_bytes(b"bbbbbbbbbb")
    files["C"].write_bytes(b"aaaaaaaaaa")
    return files
