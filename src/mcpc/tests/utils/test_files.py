"""Tests for file system helpers."""

import os
import stat
from unittest.mock import patch

import pytest

from mcpc.utils.files import AtomicWriteError, FileError, atomic_write, ensure_directory, make_executable

def test_atomic_write_creates_parents(tmp_path):
    target = tmp_path / "src" / "index.ts"
    atomic_write(target, "export {};\n")

    assert target.read_text() == "export {};\n"
    # No temporary files are left behind
    assert [p.name for p in target.parent.iterdir()] == ["index.ts"]

def test_atomic_write_bytes(tmp_path):
    target = tmp_path / "data.bin"
    atomic_write(target, b"\x00\x01")
    assert target.read_bytes() == b"\x00\x01"

def test_atomic_write_failure_names_path(tmp_path):
    target = tmp_path / "file.txt"
    with patch("mcpc.utils.files.os.write", side_effect=OSError("disk full")):
        with pytest.raises(AtomicWriteError) as exc_info:
            atomic_write(target, "x")

    assert exc_info.value.path == target
    assert "disk full" in str(exc_info.value)
    assert not any(tmp_path.iterdir())

def test_ensure_directory_failure(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    with pytest.raises(FileError) as exc_info:
        ensure_directory(blocker / "child")
    assert exc_info.value.path == blocker / "child"

@pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
def test_make_executable(tmp_path):
    script = tmp_path / "server.py"
    script.write_text("print('hi')\n")
    script.chmod(0o644)

    make_executable(script)

    assert script.stat().st_mode & stat.S_IXUSR
