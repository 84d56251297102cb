"""Tests for project name and path validation."""

import logging

import pytest

from mcpc.utils.validation import check_project_name, check_project_path

@pytest.mark.parametrize("name", ["demo", "my-server", "my_server", "server.v2", "a", "9lives"])
def test_valid_names(name):
    assert check_project_name(name).is_valid

@pytest.mark.parametrize("name, fragment", [
    ("", "empty"),
    ("has space", "spaces"),
    ("café", "ASCII"),
    ("bad/name", "only letters"),
    (".hidden", "start with"),
    ("..", "start with"),
    ("NUL", "reserved"),
    ("x" * 215, "at most"),
])
def test_invalid_names(name, fragment):
    result = check_project_name(name)
    assert not result.is_valid
    assert fragment in result.message

def test_uppercase_name_warns(caplog):
    with caplog.at_level(logging.WARNING):
        assert check_project_name("Demo").is_valid
    assert "lowercase" in caplog.text

def test_new_directory_is_valid(tmp_path):
    assert check_project_path(tmp_path / "demo").is_valid

def test_empty_existing_directory_is_valid(tmp_path):
    (tmp_path / "demo").mkdir()
    assert check_project_path(tmp_path / "demo").is_valid

def test_non_empty_directory_is_rejected(tmp_path):
    project = tmp_path / "demo"
    project.mkdir()
    (project / "keep.txt").write_text("x")

    result = check_project_path(project)
    assert not result.is_valid
    assert "not empty" in result.message

def test_existing_file_is_rejected(tmp_path):
    (tmp_path / "demo").write_text("x")
    result = check_project_path(tmp_path / "demo")
    assert not result.is_valid
    assert "not a directory" in result.message

def test_missing_parent_is_rejected(tmp_path):
    result = check_project_path(tmp_path / "nope" / "demo")
    assert not result.is_valid
    assert "Parent directory does not exist" in result.message
