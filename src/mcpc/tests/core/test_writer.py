"""Tests for writing template bundles to disk."""

import json
import os
import stat
from unittest.mock import patch

import pytest
import toml

from mcpc.core.options import Language, build_project_spec
from mcpc.core.template import (
    TemplateBundle,
    TemplateFile,
    TemplateRenderer,
    create_context,
    select_bundle,
)
from mcpc.core.writer import ProjectExistsError, ProjectWriter, WriteError
from mcpc.utils.files import AtomicWriteError

def make_writer(project_dir, language="ts", tool=None, name="demo"):
    spec = build_project_spec(name, language, tool)
    return ProjectWriter(project_dir, select_bundle(spec), create_context(spec))

def tree(root):
    return sorted(
        str(p.relative_to(root)).replace(os.sep, "/")
        for p in root.rglob("*")
    )

@pytest.mark.parametrize("tool", ["pnpm", "yarn", "npm"])
def test_typescript_tree(tmp_path, tool):
    project = tmp_path / "demo"
    written = make_writer(project, "ts", tool).write()

    assert tree(project) == [
        ".gitignore", ".prettierignore", ".prettierrc", "README.md", "build",
        "package.json", "src", "src/index.ts", "tsconfig.json",
    ]
    assert len(written) == 7

    manifest = json.loads((project / "package.json").read_text())
    assert manifest["name"] == "demo"
    assert manifest["bin"] == {"demo": "./build/index.js"}
    assert '"demo"' in (project / "src" / "index.ts").read_text()

def test_python_tree(tmp_path):
    project = tmp_path / "demo"
    make_writer(project, "py", "uv").write()

    assert tree(project) == [
        ".gitignore", "README.md", "pyproject.toml", "requirements.txt", "server.py",
    ]
    assert toml.loads((project / "pyproject.toml").read_text())["project"]["name"] == "demo"
    assert 'FastMCP("demo")' in (project / "server.py").read_text()
    assert (project / "requirements.txt").read_text().startswith("mcp[cli]")

@pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
def test_server_script_is_executable(tmp_path):
    project = tmp_path / "demo"
    make_writer(project, "py").write()
    assert (project / "server.py").stat().st_mode & stat.S_IXUSR

def test_empty_existing_directory_is_used(tmp_path):
    project = tmp_path / "demo"
    project.mkdir()
    make_writer(project).write()
    assert (project / "package.json").exists()

def test_non_empty_directory_is_not_overwritten(tmp_path):
    project = tmp_path / "demo"
    project.mkdir()
    (project / "package.json").write_text("mine")

    with pytest.raises(ProjectExistsError, match="not empty"):
        make_writer(project).write()

    assert (project / "package.json").read_text() == "mine"
    assert [p.name for p in project.iterdir()] == ["package.json"]

def test_write_failure_names_file_and_keeps_partial_output(tmp_path):
    project = tmp_path / "demo"
    writer = make_writer(project, "ts")

    def failing_write(path, content):
        if path.name == "tsconfig.json":
            raise AtomicWriteError(path, f"Failed to write {path}: denied")
        path.write_text(content)

    with patch("mcpc.core.writer.atomic_write", side_effect=failing_write):
        with pytest.raises(WriteError) as exc_info:
            writer.write()

    assert exc_info.value.path == project / "tsconfig.json"
    assert "tsconfig.json" in str(exc_info.value)
    assert (project / "package.json").exists()

def test_manifest_name_mismatch(tmp_path):
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "package.json.jinja2").write_text('{"name": "other"}\n')
    bundle = TemplateBundle(
        language=Language.TYPESCRIPT,
        files=(TemplateFile("package.json.jinja2", "package.json"),),
        manifest="package.json",
    )
    writer = ProjectWriter(
        tmp_path / "demo", bundle, {"project_name": "demo"}, TemplateRenderer(templates)
    )

    with pytest.raises(WriteError, match="expected 'demo'"):
        writer.write()
