"""Shared fixtures: temporary git work trees and a fake ansible-playbook."""

from __future__ import annotations

import json
import logging
import subprocess
import sys
from pathlib import Path

import pytest

from launcher.settings import _SETTINGS_KEYS


def _git(path: Path, *args: str) -> str:
    result = subprocess.run(
        [
            "git",
            "-c", "user.email=test@launcher.dev",
            "-c", "user.name=Launcher Test",
            "-c", "commit.gpgsign=false",
            *args,
        ],
        cwd=path,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


def init_deploy_repo(path: Path) -> str:
    """Create a launcher checkout at *path* and return its HEAD hash."""
    deploy = path / "deploy"
    deploy.mkdir(parents=True, exist_ok=True)
    (deploy / "site.yml").write_text("- hosts: all\n  tasks: []\n")
    (deploy / "hosts").write_text("[bench]\nlocalhost ansible_connection=local\n")
    (path / "deploy.py").write_text("# launcher\n")
    _git(path, "init")
    _git(path, "add", ".")
    _git(path, "commit", "-m", "init")
    return _git(path, "rev-parse", "HEAD").strip()


_FAKE_TOOL = """\
#!{python}
import json
import os
import sys

with open({log!r}, "w") as fh:
    json.dump(sys.argv[1:], fh)
sys.exit(int(os.environ.get("FAKE_TOOL_EXIT", "0")))
"""


class FakeTool:
    """An executable that records its arguments and exits with FAKE_TOOL_EXIT."""

    def __init__(self, path: Path, log: Path) -> None:
        self.path = path
        self.log = log

    @property
    def called(self) -> bool:
        return self.log.is_file()

    def argv(self) -> list[str]:
        return json.loads(self.log.read_text())


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep LAUNCHER_* settings and enclosing git repos out of the tests."""
    for key in _SETTINGS_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("FAKE_TOOL_EXIT", raising=False)
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
    root_level = logging.getLogger().level
    yield
    logging.getLogger().setLevel(root_level)


@pytest.fixture
def deploy_repo(tmp_path) -> tuple[Path, str]:
    repo = tmp_path / "checkout"
    sha = init_deploy_repo(repo)
    return repo, sha


@pytest.fixture
def caller_repo(tmp_path) -> tuple[Path, str]:
    """A second work tree, unrelated to the launcher checkout."""
    repo = tmp_path / "caller"
    repo.mkdir()
    (repo / "README").write_text("caller checkout\n")
    _git(repo, "init")
    _git(repo, "add", ".")
    _git(repo, "commit", "-m", "caller")
    return repo, _git(repo, "rev-parse", "HEAD").strip()


@pytest.fixture
def fake_tool(tmp_path) -> FakeTool:
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    log = tmp_path / "tool-argv.json"
    tool = bin_dir / "ansible-playbook"
    tool.write_text(_FAKE_TOOL.format(python=sys.executable, log=str(log)))
    tool.chmod(0o755)
    return FakeTool(tool, log)
