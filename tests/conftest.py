"""Pytest configuration and fixtures."""

import subprocess
from pathlib import Path

import pytest

from open_on_github import app
from open_on_github.config.settings import get_settings
from open_on_github.core.models.repository import Head, Remote, Repository
from tests.fakes import RecordingLauncher, StaticGitProvider


@pytest.fixture
def launcher() -> RecordingLauncher:
    return RecordingLauncher()


@pytest.fixture
def provider() -> StaticGitProvider:
    """Single repository at /work/widgets with an origin remote on main."""
    return StaticGitProvider(
        repositories=[Repository(root="/work/widgets")],
        remotes=[Remote(name="origin", fetch_url="git@github.com:acme/widgets.git")],
        head=Head(name="main", commit="0123456789abcdef0123456789abcdef01234567"),
    )


@pytest.fixture(autouse=True)
def _reset_app(monkeypatch: pytest.MonkeyPatch):
    """Keep settings and the activated service from leaking between tests."""
    monkeypatch.setenv("OPEN_ON_GITHUB_OPEN_BROWSER", "false")
    get_settings.cache_clear()
    app.deactivate()
    yield
    app.deactivate()
    get_settings.cache_clear()


def _git(repo_path: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo_path, capture_output=True, check=True)


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a temporary Git repository with one commit and an origin remote."""
    repo_path = tmp_path / "widgets"
    repo_path.mkdir()

    _git(repo_path, "init")
    _git(repo_path, "config", "user.email", "test@test.com")
    _git(repo_path, "config", "user.name", "Test")
    _git(repo_path, "symbolic-ref", "HEAD", "refs/heads/main")

    (repo_path / "src").mkdir()
    (repo_path / "src" / "main.py").write_text("print('hello')\n")
    (repo_path / "docs").mkdir()
    (repo_path / "docs" / "read me.md").write_text("# Widgets\n")

    _git(repo_path, "add", ".")
    _git(repo_path, "commit", "-m", "Initial commit")
    _git(repo_path, "remote", "add", "origin", "git@github.com:acme/widgets.git")

    return repo_path.resolve()
