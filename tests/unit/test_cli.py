"""Tests for the command line interface."""

import os
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from open_on_github import app
from open_on_github.cli import cli
from open_on_github.core.exceptions import ConfigurationError
from open_on_github.git.cli_provider import GitCLIProvider
from tests.fakes import RecordingLauncher


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.mark.unit
class TestParseCommand:
    """Tests for the parse command."""

    def test_parse(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse", "git@github.com:acme/widgets.git"])
        assert result.exit_code == 0
        assert "host:  github.com" in result.output
        assert "owner: acme" in result.output
        assert "repo:  widgets" in result.output

    def test_parse_unrecognized(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse", "not a url"])
        assert result.exit_code == 1
        assert "Unsupported or unrecognized remote URL" in result.output


@pytest.mark.unit
class TestOpenCommand:
    """Tests for the open command."""

    def test_open_real_repository(self, runner: CliRunner, git_repo: Path) -> None:
        result = runner.invoke(
            cli, ["open", str(git_repo / "docs" / "read me.md"), "--lines", "2-4", "--print-only"]
        )
        assert result.exit_code == 0, result.output
        assert result.output.strip() == (
            "https://github.com/acme/widgets/blob/main/docs/read%20me.md#L2-L4"
        )

    def test_open_launches_browser(
        self,
        runner: CliRunner,
        git_repo: Path,
        launcher: RecordingLauncher,
    ) -> None:
        app.activate(provider=GitCLIProvider(), launcher=launcher)
        result = runner.invoke(cli, ["open", str(git_repo / "src" / "main.py"), "-L", "3"])
        assert result.exit_code == 0, result.output
        assert launcher.urls == ["https://github.com/acme/widgets/blob/main/src/main.py#L3"]

    def test_open_with_ref(self, runner: CliRunner, git_repo: Path) -> None:
        result = runner.invoke(
            cli, ["open", str(git_repo / "src" / "main.py"), "--ref", "feature/x", "--print-only"]
        )
        assert result.exit_code == 0, result.output
        assert "/blob/feature%2Fx/src/main.py" in result.output

    def test_open_outside_repository(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        plain = tmp_path / "plain"
        plain.mkdir()
        monkeypatch.chdir(plain)
        target = plain / "a.txt"
        target.write_text("hi\n")
        result = runner.invoke(cli, ["open", str(target), "--print-only"])
        assert result.exit_code == 1
        assert "No Git repository found" in result.output

    def test_invalid_line_range(self, runner: CliRunner, git_repo: Path) -> None:
        result = runner.invoke(cli, ["open", str(git_repo / "src" / "main.py"), "-L", "9-5"])
        assert result.exit_code == 2
        assert "not a valid line range" in result.output

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("5", "#L5"), ("5-9", "#L5-L9"), ("L5-L9", "#L5-L9"), ("5:9", "#L5-L9")],
    )
    def test_line_range_formats(
        self, runner: CliRunner, git_repo: Path, value: str, expected: str
    ) -> None:
        result = runner.invoke(
            cli, ["open", str(git_repo / "src" / "main.py"), "-L", value, "--print-only"]
        )
        assert result.exit_code == 0, result.output
        assert result.output.strip().endswith(expected)

    def test_service_released_after_command(self, runner: CliRunner, git_repo: Path) -> None:
        runner.invoke(cli, ["open", str(git_repo / "src" / "main.py"), "--print-only"])
        with pytest.raises(ConfigurationError):
            app.get_service()


@pytest.mark.unit
@pytest.mark.skipif(sys.platform == "win32", reason="POSIX symlinks and byte file names")
class TestOpenCommandPaths:
    """Tests for how the open command treats the given path."""

    def test_symlink_inside_repository_keeps_its_own_path(
        self, runner: CliRunner, git_repo: Path
    ) -> None:
        (git_repo / "alias.py").symlink_to(Path("src") / "main.py")
        result = runner.invoke(cli, ["open", str(git_repo / "alias.py"), "--print-only"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "https://github.com/acme/widgets/blob/main/alias.py"

    def test_symlink_to_file_outside_repository(
        self, runner: CliRunner, git_repo: Path, tmp_path: Path
    ) -> None:
        shared = tmp_path / "shared.md"
        shared.write_text("# Shared\n")
        (git_repo / "shared.md").symlink_to(shared)
        result = runner.invoke(cli, ["open", str(git_repo / "shared.md"), "--print-only"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "https://github.com/acme/widgets/blob/main/shared.md"

    def test_file_name_not_valid_utf8(self, runner: CliRunner, git_repo: Path) -> None:
        name = os.fsdecode(b"bad\xff.txt")
        if name.encode("utf-8", "surrogateescape") != b"bad\xff.txt":
            pytest.skip("filesystem encoding is not UTF-8")
        target = git_repo / name
        target.write_text("bytes\n")
        result = runner.invoke(cli, ["open", str(target), "--print-only"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error: The path is not valid UTF-8" in result.output
