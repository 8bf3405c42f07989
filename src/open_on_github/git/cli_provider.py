"""Git provider backed by the git CLI."""

import subprocess
from pathlib import Path

import structlog

from open_on_github.core.exceptions import GitIntegrationError
from open_on_github.core.models.repository import Head, Remote, Repository
from open_on_github.git.provider import GitProvider

logger = structlog.get_logger(__name__)


class GitCLIProvider(GitProvider):
    """Answers repository queries by running git in a subprocess.

    Uses subprocess + git CLI directly (no gitpython dependency).
    """

    def __init__(
        self,
        search_paths: list[str] | None = None,
        git_executable: str = "git",
    ) -> None:
        self._search_paths = search_paths if search_paths is not None else ["."]
        self._git = git_executable

    def _run_git(self, cwd: str | Path, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                [self._git, *args],
                cwd=cwd,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise GitIntegrationError(
                f"Git executable not found: {self._git}",
                details={"git_executable": self._git},
            ) from e
        return result.stdout.strip()

    def list_repositories(self) -> list[Repository]:
        repositories: list[Repository] = []
        for path in self._search_paths:
            repo = self.get_repository(path)
            if repo is not None and repo not in repositories:
                repositories.append(repo)
        return repositories

    def get_repository(self, path: str) -> Repository | None:
        directory = self._nearest_directory(Path(path))
        if directory is None:
            return None
        try:
            root = self._run_git(directory, "rev-parse", "--show-toplevel")
        except subprocess.CalledProcessError:
            logger.debug("not_a_git_repository", path=str(path))
            return None
        if not root:
            # Inside .git itself there is no working tree
            return None
        return Repository(root=str(Path(root).resolve()))

    def remotes_of(self, repo: Repository) -> list[Remote]:
        try:
            names = self._run_git(repo.root, "remote").splitlines()
            verbose = self._run_git(repo.root, "remote", "-v").splitlines()
        except subprocess.CalledProcessError:
            logger.warning("git remote failed", repo_root=repo.root)
            return []

        fetch_urls: dict[str, str] = {}
        for line in verbose:
            # origin\tgit@github.com:org/repo.git (fetch)
            name, _, rest = line.partition("\t")
            url, _, kind = rest.rpartition(" ")
            if kind == "(fetch)":
                fetch_urls[name] = url

        return [
            Remote(name=name, fetch_url=fetch_urls.get(name))
            for name in names
            if name
        ]

    def head_of(self, repo: Repository) -> Head:
        try:
            branch = self._run_git(repo.root, "symbolic-ref", "--short", "-q", "HEAD")
        except subprocess.CalledProcessError:
            # Detached HEAD
            branch = ""

        try:
            commit = self._run_git(repo.root, "rev-parse", "--verify", "-q", "HEAD")
        except subprocess.CalledProcessError:
            # No commits yet
            commit = ""

        return Head(name=branch or None, commit=commit or None)

    @staticmethod
    def _nearest_directory(path: Path) -> Path | None:
        """Closest existing directory at or above path.

        Symlinks are not followed for path itself, so a link inside a
        repository is looked up from the directory that holds it.
        """
        path = path.expanduser().absolute()
        for candidate in (path, *path.parents):
            if candidate.is_dir() and not candidate.is_symlink():
                return candidate.resolve()
        return None
