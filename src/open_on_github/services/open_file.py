"""Service that resolves and opens the web URL of a local file."""

from pathlib import Path

import structlog

from open_on_github.browser import BrowserLauncher
from open_on_github.core.exceptions import (
    MissingRefError,
    RemoteNotFoundError,
    RepositoryNotFoundError,
    UnencodablePathError,
    UnrecognizedRemoteFormatError,
)
from open_on_github.core.models.remote import FileReference, LineRange, RemoteDescriptor
from open_on_github.core.models.repository import Remote, Repository
from open_on_github.git.provider import GitProvider
from open_on_github.git.url_resolver import build_file_url, parse_remote, relative_repo_path

logger = structlog.get_logger(__name__)


class OpenFileService:
    """Turns a file path into its web URL and hands it to the browser.

    Coordinates the Git provider (repository, remotes, HEAD) with the
    pure URL functions in open_on_github.git.url_resolver.
    """

    def __init__(
        self,
        provider: GitProvider,
        launcher: BrowserLauncher,
        preferred_remote: str = "origin",
    ) -> None:
        self._provider = provider
        self._launcher = launcher
        self._preferred_remote = preferred_remote

    def resolve_url(
        self,
        file_path: str,
        line_range: LineRange | None = None,
        ref: str | None = None,
        remote_name: str | None = None,
    ) -> str:
        """Resolve the web URL for file_path.

        Raises an OpenOnGithubError subclass when any step cannot proceed.
        """
        absolute_path = self._absolute_path(file_path)

        repo = self._find_repository(absolute_path)
        remote = self._select_remote(repo, remote_name or self._preferred_remote)
        descriptor = self._parse_remote(remote)
        resolved_ref = ref or self._current_ref(repo)
        relative_path = relative_repo_path(repo.root, absolute_path)
        self._check_utf8("path", relative_path)
        self._check_utf8("ref", resolved_ref)

        url = build_file_url(
            descriptor,
            FileReference(
                repo_relative_path=relative_path,
                ref=resolved_ref,
                line_range=line_range,
            ),
        )
        logger.debug(
            "url_resolved",
            repo_root=repo.root,
            remote=remote.name,
            ref=resolved_ref,
            path=relative_path,
            url=url,
        )
        return url

    def open_file(
        self,
        file_path: str,
        line_range: LineRange | None = None,
        ref: str | None = None,
        remote_name: str | None = None,
    ) -> str:
        """Resolve the web URL for file_path and open it. Returns the URL."""
        url = self.resolve_url(file_path, line_range=line_range, ref=ref, remote_name=remote_name)
        self._launcher.launch(url)
        return url

    @staticmethod
    def _absolute_path(file_path: str) -> str:
        """Absolute path with symlinked parents resolved.

        The final component is kept as given, so a symlinked file maps to
        its own path in the repository rather than to its target.
        """
        path = Path(file_path).expanduser().absolute()
        return str(path.parent.resolve() / path.name)

    @staticmethod
    def _check_utf8(kind: str, value: str) -> None:
        """Reject names that were not valid UTF-8 on disk or on the command line."""
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise UnencodablePathError(
                f"The {kind} is not valid UTF-8: {ascii(value)}",
                details={kind: ascii(value)},
            ) from e

    def _find_repository(self, file_path: str) -> Repository:
        repo = self._provider.get_repository(file_path)
        if repo is None:
            repositories = self._provider.list_repositories()
            if len(repositories) == 1:
                repo = repositories[0]
        if repo is None:
            raise RepositoryNotFoundError(
                f"No Git repository found for this file: {file_path}",
                details={"file_path": file_path},
            )
        return repo

    def _select_remote(self, repo: Repository, preferred: str) -> Remote:
        """Pick the preferred remote, else the first one the provider lists."""
        remotes = self._provider.remotes_of(repo)
        remote = next((r for r in remotes if r.name == preferred), None)
        if remote is None and remotes:
            remote = remotes[0]

        if remote is None or not remote.fetch_url:
            raise RemoteNotFoundError(
                f"No Git remote URL found (e.g., {preferred}).",
                details={"repo_root": repo.root},
            )
        logger.debug("remote_selected", name=remote.name, fetch_url=remote.fetch_url)
        return remote

    @staticmethod
    def _parse_remote(remote: Remote) -> RemoteDescriptor:
        descriptor = parse_remote(remote.fetch_url or "")
        if descriptor is None:
            raise UnrecognizedRemoteFormatError(
                f"Unsupported or unrecognized remote URL: {remote.fetch_url}",
                details={"remote": remote.name, "fetch_url": remote.fetch_url},
            )
        return descriptor

    def _current_ref(self, repo: Repository) -> str:
        """Branch name when on a branch, else the commit id."""
        head = self._provider.head_of(repo)
        ref = head.name or head.commit
        if head.is_detached:
            logger.debug("head_detached", commit=head.commit, repo_root=repo.root)
        if not ref:
            raise MissingRefError(
                "Could not determine current branch or commit.",
                details={"repo_root": repo.root},
            )
        return ref
