"""Interface over the Git integration."""

from abc import ABC, abstractmethod

from open_on_github.core.models.repository import Head, Remote, Repository


class GitProvider(ABC):
    """Read-only view of repositories, their remotes and HEAD.

    The URL logic depends only on this interface; GitCLIProvider is the
    subprocess-backed implementation.
    """

    @abstractmethod
    def list_repositories(self) -> list[Repository]:
        """Repositories known to the provider, in provider order."""
        ...

    @abstractmethod
    def get_repository(self, path: str) -> Repository | None:
        """Repository whose working tree contains path, if any."""
        ...

    @abstractmethod
    def remotes_of(self, repo: Repository) -> list[Remote]:
        """Remotes of repo, in provider order."""
        ...

    @abstractmethod
    def head_of(self, repo: Repository) -> Head:
        """Current HEAD of repo."""
        ...
