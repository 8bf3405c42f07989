"""Exception hierarchy for open-on-github."""


class OpenOnGithubError(Exception):
    """Base exception for all open-on-github errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(OpenOnGithubError):
    """Raised when the application is not configured or wired correctly."""


class GitIntegrationError(OpenOnGithubError):
    """Raised when the Git integration itself is unavailable."""


class RepositoryNotFoundError(OpenOnGithubError):
    """Raised when no repository contains the requested file."""


class RemoteNotFoundError(OpenOnGithubError):
    """Raised when the repository has no remote with a fetch URL."""


class UnrecognizedRemoteFormatError(OpenOnGithubError):
    """Raised when a remote URL cannot be parsed into host/owner/repo."""


class MissingRefError(OpenOnGithubError):
    """Raised when neither a branch name nor a commit id is available."""


class PathOutsideRepositoryError(OpenOnGithubError):
    """Raised when a file does not live inside the repository root."""


class UnencodablePathError(OpenOnGithubError):
    """Raised when a path or ref cannot be represented as UTF-8 text."""
