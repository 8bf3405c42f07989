"""Core domain models and exceptions for open-on-github."""

from open_on_github.core.exceptions import (
    ConfigurationError,
    GitIntegrationError,
    MissingRefError,
    OpenOnGithubError,
    PathOutsideRepositoryError,
    RemoteNotFoundError,
    RepositoryNotFoundError,
    UnencodablePathError,
    UnrecognizedRemoteFormatError,
)
from open_on_github.core.models import (
    FileReference,
    Head,
    LineRange,
    Remote,
    RemoteDescriptor,
    Repository,
)

__all__ = [
    # Models
    "RemoteDescriptor",
    "FileReference",
    "LineRange",
    "Repository",
    "Remote",
    "Head",
    # Exceptions
    "OpenOnGithubError",
    "ConfigurationError",
    "GitIntegrationError",
    "RepositoryNotFoundError",
    "RemoteNotFoundError",
    "UnrecognizedRemoteFormatError",
    "MissingRefError",
    "PathOutsideRepositoryError",
    "UnencodablePathError",
]
