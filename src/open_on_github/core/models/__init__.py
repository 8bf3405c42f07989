"""Domain models for open-on-github."""

from open_on_github.core.models.remote import FileReference, LineRange, RemoteDescriptor
from open_on_github.core.models.repository import Head, Remote, Repository

__all__ = [
    "RemoteDescriptor",
    "FileReference",
    "LineRange",
    "Repository",
    "Remote",
    "Head",
]
