"""Application services."""

from open_on_github.services.open_file import OpenFileService

__all__ = ["OpenFileService"]
