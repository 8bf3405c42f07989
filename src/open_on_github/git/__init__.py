"""Git integration module for open-on-github."""

from open_on_github.git.cli_provider import GitCLIProvider
from open_on_github.git.provider import GitProvider
from open_on_github.git.url_resolver import build_file_url, parse_remote, relative_repo_path

__all__ = [
    "GitProvider",
    "GitCLIProvider",
    "parse_remote",
    "build_file_url",
    "relative_repo_path",
]
