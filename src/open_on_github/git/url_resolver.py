"""Remote URL parsing and web URL construction.

Turns a Git remote URL plus a repository-relative path into a browsable link:

- git@github.com:org/repo.git -> RemoteDescriptor(github.com, org, repo)
- https://github.com/org/repo -> RemoteDescriptor(github.com, org, repo)
- RemoteDescriptor + FileReference -> https://github.com/org/repo/blob/main/docs/a.md#L3
"""

import os
import re
from pathlib import PurePath
from urllib.parse import quote, urlsplit

import structlog

from open_on_github.core.exceptions import PathOutsideRepositoryError
from open_on_github.core.models.remote import FileReference, LineRange, RemoteDescriptor

logger = structlog.get_logger(__name__)

# user@host:owner/rest, only considered when there is no scheme
_SCP_LIKE = re.compile(r"^[^@]+@([^:@/]+):([^/]+)/(.+)$")
_HAS_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")
_SUPPORTED_SCHEMES = frozenset({"http", "https", "ssh"})

# Characters encodeURIComponent leaves alone on top of quote()'s always-safe set
_SEGMENT_SAFE = "!*'()"


def parse_remote(remote_url: str) -> RemoteDescriptor | None:
    """Parse a Git remote URL into host, owner and repository name.

    Returns None for any shape that cannot be resolved; never raises.
    """
    try:
        descriptor = _parse(remote_url.strip())
    except (ValueError, TypeError, AttributeError):
        descriptor = None

    if descriptor is None:
        logger.debug("remote_url_unrecognized", remote_url=remote_url)
    return descriptor


def _parse(url: str) -> RemoteDescriptor | None:
    if not _HAS_SCHEME.match(url):
        match = _SCP_LIKE.match(url)
        if not match:
            return None
        host, owner, rest = match.groups()
        return _descriptor(host, owner, rest)

    parts = urlsplit(re.sub(r"^git\+", "", url))
    if parts.scheme.lower() not in _SUPPORTED_SCHEMES:
        return None

    segments = parts.path.lstrip("/").split("/")
    if len(segments) < 2:
        return None
    # Only the first two segments count, /org/repo/tree/main is still org/repo
    return _descriptor(parts.hostname or "", segments[0], segments[1])


def _descriptor(host: str, owner: str, repo: str) -> RemoteDescriptor | None:
    repo = strip_git_suffix(repo)
    if not host or not owner or not repo:
        return None
    if "@" in host or ":" in host:
        return None
    return RemoteDescriptor(host=host, owner=owner, repo=repo)


def strip_git_suffix(name: str) -> str:
    """Remove a literal trailing ".git" (case-sensitive)."""
    return name[:-4] if name.endswith(".git") else name


def encode_segment(value: str) -> str:
    """Percent-encode a value as a single URL path segment.

    "/" is escaped, so a branch like feature/x becomes feature%2Fx. Names
    that are not valid UTF-8 on disk arrive surrogate-escaped and are
    encoded back to their original bytes.
    """
    return quote(value.encode("utf-8", "surrogateescape"), safe=_SEGMENT_SAFE)


def encode_path(path: str) -> str:
    """Normalize separators to "/" and percent-encode each segment."""
    posix = path.replace(os.sep, "/")
    if os.altsep:
        posix = posix.replace(os.altsep, "/")
    return "/".join(encode_segment(segment) for segment in posix.split("/"))


def format_line_anchor(line_range: LineRange | None) -> str:
    """Format a line range as a #L fragment ("" when there is no range)."""
    if line_range is None:
        return ""
    if line_range.is_single_line:
        return f"#L{line_range.start_line}"
    return f"#L{line_range.start_line}-L{line_range.end_line}"


def build_file_url(descriptor: RemoteDescriptor, file_ref: FileReference) -> str:
    """Build the web URL of a file at a ref, with an optional line anchor."""
    base = f"https://{descriptor.host}/{descriptor.owner}/{descriptor.repo}"
    url = (
        f"{base}/blob/{encode_segment(file_ref.ref)}"
        f"/{encode_path(file_ref.repo_relative_path)}"
    )
    return url + format_line_anchor(file_ref.line_range)


def relative_repo_path(repo_root: str, file_path: str) -> str:
    """Return file_path relative to repo_root, POSIX-separated.

    Raises PathOutsideRepositoryError when the file is the root itself or
    lies outside of it.
    """
    try:
        relative = os.path.relpath(file_path, repo_root)
    except ValueError as e:
        # Windows: paths on different drives
        raise PathOutsideRepositoryError(
            f"File is not inside the repository root: {file_path}",
            details={"repo_root": repo_root, "file_path": file_path},
        ) from e

    if relative in ("", os.curdir) or relative.split(os.sep)[0] == os.pardir:
        raise PathOutsideRepositoryError(
            f"File is not inside the repository root: {file_path}",
            details={"repo_root": repo_root, "file_path": file_path},
        )

    return PurePath(relative).as_posix()
