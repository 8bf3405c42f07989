"""Process-wide setup and teardown of the open-file service."""

import structlog

from open_on_github.browser import BrowserLauncher, ClickBrowserLauncher, NullBrowserLauncher
from open_on_github.config.settings import Settings, get_settings
from open_on_github.core.exceptions import ConfigurationError
from open_on_github.git.cli_provider import GitCLIProvider
from open_on_github.git.provider import GitProvider
from open_on_github.services.open_file import OpenFileService

logger = structlog.get_logger(__name__)

_service: OpenFileService | None = None


def activate(
    settings: Settings | None = None,
    provider: GitProvider | None = None,
    launcher: BrowserLauncher | None = None,
) -> OpenFileService:
    """Create the service once per process and return it.

    Calling activate again before deactivate returns the existing service.
    """
    global _service
    if _service is not None:
        return _service

    if settings is None:
        settings = get_settings()
    if provider is None:
        provider = GitCLIProvider(git_executable=settings.git_executable)
    if launcher is None:
        launcher = ClickBrowserLauncher() if settings.open_browser else NullBrowserLauncher()

    _service = OpenFileService(
        provider=provider,
        launcher=launcher,
        preferred_remote=settings.preferred_remote,
    )
    logger.debug("activated", preferred_remote=settings.preferred_remote)
    return _service


def get_service() -> OpenFileService:
    """Return the active service."""
    if _service is None:
        raise ConfigurationError("open-on-github is not activated")
    return _service


def deactivate() -> None:
    """Release the service created by activate."""
    global _service
    if _service is not None:
        logger.debug("deactivated")
    _service = None
