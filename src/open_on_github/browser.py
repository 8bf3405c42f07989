"""Launching URLs in the platform browser."""

from abc import ABC, abstractmethod

import click
import structlog

logger = structlog.get_logger(__name__)


class BrowserLauncher(ABC):
    """Opens URLs with the platform default handler."""

    @abstractmethod
    def launch(self, url: str) -> None:
        ...


class ClickBrowserLauncher(BrowserLauncher):
    """Opens URLs in the system browser using click.launch."""

    def launch(self, url: str) -> None:
        logger.debug("launching_browser", url=url)
        click.launch(url)


class NullBrowserLauncher(BrowserLauncher):
    """Does not open anything; used when only the URL is wanted."""

    def launch(self, url: str) -> None:
        logger.debug("browser_launch_skipped", url=url)
