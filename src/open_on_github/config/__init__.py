"""Configuration for open-on-github."""

from open_on_github.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
