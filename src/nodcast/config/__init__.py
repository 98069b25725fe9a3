"""Configuration management for Nodcast."""

from nodcast.config.manager import ConfigManager
from nodcast.config.schema import SiteConfig

__all__ = ["ConfigManager", "SiteConfig"]
