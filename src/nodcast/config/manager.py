"""Configuration manager for loading and saving Nodcast config."""

import logging
from pathlib import Path

import platformdirs
import yaml

from nodcast.config.schema import SiteConfig
from nodcast.utils.errors import InvalidConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "nodcast.yaml"


def get_user_config_file() -> Path:
    """Get the per-user config file location."""
    return Path(platformdirs.user_config_dir("nodcast")) / CONFIG_FILENAME


class ConfigManager:
    """Manages the Nodcast configuration file."""

    def __init__(self, config_file: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_file: Optional explicit config file. When omitted, uses
                ./nodcast.yaml if present, otherwise the user config dir.
        """
        if config_file is None:
            local_file = Path.cwd() / CONFIG_FILENAME
            config_file = local_file if local_file.exists() else get_user_config_file()

        self.config_file = config_file

    def load_config(self) -> SiteConfig:
        """Load and validate site configuration.

        Returns:
            Validated SiteConfig instance (defaults if the file doesn't exist)

        Raises:
            InvalidConfigError: If config is invalid
        """
        if not self.config_file.exists():
            logger.debug("No config file at %s, using defaults", self.config_file)
            return SiteConfig()

        try:
            with open(self.config_file) as f:
                data = yaml.safe_load(f) or {}
            return SiteConfig(**data)
        except Exception as e:
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: {e}"
            ) from e

    def save_config(self, config: SiteConfig) -> None:
        """Save site configuration.

        Args:
            config: SiteConfig instance to save
        """
        data = config.model_dump(mode="json")

        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
