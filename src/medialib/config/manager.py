"""Configuration manager for loading and saving medialib config."""

from pathlib import Path

import yaml

from medialib.config.schema import LibraryConfig
from medialib.utils.errors import ConfigNotFoundError, InvalidConfigError

DEFAULT_CONFIG_FILE = Path("~/.config/medialib/config.yaml")


class ConfigManager:
    """Manages the medialib configuration file."""

    def __init__(self, config_file: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_file: Optional custom config file. Defaults to
                ~/.config/medialib/config.yaml.
        """
        self.config_file = (config_file or DEFAULT_CONFIG_FILE).expanduser()

    def load_config(self, required: bool = False) -> LibraryConfig:
        """Load and validate configuration.

        Args:
            required: Raise instead of falling back to defaults when the
                file is missing.

        Returns:
            Validated LibraryConfig instance

        Raises:
            ConfigNotFoundError: If required and the config file doesn't exist
            InvalidConfigError: If config is invalid
        """
        if not self.config_file.exists():
            if required:
                raise ConfigNotFoundError(f"Config file not found: {self.config_file}")
            return LibraryConfig()

        try:
            with open(self.config_file) as f:
                data = yaml.safe_load(f) or {}
            return LibraryConfig(**data)
        except Exception as e:
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: {e}"
            ) from e

    def save_config(self, config: LibraryConfig) -> None:
        """Save configuration.

        Args:
            config: LibraryConfig instance to save
        """
        data = config.model_dump(mode="json")

        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
