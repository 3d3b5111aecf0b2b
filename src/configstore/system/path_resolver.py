import os
from pathlib import Path


class PathResolver:
    """Central authority for configuration file path resolution.

    The configuration root is supplied by the host environment, either
    explicitly or through the CONFIGSTORE_CONFIG_DIR environment variable.
    """

    def __init__(self, config_dir: Path | str | None = None) -> None:
        """Initialize PathResolver.

        Args:
            config_dir: Configuration root. If None, reads CONFIGSTORE_CONFIG_DIR
                and falls back to ~/.config.
        """
        if config_dir is None:
            config_dir = os.getenv("CONFIGSTORE_CONFIG_DIR") or Path.home() / ".config"
        self.config_dir = Path(config_dir)

    def get_config_dir(self) -> Path:
        """Get the configuration root directory."""
        return self.config_dir

    def get_config_path(self, file_name: str) -> Path:
        """Get the path to a configuration file under the configuration root.

        Args:
            file_name: Relative file name (e.g., 'logging.json' or 'mod/settings.yaml')

        Raises:
            ValueError: If file_name is empty or absolute
        """
        if not file_name:
            raise ValueError("Config file name must not be empty")
        if Path(file_name).is_absolute():
            raise ValueError(f"Config file name must be relative, got {file_name!r}")
        return self.get_config_dir() / file_name
