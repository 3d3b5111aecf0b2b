"""Configuration loading with version support."""

import logging
from collections.abc import Callable
from typing import TypeVar

from configstore.config.codecs import Codec, codec_for_path
from configstore.config.exceptions import DecodeError
from configstore.config.models import VersionedConfig
from configstore.system.path_resolver import PathResolver

logger = logging.getLogger(__name__)

ConfigT = TypeVar("ConfigT", bound=VersionedConfig)


class ConfigStore:
    """Loads versioned configuration records, creating and upgrading their files."""

    def __init__(self, path_resolver: PathResolver | None = None, codec: Codec | None = None):
        """Initialize ConfigStore.

        Args:
            path_resolver: Optional PathResolver instance. If None, creates a new one.
            codec: Optional codec used for every file. If None, picked by file suffix.
        """
        self.path_resolver = path_resolver or PathResolver()
        self.codec = codec

    def load(
        self,
        file_name: str,
        config_class: type[ConfigT],
        default_values: Callable[[], ConfigT],
    ) -> ConfigT:
        """Load a configuration record from a file in the configuration root.

        On first run the file is created and filled from ``default_values``.
        An existing file that is stale is upgraded in place and rewritten.

        Args:
            file_name: File name relative to the configuration root
            config_class: Record type to decode the file into
            default_values: Factory for a record with default values

        Returns:
            The loaded record, up to date with its schema

        Raises:
            DecodeError: If an existing file cannot be decoded into config_class
            OSError: If the file cannot be created, read or written
        """
        config_path = self.path_resolver.get_config_path(file_name)
        codec = self.codec or codec_for_path(config_path)

        if config_path.exists():
            try:
                with open(config_path, encoding="utf-8") as f:
                    text = f.read()
            except UnicodeDecodeError as e:
                raise DecodeError(f"not valid UTF-8: {e}", path=config_path) from e
            try:
                config = codec.decode(text, config_class)
            except DecodeError as e:
                raise DecodeError(str(e), path=config_path) from e
            needs_rewrite = not config.is_up_to_date()
        else:
            # First run: the parent directory belongs to the host and is not created here
            config_path.touch(exist_ok=False)
            logger.debug("Created config file %s", config_path)
            config = default_values()
            needs_rewrite = True

        if needs_rewrite:
            from_version = config.config_version
            config.update()
            text = codec.encode(config)
            with open(config_path, "w", encoding="utf-8") as f:
                f.write(text)
            logger.debug(
                "Wrote config %s (version %s -> %s)",
                config_path,
                from_version,
                config.config_version,
            )

        return config
