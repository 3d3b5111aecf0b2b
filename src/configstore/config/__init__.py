"""Configuration package.

This package provides versioned configuration records with:
- Version tracking and in-place upgrade support
- JSON and YAML parsing and serialization
- Read-or-create loading from the configuration root
"""

from .exceptions import ConfigStoreError, DecodeError
from .models import LoggingConfig, Versionable, VersionedConfig
from .store import ConfigStore
from .versions import upgrade_to

__all__ = [
    "ConfigStore",
    "ConfigStoreError",
    "DecodeError",
    "LoggingConfig",
    "Versionable",
    "VersionedConfig",
    "upgrade_to",
]
