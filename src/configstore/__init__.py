"""Self-migrating configuration store.

Loads versioned configuration records from files under a configuration
root, creating them from defaults on first run and rewriting them when
their schema version is stale.
"""

from configstore.config import (
    ConfigStore,
    ConfigStoreError,
    DecodeError,
    LoggingConfig,
    Versionable,
    VersionedConfig,
    upgrade_to,
)

__all__ = [
    "ConfigStore",
    "ConfigStoreError",
    "DecodeError",
    "LoggingConfig",
    "Versionable",
    "VersionedConfig",
    "upgrade_to",
]
