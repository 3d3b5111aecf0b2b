"""Configuration schema versions.

Upgrade steps are methods on a configuration class marked with
``@upgrade_to("x.y.z")``; the registry orders them into an upgrade path.
"""

from .registry import MigrationRegistry, upgrade_to

__all__ = ["MigrationRegistry", "upgrade_to"]
