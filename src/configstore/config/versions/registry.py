"""Registry for configuration upgrade steps."""

from collections.abc import Callable
from typing import Any

from packaging.version import InvalidVersion, Version

UPGRADE_MARKER = "__upgrade_to__"


def parse_version(version_string: str) -> Version:
    """Parse a schema version string.

    Raises:
        ValueError: If the string is not a valid version
    """
    try:
        return Version(version_string)
    except InvalidVersion as e:
        raise ValueError(f"Invalid config version: {version_string!r}") from e


def upgrade_to(version: str) -> Callable[[Callable], Callable]:
    """Mark a method as the step that upgrades a record to ``version``.

    The decorated method mutates the record in place. It runs for any record
    older than ``version`` when the class's schema version is ``version`` or
    later, after every step targeting an earlier version.

    Args:
        version: Version string the step produces (e.g., "2.0.0")
    """
    parse_version(version)

    def decorator(func: Callable) -> Callable:
        setattr(func, UPGRADE_MARKER, version)
        return func

    return decorator


class MigrationRegistry:
    """Collects the upgrade steps of a configuration class and orders them."""

    def __init__(self, config_class: type):
        """Initialize the registry.

        Args:
            config_class: Class whose ``@upgrade_to`` methods are collected
        """
        self.config_class = config_class
        self._steps: dict[Version, Callable[[Any], None]] = {}
        self._load_steps()

    def _load_steps(self) -> None:
        """Collect marked methods, letting subclasses override inherited steps."""
        for klass in reversed(self.config_class.__mro__):
            seen: set[Version] = set()
            for attr in vars(klass).values():
                target = getattr(attr, UPGRADE_MARKER, None)
                if target is None:
                    continue
                version = parse_version(target)
                if version in seen:
                    raise ValueError(f"Duplicate upgrade step to {target} on {klass.__name__}")
                seen.add(version)
                self._steps[version] = attr

    @property
    def versions(self) -> list[str]:
        """Target versions of all registered steps, oldest first."""
        return [str(version) for version in sorted(self._steps)]

    def get_upgrade_path(
        self, from_version: str, to_version: str
    ) -> list[Callable[[Any], None]]:
        """Get the upgrade steps between two versions.

        Args:
            from_version: Version the record is currently at
            to_version: Target version

        Returns:
            list: Unbound step functions to apply in order, each taking the record
        """
        start = parse_version(from_version)
        end = parse_version(to_version)

        return [self._steps[version] for version in sorted(self._steps) if start < version <= end]
