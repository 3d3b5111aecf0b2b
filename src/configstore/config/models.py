"""Configuration models.

This module contains the versioning contract shared by all configuration
records and the Pydantic base model that implements it.
"""

import logging
import re
from typing import Any, ClassVar, Protocol, runtime_checkable

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

from configstore.config.versions.registry import MigrationRegistry, parse_version, upgrade_to

logger = logging.getLogger(__name__)

LEGACY_VERSION = "0.0.0"

_UPPERCASE = re.compile(r"(?<!^)(?=[A-Z])")


def to_lower_underscores(name: str) -> str:
    """Render a field name as lowercase words joined by underscores.

    An underscore goes before every uppercase letter except a leading one;
    digits and existing underscores are left where they are, so ``shader_v2``
    stays ``shader_v2`` and ``maxFps60`` becomes ``max_fps60``.
    """
    return _UPPERCASE.sub("_", name).lower()


@runtime_checkable
class Versionable(Protocol):
    """Protocol for records that can check and upgrade their own schema."""

    def is_up_to_date(self) -> bool:
        """Return True if the record matches the current schema."""
        ...

    def update(self) -> None:
        """Upgrade the record in place to the current schema."""
        ...


class VersionedConfig(BaseModel):
    """Base class for configuration records with a schema version.

    Subclasses set ``schema_version`` and register upgrade steps with
    ``@upgrade_to(...)``. Fields unknown to the schema are kept after decoding
    (see ``model_extra``) so upgrade steps can read renamed fields; whatever
    is left once ``update()`` finishes is dropped.
    """

    model_config = ConfigDict(
        alias_generator=to_lower_underscores,
        populate_by_name=True,
        extra="allow",
    )

    schema_version: ClassVar[str] = "1.0.0"

    config_version: str = LEGACY_VERSION

    @model_validator(mode="before")
    @classmethod
    def stamp_config_version(cls, data: Any, info: ValidationInfo) -> Any:
        # Files written before versioning carry no marker; records built in code are current
        if isinstance(data, dict) and "config_version" not in data:
            decoding = bool(info.context and info.context.get("decoding"))
            data = {**data, "config_version": LEGACY_VERSION if decoding else cls.schema_version}
        return data

    @field_validator("config_version")
    @classmethod
    def validate_config_version(cls, v: str) -> str:
        """Validate the version marker is a parseable version."""
        parse_version(v)
        return v

    def is_up_to_date(self) -> bool:
        """Check whether the record is at the class's schema version."""
        return parse_version(self.config_version) >= parse_version(self.schema_version)

    def update(self) -> None:
        """Apply pending upgrade steps and stamp the current schema version."""
        if not self.is_up_to_date():
            registry = MigrationRegistry(type(self))
            for step in registry.get_upgrade_path(self.config_version, self.schema_version):
                step(self)
            self.config_version = self.schema_version

        if self.model_extra:
            logger.warning(
                "Discarding unexpected config fields (likely from an older schema): %s",
                sorted(self.model_extra),
            )
            self.model_extra.clear()


class LoggingConfig(VersionedConfig):
    """Structlog-based logging configuration."""

    schema_version: ClassVar[str] = "2.0.0"

    level: str = "INFO"
    json_logs: bool | None = None  # None = auto-detect based on environment
    include_caller: bool = False  # Include file:line info (useful for debugging)
    extra_fields: dict[str, str] = Field(default_factory=lambda: {"service": "configstore"})

    @upgrade_to("2.0.0")
    def rename_log_level(self) -> None:
        """Version 1.x stored the level as ``log_level``."""
        extra = self.model_extra or {}
        if "log_level" in extra:
            self.level = str(extra.pop("log_level")).upper()
