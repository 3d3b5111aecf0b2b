from pathlib import Path
from typing import ClassVar

import pytest
from pydantic import Field

from configstore.config import VersionedConfig, upgrade_to
from configstore.system.path_resolver import PathResolver


class SampleConfig(VersionedConfig):
    """Configuration record used across the config tests.

    Version 1.x stored ``view_distance`` and a single ``shader`` name; 2.0.0
    renamed the former to ``render_distance`` and turned the latter into
    ``enabled_shaders``.
    """

    schema_version: ClassVar[str] = "2.0.0"

    render_distance: int = 12
    enabled_shaders: list[str] = Field(default_factory=list)
    shaders: bool = True
    display_name: str = "Default"

    @upgrade_to("2.0.0")
    def rename_view_distance(self) -> None:
        """Move 1.x fields to their 2.0.0 names."""
        extra = self.model_extra or {}
        if "view_distance" in extra:
            self.render_distance = int(extra.pop("view_distance"))
        if "shader" in extra:
            shader = extra.pop("shader")
            self.enabled_shaders = [shader] if shader else []


@pytest.fixture
def sample_config_class() -> type[SampleConfig]:
    """Provide the sample versioned configuration class."""
    return SampleConfig


@pytest.fixture
def path_resolver(tmp_path: Path) -> PathResolver:
    """Provide a PathResolver rooted in a temporary configuration directory.

    The directory exists, as it would when supplied by a host application.
    """
    config_dir = tmp_path / "config"
    config_dir.mkdir(parents=True)
    return PathResolver(config_dir=config_dir)
