"""Tests for PathResolver."""

import os
from pathlib import Path

import pytest

from configstore.system.path_resolver import PathResolver


class TestPathResolver:
    """Test PathResolver functionality."""

    def test_explicit_config_dir(self, tmp_path):
        """Should use the directory passed by the host."""
        resolver = PathResolver(config_dir=str(tmp_path))

        assert resolver.get_config_dir() == tmp_path

    def test_config_dir_from_environment(self, mocker, tmp_path):
        """Should read CONFIGSTORE_CONFIG_DIR when no directory is passed."""
        mocker.patch.dict(os.environ, {"CONFIGSTORE_CONFIG_DIR": str(tmp_path / "env")})

        assert PathResolver().get_config_dir() == tmp_path / "env"

    def test_config_dir_default(self, mocker, tmp_path):
        """Should fall back to ~/.config."""
        mocker.patch.dict(os.environ, {}, clear=True)
        mocker.patch("pathlib.Path.home", return_value=tmp_path)

        assert PathResolver().get_config_dir() == tmp_path / ".config"

    def test_get_config_path(self, path_resolver):
        """Should join the file name onto the configuration root."""
        path = path_resolver.get_config_path("mods/settings.json")

        assert path == path_resolver.get_config_dir() / "mods" / "settings.json"

    def test_get_config_path_empty(self, path_resolver):
        """Should reject an empty file name."""
        with pytest.raises(ValueError, match="must not be empty"):
            path_resolver.get_config_path("")

    def test_get_config_path_absolute(self, path_resolver):
        """Should reject an absolute file name."""
        with pytest.raises(ValueError, match="must be relative"):
            path_resolver.get_config_path(str(Path("/etc/settings.json")))
