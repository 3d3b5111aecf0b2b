"""Exceptions raised by the configuration store."""

from pathlib import Path


class ConfigStoreError(Exception):
    """Base class for configuration store errors."""


class DecodeError(ConfigStoreError, ValueError):
    """Raised when file content cannot be decoded into a configuration record."""

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        if path is not None:
            message = f"invalid config {path}: {message}"
        super().__init__(message)
