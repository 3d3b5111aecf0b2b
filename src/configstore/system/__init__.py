"""System domain package.

This package contains host-environment components:
- PathResolver: Configuration root and file path resolution
- StructlogConfigurator: Structured logging configuration
"""

from configstore.system import structlog_configurator
from configstore.system.path_resolver import PathResolver

__all__ = [
    "PathResolver",
    "structlog_configurator",
]
