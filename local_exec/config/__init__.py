"""Module de configuration."""

from local_exec.config.loader import (
    ConfigLoader,
    FileConfigLoader,
)
from local_exec.config.models import (
    LocalExecConfig,
    LoggingConfig,
    PolicyConfig,
)

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "LocalExecConfig",
    "LoggingConfig",
    "PolicyConfig",
]
