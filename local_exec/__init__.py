"""
Local Exec - Exécution de commandes externes sur la machine locale.

Modules disponibles:
- commands: Construction et exécution de commandes (CommandBuilder,
  LocalExecutor, ExecutionPolicy, adaptateurs par stratégie)
- logging: Gestion des logs (Logger, FileLogger)
- config: Chargement de configuration (TOML, JSON, modèles Pydantic)
- errors: Exceptions (ExecutionError...) et handlers d'erreurs
- cli: Interface en ligne de commande local-exec
"""

__version__ = "1.0.0"

from local_exec.logging import Logger, FileLogger
from local_exec.config import (
    ConfigLoader,
    FileConfigLoader,
    LocalExecConfig,
)
from local_exec.errors import (
    ApplicationError,
    ConfigurationError,
    ExecutionError,
    InvalidArgumentError,
)
from local_exec.commands import (
    CommandBuilder,
    CommandExecutor,
    ExecutionOptions,
    ExecutionPolicy,
    ExecutionStrategy,
    LocalExecutor,
    default_policy,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "LocalExecConfig",
    # Erreurs
    "ApplicationError",
    "ConfigurationError",
    "ExecutionError",
    "InvalidArgumentError",
    # Commandes
    "CommandBuilder",
    "CommandExecutor",
    "ExecutionOptions",
    "ExecutionPolicy",
    "ExecutionStrategy",
    "LocalExecutor",
    "default_policy",
]
