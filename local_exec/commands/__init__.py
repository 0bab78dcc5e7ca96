"""Module d'exécution de commandes externes.

Ce module fournit des classes pour construire des lignes de commande
shell et les exécuter via plusieurs mécanismes, avec repli sur le
suivant lorsqu'un mécanisme est indisponible.

Classes disponibles :
    ExecutionOptions : Options de construction d'une commande.
    ExecutionStrategy : Stratégies d'exécution (par priorité).
    CommandExecutor : Interface abstraite pour les exécuteurs.
    CommandBuilder : Construction de lignes de commande échappées.
    ExecutionPolicy : Liste noire des mécanismes d'exécution.
    LocalExecutor : Exécuteur multi-stratégies.
    StrategyAdapter : Interface des adaptateurs par stratégie.
    CommandFormatter : Interface abstraite de formatage.
    PlainCommandFormatter : Formatage texte brut (logs fichier).
"""

from local_exec.commands.base import (
    CommandExecutor,
    ExecutionOptions,
    ExecutionStrategy,
)
from local_exec.commands.builder import (
    CommandBuilder,
    escape_shell_arg,
    escape_shell_cmd,
)
from local_exec.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
)
from local_exec.commands.policy import (
    ExecutionPolicy,
    default_policy,
)
from local_exec.commands.strategies import (
    DirectExecAdapter,
    PipeReadAdapter,
    ShellExecAdapter,
    ShellPassthruAdapter,
    StrategyAdapter,
    SubprocessPipesAdapter,
    SystemCallAdapter,
)
from local_exec.commands.runner import LocalExecutor

__all__ = [
    # Structures de données
    "ExecutionOptions",
    "ExecutionStrategy",
    # Interface abstraite
    "CommandExecutor",
    # Constructeur
    "CommandBuilder",
    "escape_shell_arg",
    "escape_shell_cmd",
    # Formateurs
    "CommandFormatter",
    "PlainCommandFormatter",
    # Politique
    "ExecutionPolicy",
    "default_policy",
    # Adaptateurs
    "StrategyAdapter",
    "DirectExecAdapter",
    "ShellExecAdapter",
    "ShellPassthruAdapter",
    "PipeReadAdapter",
    "SubprocessPipesAdapter",
    "SystemCallAdapter",
    # Implémentation locale
    "LocalExecutor",
]
