"""Interfaces abstraites et structures de données pour l'exécution
de commandes système.

Ce module définit :
    - ExecutionOptions : Options immuables de construction d'une commande.
    - ExecutionStrategy : Stratégies d'exécution, par ordre de priorité.
    - CommandExecutor : Interface abstraite pour les exécuteurs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Mapping, Optional, Sequence, Union


@dataclass(frozen=True)
class ExecutionOptions:
    """Options de construction d'une commande.

    Attributes:
        escape_arguments: Échapper chaque argument pour le shell
            (défaut: True). À False, les arguments sont transmis
            tels quels, ce qui permet d'injecter volontairement des
            opérateurs shell (redirections, pipes...).
    """

    escape_arguments: bool = True

    @classmethod
    def from_mapping(
        cls, options: Optional[Mapping[str, Any]]
    ) -> "ExecutionOptions":
        """Crée les options depuis un dictionnaire.

        La clé courte "escape" est acceptée comme alias de
        "escape_arguments".

        Args:
            options: Dictionnaire d'options ou None.

        Returns:
            Instance d'ExecutionOptions.
        """
        if not options:
            return cls()
        escape = options.get(
            "escape_arguments", options.get("escape", True)
        )
        return cls(escape_arguments=bool(escape))


class ExecutionStrategy(StrEnum):
    """Stratégies d'exécution, déclarées par ordre de priorité."""

    DIRECT_EXEC = "direct_exec"
    SHELL_EXEC = "shell_exec"
    SHELL_PASSTHRU = "shell_passthru"
    PIPE_READ = "pipe_read"
    SUBPROCESS_PIPES = "subprocess_pipes"
    SYSTEM_CALL = "system_call"


# Arguments acceptés par les exécuteurs : None est ignoré.
Arguments = Optional[Sequence[Optional[Any]]]

# Options acceptées : instance, dictionnaire équivalent ou None.
Options = Union[ExecutionOptions, Mapping[str, Any], None]


class CommandExecutor(ABC):
    """Interface abstraite pour l'exécution de commandes externes."""

    @abstractmethod
    def run(
        self,
        program: str,
        args: Arguments = None,
        options: Options = None,
    ) -> str:
        """Exécute une commande externe et retourne sa sortie.

        Args:
            program: Programme à exécuter.
            args: Arguments (les valeurs None sont ignorées).
            options: Options de construction de la commande.

        Returns:
            Sortie de la commande.

        Raises:
            InvalidArgumentError: Si program est vide.
            ExecutionError: Si l'exécution échoue.
        """
        pass
