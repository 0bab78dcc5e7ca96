"""Exécuteur de commandes locales multi-stratégies.

Ce module fournit LocalExecutor, une implémentation concrète de
CommandExecutor qui exécute une commande via la première stratégie
disponible, dans l'ordre de priorité :

    direct_exec, shell_exec, shell_passthru, pipe_read,
    subprocess_pipes, system_call

Une stratégie est disponible si son mécanisme Python existe et n'est
pas interdit par la politique d'exécution. Le choix est fait une
seule fois, avant l'exécution : un échec de la stratégie retenue est
propagé tel quel, sans essayer la suivante.

Example :
    Exécution simple :

        from local_exec import FileLogger, LocalExecutor

        executor = LocalExecutor(logger=FileLogger("/tmp/exec.log"))
        print(executor.run("date", ["-u", "+%y%m%d"]))

    Exécution via une stratégie précise :

        out = executor.subprocess_pipes("ls", ["-la", "/tmp"])
"""

from typing import Dict, List, Optional, Union

from local_exec.commands.base import (
    Arguments,
    CommandExecutor,
    ExecutionStrategy,
    Options,
)
from local_exec.commands.builder import CommandBuilder
from local_exec.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
)
from local_exec.commands.policy import ExecutionPolicy, default_policy
from local_exec.commands.strategies import ADAPTERS, StrategyAdapter
from local_exec.errors.exceptions import ExecutionError
from local_exec.logging.base import Logger

ALL_DISABLED_MESSAGE = "Tous les mécanismes d'exécution sont désactivés"


class LocalExecutor(CommandExecutor):
    """Exécuteur de commandes locales.

    Attributes:
        _logger: Logger optionnel pour la trace des commandes.
        _policy: Politique explicite, ou None pour la politique
            du processus (calculée une seule fois).
        _formatter: Formateur des messages de log.
        _adapters: Adaptateurs indexés par stratégie, par priorité.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        policy: Optional[ExecutionPolicy] = None,
        formatter: Optional[CommandFormatter] = None,
    ) -> None:
        """Initialise l'exécuteur.

        Args:
            logger: Logger optionnel (trace debug et erreurs).
            policy: Politique d'exécution (défaut: default_policy()).
            formatter: Formateur des messages (défaut: texte brut).
        """
        self._logger = logger
        self._policy = policy
        self._formatter = formatter or PlainCommandFormatter()
        self._adapters: Dict[ExecutionStrategy, StrategyAdapter] = {
            adapter.strategy: adapter(logger, self._formatter)
            for adapter in ADAPTERS
        }

    @property
    def policy(self) -> ExecutionPolicy:
        """Politique d'exécution effective."""
        if self._policy is None:
            return default_policy()
        return self._policy

    def adapter(
        self, strategy: Union[ExecutionStrategy, str]
    ) -> StrategyAdapter:
        """Retourne l'adaptateur d'une stratégie.

        Args:
            strategy: Stratégie ou son nom (ex: "pipe_read").

        Returns:
            Adaptateur correspondant.

        Raises:
            ValueError: Si le nom de stratégie est inconnu.
        """
        return self._adapters[ExecutionStrategy(strategy)]

    def is_available(self, strategy: Union[ExecutionStrategy, str]) -> bool:
        """Indique si une stratégie est utilisable sur cet hôte."""
        adapter = self.adapter(strategy)
        return self.policy.is_available(*adapter.names)

    def available_strategies(self) -> List[ExecutionStrategy]:
        """Liste les stratégies utilisables, par ordre de priorité."""
        return [
            strategy for strategy in self._adapters
            if self.is_available(strategy)
        ]

    def select_adapter(self) -> Optional[StrategyAdapter]:
        """Retourne le premier adaptateur disponible, ou None."""
        for strategy, adapter in self._adapters.items():
            if self.is_available(strategy):
                return adapter
        return None

    def run(
        self,
        program: str,
        args: Arguments = None,
        options: Options = None,
    ) -> str:
        """Exécute la commande via la première stratégie disponible.

        Args:
            program: Programme à exécuter.
            args: Arguments (les valeurs None sont ignorées).
            options: Options de construction.

        Returns:
            Sortie de la commande.

        Raises:
            InvalidArgumentError: Si program est vide.
            ExecutionError: Si aucune stratégie n'est disponible ou
                si la stratégie retenue échoue.
        """
        command = CommandBuilder.build(program, args, options)

        adapter = self.select_adapter()
        if adapter is None:
            if self._logger:
                self._logger.log_error(
                    self._formatter.format_unavailable(command)
                )
            raise ExecutionError(command, ALL_DISABLED_MESSAGE, 0)

        return adapter.execute(command)

    def run_with(
        self,
        strategy: Union[ExecutionStrategy, str],
        program: str,
        args: Arguments = None,
        options: Options = None,
    ) -> str:
        """Exécute via une stratégie imposée, sans consulter la politique.

        Raises:
            ValueError: Si le nom de stratégie est inconnu.
            InvalidArgumentError: Si program est vide.
            ExecutionError: Si l'exécution échoue.
        """
        return self.adapter(strategy).run(program, args, options)

    def direct_exec(
        self, program: str, args: Arguments = None, options: Options = None
    ) -> str:
        """Exécute via subprocess.run (lignes de stdout concaténées)."""
        return self.run_with(
            ExecutionStrategy.DIRECT_EXEC, program, args, options
        )

    def shell_exec(
        self, program: str, args: Arguments = None, options: Options = None
    ) -> str:
        """Exécute via subprocess.check_output (code retour ignoré)."""
        return self.run_with(
            ExecutionStrategy.SHELL_EXEC, program, args, options
        )

    def shell_passthru(
        self, program: str, args: Arguments = None, options: Options = None
    ) -> str:
        """Exécute via os.system en capturant la sortie standard."""
        return self.run_with(
            ExecutionStrategy.SHELL_PASSTHRU, program, args, options
        )

    def pipe_read(
        self, program: str, args: Arguments = None, options: Options = None
    ) -> str:
        """Exécute via os.popen (code retour ignoré)."""
        return self.run_with(
            ExecutionStrategy.PIPE_READ, program, args, options
        )

    def subprocess_pipes(
        self, program: str, args: Arguments = None, options: Options = None
    ) -> str:
        """Exécute via subprocess.Popen (stderr comme message d'erreur)."""
        return self.run_with(
            ExecutionStrategy.SUBPROCESS_PIPES, program, args, options
        )

    def system_call(
        self, program: str, args: Arguments = None, options: Options = None
    ) -> str:
        """Exécute via subprocess.call.

        Attention : ne retourne que la dernière ligne de la sortie.
        """
        return self.run_with(
            ExecutionStrategy.SYSTEM_CALL, program, args, options
        )
