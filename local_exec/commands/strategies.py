"""Adaptateurs d'exécution : une classe par stratégie.

Chaque adaptateur est étiqueté par sa stratégie (ExecutionStrategy)
et par le mécanisme Python qu'il utilise, ce qui permet à la
politique d'exécution de l'interdire ou de vérifier sa présence.

Les stratégies diffèrent par ce qu'elles capturent :

    ====================  =======================  =========================
    Stratégie             Mécanisme                Sortie retournée
    ====================  =======================  =========================
    direct_exec           subprocess.run           lignes de stdout collées
    shell_exec            subprocess.check_output  stdout complet
    shell_passthru        os.system                stdout (fd 1 redirigé)
    pipe_read             os.popen                 stdout complet
    subprocess_pipes      subprocess.Popen         stdout (stderr à part)
    system_call           subprocess.call          dernière ligne de stdout
    ====================  =======================  =========================

shell_exec et pipe_read ne contrôlent pas le code retour de la commande.

Aucune stratégie ne gère de timeout : un processus qui ne se termine
pas bloque l'appelant.

Example :
    Exécution directe via un adaptateur :

        from local_exec.commands.strategies import SubprocessPipesAdapter

        adapter = SubprocessPipesAdapter(logger=logger)
        out = adapter.run("date", ["-u", "+%y%m%d"])
"""

import os
import subprocess  # nosec B404
import sys
import tempfile
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import IO, Iterator, Optional, Tuple, Type

from local_exec.commands.base import (
    Arguments,
    ExecutionStrategy,
    Options,
)
from local_exec.commands.builder import CommandBuilder
from local_exec.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
)
from local_exec.errors.exceptions import ExecutionError
from local_exec.logging.base import Logger

STDOUT_FD = 1


@contextmanager
def redirect_stdout_fd(buffer: IO[bytes]) -> Iterator[None]:
    """Redirige temporairement le descripteur 1 vers un fichier.

    Le descripteur d'origine est restauré et sa copie fermée sur
    tous les chemins de sortie.

    Args:
        buffer: Fichier binaire ouvert recevant la sortie.
    """
    if sys.stdout is not None:
        sys.stdout.flush()
    saved_fd = os.dup(STDOUT_FD)
    try:
        os.dup2(buffer.fileno(), STDOUT_FD)
        yield
    finally:
        os.dup2(saved_fd, STDOUT_FD)
        os.close(saved_fd)


def read_buffer(buffer: IO[bytes]) -> str:
    """Relit un tampon temporaire depuis le début."""
    buffer.seek(0)
    return buffer.read().decode(errors="replace")


def last_line(output: str) -> str:
    """Retourne la dernière ligne non vide, sans espaces finaux."""
    stripped = output.rstrip()
    if not stripped:
        return ""
    return stripped.splitlines()[-1]


class StrategyAdapter(ABC):
    """Interface commune des adaptateurs d'exécution.

    Attributes:
        strategy: Stratégie implémentée.
        mechanism: Nom pointé de la fonction Python utilisée.
    """

    strategy: ExecutionStrategy
    mechanism: str

    def __init__(
        self,
        logger: Optional[Logger] = None,
        formatter: Optional[CommandFormatter] = None,
    ) -> None:
        """Initialise l'adaptateur.

        Args:
            logger: Logger optionnel pour la trace des commandes.
            formatter: Formateur des messages (défaut: texte brut).
        """
        self._logger = logger
        self._formatter = formatter or PlainCommandFormatter()

    @property
    def names(self) -> Tuple[str, str]:
        """Noms sous lesquels la stratégie peut être interdite."""
        return self.mechanism, str(self.strategy)

    def run(
        self,
        program: str,
        args: Arguments = None,
        options: Options = None,
    ) -> str:
        """Construit la commande puis l'exécute.

        Args:
            program: Programme à exécuter.
            args: Arguments (les valeurs None sont ignorées).
            options: Options de construction.

        Returns:
            Sortie normalisée de la commande.

        Raises:
            InvalidArgumentError: Si program est vide.
            ExecutionError: Si l'exécution échoue.
        """
        return self.execute(CommandBuilder.build(program, args, options))

    def execute(self, command: str) -> str:
        """Exécute une commande déjà construite.

        Args:
            command: Ligne de commande complète.

        Returns:
            Sortie normalisée de la commande.

        Raises:
            ExecutionError: Si l'exécution échoue.
        """
        if self._logger:
            self._logger.log_debug(
                self._formatter.format_start(self.strategy, command)
            )
        try:
            return self._execute(command)
        except ExecutionError as e:
            if self._logger:
                self._logger.log_error(
                    self._formatter.format_failure(
                        self.strategy, command, e.code
                    )
                )
            raise

    @abstractmethod
    def _execute(self, command: str) -> str:
        """Lance la commande via le mécanisme de la stratégie."""
        pass


class DirectExecAdapter(StrategyAdapter):
    """Exécution avec code retour explicite.

    Chaque ligne de stdout est débarrassée de ses espaces finaux puis
    les lignes sont concaténées sans séparateur. stderr n'est pas
    capturé.
    """

    strategy = ExecutionStrategy.DIRECT_EXEC
    mechanism = "subprocess.run"

    def _execute(self, command: str) -> str:
        try:
            proc = subprocess.run(  # nosec B602
                command,
                shell=True,
                stdout=subprocess.PIPE,
                text=True,
                errors="replace",
            )
        except OSError as e:
            raise ExecutionError(command, cause=e) from e

        output = "".join(
            line.rstrip() for line in proc.stdout.splitlines()
        )
        if proc.returncode != 0:
            raise ExecutionError(command, output, proc.returncode)
        return output


class ShellExecAdapter(StrategyAdapter):
    """Évaluation shell unique, sortie standard complète.

    stderr n'est pas capturé. Seul l'échec du lancement du shell est
    détecté ; le code retour de la commande est ignoré.
    """

    strategy = ExecutionStrategy.SHELL_EXEC
    mechanism = "subprocess.check_output"

    def _execute(self, command: str) -> str:
        try:
            return subprocess.check_output(  # nosec B602
                command, shell=True, text=True, errors="replace"
            )
        except subprocess.CalledProcessError as e:
            # code retour ignoré
            return e.output
        except OSError as e:
            raise ExecutionError(command, cause=e) from e


class ShellPassthruAdapter(StrategyAdapter):
    """Sortie brute du shell capturée par redirection du fd 1.

    La commande écrit directement sur la sortie standard du processus,
    redirigée le temps de l'appel vers un fichier temporaire. Ne pas
    utiliser depuis plusieurs threads simultanément.
    """

    strategy = ExecutionStrategy.SHELL_PASSTHRU
    mechanism = "os.system"

    def _execute(self, command: str) -> str:
        with tempfile.TemporaryFile() as buffer:
            with redirect_stdout_fd(buffer):
                status = os.system(command)  # nosec B605
            output = read_buffer(buffer)

        # -1 : le shell n'a pas pu être lancé
        if status == -1:
            raise ExecutionError(command)

        code = os.waitstatus_to_exitcode(status)
        if code != 0:
            raise ExecutionError(command, output, code)
        return output


class PipeReadAdapter(StrategyAdapter):
    """Lecture complète d'un pipe en lecture seule sur stdout.

    Seules les erreurs système (ouverture, lecture, fermeture) sont
    des échecs ; le code retour de la commande est ignoré.
    """

    strategy = ExecutionStrategy.PIPE_READ
    mechanism = "os.popen"

    def _execute(self, command: str) -> str:
        try:
            with os.popen(command, "r") as pipe:  # nosec B605
                data = pipe.buffer.read()
        except OSError as e:
            raise ExecutionError(command, cause=e) from e
        return data.decode(errors="replace")


class SubprocessPipesAdapter(StrategyAdapter):
    """Processus avec stdout et stderr sur des pipes séparés.

    En cas d'échec, le message est le contenu de stderr.
    """

    strategy = ExecutionStrategy.SUBPROCESS_PIPES
    mechanism = "subprocess.Popen"

    def _execute(self, command: str) -> str:
        try:
            with subprocess.Popen(  # nosec B602
                command,
                shell=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
            ) as proc:
                stdout, stderr = proc.communicate()
        except OSError as e:
            raise ExecutionError(command, cause=e) from e

        if proc.returncode != 0:
            raise ExecutionError(command, stderr, proc.returncode)
        return stdout


class SystemCallAdapter(StrategyAdapter):
    """Appel système ne retournant que la dernière ligne de stdout.

    Attention : toutes les lignes précédentes sont perdues. En cas
    d'échec, le message contient toute la sortie capturée.
    """

    strategy = ExecutionStrategy.SYSTEM_CALL
    mechanism = "subprocess.call"

    def _execute(self, command: str) -> str:
        with tempfile.TemporaryFile() as buffer:
            try:
                code = subprocess.call(  # nosec B602
                    command, shell=True, stdout=buffer
                )
            except OSError as e:
                raise ExecutionError(command, cause=e) from e
            output = read_buffer(buffer)

        if code != 0:
            raise ExecutionError(command, output, code)
        return last_line(output)


# Ordre de priorité utilisé par LocalExecutor.run().
ADAPTERS: Tuple[Type[StrategyAdapter], ...] = (
    DirectExecAdapter,
    ShellExecAdapter,
    ShellPassthruAdapter,
    PipeReadAdapter,
    SubprocessPipesAdapter,
    SystemCallAdapter,
)
