"""
Module contenant les exceptions personnalisées de local_exec.

Ce module suit le principe SRP en isolant la gestion des exceptions.
"""
from typing import Optional


class ApplicationError(Exception):
    """Exception de base pour toute la bibliothèque."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les Configurations."""
    pass


class FileConfigurationError(ConfigurationError):
    """Exception levée pour un fichier de configuration invalide."""
    pass


class InvalidArgumentError(ApplicationError, ValueError):
    """Argument invalide (programme vide, commande vide...)."""
    pass


class ExecutionError(ApplicationError):
    """Erreur d'exécution d'une commande externe.

    Porte toujours la commande complète telle qu'elle a été construite,
    afin de pouvoir diagnostiquer l'échec sans la reconstruire.

    Attributes:
        command: Commande exécutée (chaîne shell complète).
        message: Message d'erreur (sortie capturée ou diagnostic).
        code: Code de retour du processus, 0 si indisponible.
    """

    DEFAULT_MESSAGE = "Erreur d'exécution de la commande"

    def __init__(
        self,
        command: str,
        message: Optional[str] = None,
        code: int = 0,
        cause: Optional[BaseException] = None,
    ) -> None:
        """Initialise l'erreur d'exécution.

        Si message est vide, utilise la dernière erreur système
        rapportée (cause), sinon un diagnostic générique.

        Args:
            command: Commande construite (non vide).
            message: Message d'erreur (sortie capturée) ou None.
            code: Code de retour du processus (défaut: 0).
            cause: Erreur système à l'origine de l'échec.

        Raises:
            InvalidArgumentError: Si command est vide.
        """
        if not command:
            raise InvalidArgumentError("La commande est requise.")

        if not message:
            message = self._system_message(cause) or self.DEFAULT_MESSAGE

        super().__init__(message)
        self.command = command
        self.message = message
        self.code = code
        self.__cause__ = cause

    @staticmethod
    def _system_message(cause: Optional[BaseException]) -> str:
        """Extrait le texte de la dernière erreur système."""
        if cause is None:
            return ""
        if isinstance(cause, OSError) and cause.strerror:
            return cause.strerror
        return str(cause)

    def __str__(self) -> str:
        return self.message
