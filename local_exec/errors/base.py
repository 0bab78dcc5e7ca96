""" Interfaces abstraites pour la gestion des erreurs"""

import sys
from abc import ABC, abstractmethod
from typing import Optional

from local_exec.errors.exceptions import ExecutionError


class ErrorHandler(ABC):
    """Interface de base pour les handlers d'erreurs.

        Chaque implémentation concrète définit une stratégie
        de traitement des erreurs (affichage console, logging, etc.).
        """
    @abstractmethod
    def handle(self, error: Exception) -> None:
        """Traite une erreur.

        Args:
            error: L'exception à traiter.
        """
        pass


class ErrorHandlerChain():
    """Diffuse les erreurs à tous les handlers enregistrés.

    Chaque erreur est transmise à tous les handlers dans l'ordre
    d'ajout (ex: console puis logger).
    """

    def __init__(self):
        self.handlers: list[ErrorHandler] = []

    def add_handler(self, handler: ErrorHandler) -> "ErrorHandlerChain":
        """Ajoute un handler à la chaîne et retourne la chaîne."""
        self.handlers.append(handler)
        return self

    def handle(self, error: Exception) -> None:
        """Fait passer l'erreur à travers tous les handlers.

        Args:
            error: L'exception à diffuser.
        """
        for handler in self.handlers:
            handler.handle(error)

    @staticmethod
    def exit_code_for(error: Exception) -> int:
        """Détermine le code de sortie associé à une erreur.

        Le code retour d'une ExecutionError est repris tel quel
        s'il est dans la plage 1-255, sinon 1.

        Args:
            error: L'exception traitée.

        Returns:
            Code de sortie du programme.
        """
        if isinstance(error, ExecutionError) and 0 < error.code < 256:
            return error.code
        return 1

    def handle_and_exit(
        self, error: Exception, exit_code: Optional[int] = None
    ) -> None:
        """Gère l'erreur et termine le programme.

        Args:
            error: L'exception à traiter avant la sortie.
            exit_code: Code de sortie forcé (défaut: déduit de l'erreur).
        """
        self.handle(error)
        if exit_code is None:
            exit_code = self.exit_code_for(error)
        sys.exit(exit_code)
