"""
    ConsoleErrorHandler (générique, configurable)
"""
import sys

from local_exec.errors.base import ErrorHandler
from local_exec.errors.exceptions import (ApplicationError,
                                          ConfigurationError,
                                          ExecutionError,
                                          InvalidArgumentError)


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console (stderr).

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues, et affiche un message de solution adapté au type
    d'erreur.
    """

    def __init__(
        self,
        base_error_type: type[Exception] = ApplicationError,
        solutions: dict[type[Exception], str] | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            base_error_type: Classe de base pour distinguer erreurs connues/inconnues
                             (défaut: ApplicationError).
            solutions: Dictionnaire {TypeException: "message solution"},
                       prioritaire sur les solutions par défaut.
        """
        self.base_error_type = base_error_type
        self.solutions = solutions or {}

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur dans la console avec des messages utilisateur.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, self.base_error_type):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _solution_for(self, error: Exception) -> str:
        """Retourne la suggestion adaptée au type d'erreur."""
        for error_type, solution in self.solutions.items():
            if isinstance(error, error_type):
                return solution

        if isinstance(error, ExecutionError):
            if error.code == 0:
                return ("Vérifiez la politique d'exécution "
                        "(LOCAL_EXEC_DISABLE_FUNCTIONS).")
            return "Consultez la sortie de la commande ci-dessus."
        if isinstance(error, InvalidArgumentError):
            return "Indiquez un programme à exécuter."
        if isinstance(error, ConfigurationError):
            return "Vérifiez votre fichier de configuration."
        return "Voir les suggestions ci-dessus."

    def _handle_known_error(self, error: Exception) -> None:
        """Gère les erreurs connues du projet.

        Affiche le type et le message de l'erreur, suivi d'une
        suggestion de solution adaptée via isinstance.

        Args:
            error: L'exception métier à traiter.
        """
        print(f"\n🛑 {type(error).__name__}: {str(error)}", file=sys.stderr)
        if isinstance(error, ExecutionError):
            print(f"Commande : {error.command}", file=sys.stderr)
            print(f"Code retour : {error.code}", file=sys.stderr)
        print(f"\n🔧 Solution : {self._solution_for(error)}", file=sys.stderr)

    def _handle_unknown_error(self, error: Exception) -> None:
        """Gère les erreurs inattendues.

        Args:
            error: L'exception non prévue à afficher.
        """
        print(f"\n💥 Erreur inattendue: {str(error)}", file=sys.stderr)
        print(f"Type: {type(error).__name__}", file=sys.stderr)
        print(
            "\n📋 Cela peut être un bug. Veuillez ouvrir une issue avec ces informations.",
            file=sys.stderr,
        )
