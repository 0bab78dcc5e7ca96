"""Formateurs pour les messages de trace des commandes exécutées.

Classes :
    CommandFormatter : Interface abstraite de formatage.
    PlainCommandFormatter : Texte brut préfixé par la stratégie.

Example :
    Sortie pour une exécution via subprocess.run :
        [direct_exec] Exécution : date '-u' '+%y%m%d'
"""

from abc import ABC, abstractmethod


class CommandFormatter(ABC):
    """Interface abstraite pour formater les messages de commande."""

    @abstractmethod
    def format_start(self, strategy: str, command: str) -> str:
        """Formate le message de début d'exécution.

        Args:
            strategy: Nom de la stratégie utilisée.
            command: Commande complète.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass

    @abstractmethod
    def format_failure(
        self, strategy: str, command: str, code: int
    ) -> str:
        """Formate le message d'échec d'une exécution.

        Args:
            strategy: Nom de la stratégie utilisée.
            command: Commande complète.
            code: Code retour (0 si inconnu).

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass

    @abstractmethod
    def format_unavailable(self, command: str) -> str:
        """Formate le message émis quand aucune stratégie n'est utilisable."""
        pass


class PlainCommandFormatter(CommandFormatter):
    """Formateur texte brut pour les logs fichier.

    N'utilise aucun code ANSI : compatible avec les fichiers de log,
    les outils grep et les éditeurs de texte.
    """

    def _prefix(self, strategy: str) -> str:
        return f"[{strategy}]"

    def format_start(self, strategy: str, command: str) -> str:
        """Formate le début d'exécution avec la stratégie en préfixe."""
        return f"{self._prefix(strategy)} Exécution : {command}"

    def format_failure(
        self, strategy: str, command: str, code: int
    ) -> str:
        """Formate l'échec avec le code retour."""
        return (
            f"{self._prefix(strategy)} Code retour {code} : {command}"
        )

    def format_unavailable(self, command: str) -> str:
        """Formate l'absence de mécanisme utilisable."""
        return f"[désactivé] Aucun mécanisme disponible : {command}"
