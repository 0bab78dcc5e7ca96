"""Politique d'exécution : mécanismes interdits par l'hôte.

Un mécanisme est identifié par le nom pointé de la fonction Python
qu'il utilise (ex: "os.system") ; une stratégie peut aussi être
interdite par son propre nom (ex: "shell_passthru").

La liste noire est la fusion de plusieurs sources :
    - variable d'environnement LOCAL_EXEC_DISABLE_FUNCTIONS ;
    - variable d'environnement LOCAL_EXEC_FUNC_BLACKLIST ;
    - section [policy] du fichier désigné par LOCAL_EXEC_CONFIG.

Chaque source est découpée sur les espaces et les virgules.

Example :
    LOCAL_EXEC_DISABLE_FUNCTIONS="subprocess.run, os.system" python app.py
"""

import importlib
import os
import re
import threading
from typing import FrozenSet, Iterable, Mapping, Optional

from local_exec.config.loader import ConfigLoader, FileConfigLoader
from local_exec.config.models import LocalExecConfig

DISABLE_FUNCTIONS_ENV = "LOCAL_EXEC_DISABLE_FUNCTIONS"
FUNC_BLACKLIST_ENV = "LOCAL_EXEC_FUNC_BLACKLIST"
CONFIG_ENV = "LOCAL_EXEC_CONFIG"

_SEPARATORS = re.compile(r"[\s,]+")


def parse_disabled(*sources: Optional[str]) -> FrozenSet[str]:
    """Fusionne et découpe des listes noires textuelles.

    Args:
        *sources: Chaînes séparées par espaces/virgules (None ignoré).

    Returns:
        Ensemble des noms interdits (sans entrée vide).
    """
    merged = " ".join(source for source in sources if source)
    return frozenset(name for name in _SEPARATORS.split(merged) if name)


def mechanism_exists(mechanism: str) -> bool:
    """Vérifie qu'un mécanisme existe dans l'environnement d'exécution.

    Args:
        mechanism: Nom pointé "module.fonction".

    Returns:
        True si le module s'importe et expose la fonction.
    """
    module_name, _, attribute = mechanism.rpartition(".")
    if not module_name:
        return False
    try:
        module = importlib.import_module(module_name)
    except ImportError:
        return False
    return callable(getattr(module, attribute, None))


class ExecutionPolicy:
    """Liste noire immuable des mécanismes d'exécution.

    Attributes:
        _disabled: Noms interdits (mécanismes ou stratégies).
    """

    def __init__(self, disabled: Iterable[str] = ()) -> None:
        self._disabled: FrozenSet[str] = frozenset(disabled)

    @classmethod
    def from_sources(cls, *sources: Optional[str]) -> "ExecutionPolicy":
        """Crée une politique depuis une ou plusieurs chaînes."""
        return cls(parse_disabled(*sources))

    @classmethod
    def from_environment(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        config: Optional[LocalExecConfig] = None,
        config_loader: Optional[ConfigLoader] = None,
    ) -> "ExecutionPolicy":
        """Crée la politique depuis l'environnement et la configuration.

        Si config est None et que LOCAL_EXEC_CONFIG est défini, le
        fichier est chargé et validé avec LocalExecConfig.

        Args:
            environ: Variables d'environnement (défaut: os.environ).
            config: Configuration déjà chargée.
            config_loader: Chargeur injectable (défaut: FileConfigLoader).

        Returns:
            Politique fusionnant toutes les sources.

        Raises:
            FileNotFoundError: Si le fichier de configuration n'existe pas.
            FileConfigurationError: Si le fichier est invalide.
        """
        if environ is None:
            environ = os.environ

        sources = [
            environ.get(DISABLE_FUNCTIONS_ENV),
            environ.get(FUNC_BLACKLIST_ENV),
        ]

        config_path = environ.get(CONFIG_ENV)
        if config is None and config_path:
            loader = config_loader or FileConfigLoader()
            config = loader.load(config_path, schema=LocalExecConfig)

        if config is not None:
            sources.extend(config.disabled_sources())

        return cls.from_sources(*sources)

    @property
    def disabled(self) -> FrozenSet[str]:
        """Noms interdits."""
        return self._disabled

    def is_disabled(self, *names: str) -> bool:
        """Retourne True si l'un des noms figure dans la liste noire."""
        return any(name in self._disabled for name in names)

    def is_available(self, mechanism: str, *aliases: str) -> bool:
        """Vérifie qu'un mécanisme existe et n'est pas interdit.

        Args:
            mechanism: Nom pointé du mécanisme (ex: "os.popen").
            *aliases: Autres noms interdisant le mécanisme.

        Returns:
            True si le mécanisme est utilisable.
        """
        return (
            mechanism_exists(mechanism)
            and not self.is_disabled(mechanism, *aliases)
        )

    def __repr__(self) -> str:
        return f"ExecutionPolicy(disabled={sorted(self._disabled)!r})"


_default_policy: Optional[ExecutionPolicy] = None
_default_policy_lock = threading.Lock()


def default_policy() -> ExecutionPolicy:
    """Retourne la politique du processus.

    Calculée au premier appel depuis l'environnement puis conservée
    pour toute la durée du processus, sans jamais être recalculée.

    Returns:
        Politique partagée.
    """
    global _default_policy
    if _default_policy is None:
        with _default_policy_lock:
            if _default_policy is None:
                _default_policy = ExecutionPolicy.from_environment()
    return _default_policy
