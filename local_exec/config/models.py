"""Modèles Pydantic de la configuration de local_exec.

Exemple de fichier TOML :

    [policy]
    disable_functions = "os.system, subprocess.call"
    func_blacklist = ["pipe_read"]

    [logging]
    level = "DEBUG"
"""

from typing import List, Union

from pydantic import BaseModel, Field, field_validator


class PolicyConfig(BaseModel):
    """Section [policy] : mécanismes d'exécution interdits.

    Les deux clés acceptent une chaîne (séparateurs espaces/virgules)
    ou une liste de chaînes ; elles sont normalisées en chaîne.
    """

    disable_functions: str = ""
    func_blacklist: str = ""

    model_config = {"extra": "forbid"}

    @field_validator("disable_functions", "func_blacklist", mode="before")
    @classmethod
    def join_list(cls, v: Union[str, List[str], None]) -> str:
        if v is None:
            return ""
        if isinstance(v, (list, tuple)):
            return " ".join(str(item) for item in v)
        return v


class LoggingConfig(BaseModel):
    """Section [logging] : niveau et format du FileLogger."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Niveau de log inconnu : {v}")
        return level


class LocalExecConfig(BaseModel):
    """Configuration complète de local_exec."""

    policy: PolicyConfig = Field(default_factory=PolicyConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def disabled_sources(self) -> List[str]:
        """Retourne les chaînes de liste noire déclarées par le fichier."""
        return [self.policy.disable_functions, self.policy.func_blacklist]
