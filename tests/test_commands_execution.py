"""Tests d'exécution réelle des stratégies (commandes date et sh)."""

import shutil
from datetime import datetime, timezone

import pytest

from local_exec.commands import (
    ExecutionOptions,
    ExecutionPolicy,
    ExecutionStrategy,
    LocalExecutor,
)
from local_exec.errors import ExecutionError

pytestmark = pytest.mark.skipif(
    shutil.which("date") is None or shutil.which("sh") is None,
    reason="date et sh sont requis",
)

CMD = "date"
ARGS = ["-u", "+%y%m%d"]


def utc_date() -> str:
    """Date UTC au format attendu de la commande date."""
    return datetime.now(timezone.utc).strftime("%y%m%d")


@pytest.fixture
def executor() -> LocalExecutor:
    """Exécuteur sans aucune restriction."""
    return LocalExecutor(policy=ExecutionPolicy())


class TestDateParStrategie:
    """Même sortie quelle que soit la stratégie utilisée."""

    @pytest.mark.parametrize("strategy", list(ExecutionStrategy))
    def test_strategie(self, executor, strategy):
        """Test de la commande date via chaque stratégie."""
        out = executor.run_with(strategy, CMD, ARGS)
        assert out.strip() == utc_date()

    def test_run(self, executor):
        """Test de la commande date via run()."""
        assert executor.run(CMD, ARGS).strip() == utc_date()

    def test_methodes_directes(self, executor):
        """Test des méthodes nommées de chaque stratégie."""
        methods = [
            executor.direct_exec,
            executor.shell_exec,
            executor.shell_passthru,
            executor.pipe_read,
            executor.subprocess_pipes,
            executor.system_call,
        ]
        outputs = {method(CMD, ARGS).strip() for method in methods}
        assert outputs == {utc_date()}


FAILING = ["-c", "echo sortie; echo erreur >&2; exit 3"]


class TestCodeRetour:
    """Propagation du code retour non nul."""

    @pytest.mark.parametrize(
        "strategy",
        [
            ExecutionStrategy.DIRECT_EXEC,
            ExecutionStrategy.SHELL_PASSTHRU,
            ExecutionStrategy.SUBPROCESS_PIPES,
            ExecutionStrategy.SYSTEM_CALL,
        ],
    )
    def test_code_propage(self, executor, strategy):
        """Test que le code de l'erreur est le code de sortie."""
        with pytest.raises(ExecutionError) as exc_info:
            executor.run_with(strategy, "sh", FAILING)

        assert exc_info.value.code == 3
        assert exc_info.value.command == (
            "sh '-c' 'echo sortie; echo erreur >&2; exit 3'"
        )

    def test_message_direct_exec(self, executor):
        """Test que direct_exec porte stdout comme message."""
        with pytest.raises(ExecutionError) as exc_info:
            executor.direct_exec("sh", FAILING)
        assert exc_info.value.message == "sortie"

    def test_message_subprocess_pipes(self, executor):
        """Test que subprocess_pipes porte stderr comme message."""
        with pytest.raises(ExecutionError) as exc_info:
            executor.subprocess_pipes("sh", FAILING)
        assert exc_info.value.message.strip() == "erreur"

    def test_message_shell_passthru(self, executor):
        """Test que shell_passthru porte la sortie capturée."""
        with pytest.raises(ExecutionError) as exc_info:
            executor.shell_passthru("sh", FAILING)
        assert exc_info.value.message.strip() == "sortie"

    def test_pipe_read_ignore_code(self, executor):
        """Test que pipe_read ne contrôle pas le code retour."""
        assert executor.pipe_read("sh", FAILING).strip() == "sortie"

    def test_shell_exec_ignore_code(self, executor):
        """Test que shell_exec ne contrôle pas le code retour."""
        assert executor.shell_exec("sh", FAILING) == "sortie\n"

    def test_run_propage_le_code(self, executor):
        """Test que run() propage l'erreur de la stratégie retenue."""
        with pytest.raises(ExecutionError) as exc_info:
            executor.run("sh", ["-c", "exit 7"])
        assert exc_info.value.code == 7


class TestCapture:
    """Différences de capture entre stratégies."""

    MULTI = ["-c", "echo un; echo deux"]

    def test_system_call_derniere_ligne(self, executor):
        """Test que system_call ne garde que la dernière ligne."""
        assert executor.system_call("sh", self.MULTI) == "deux"

    def test_direct_exec_lignes_collees(self, executor):
        """Test que direct_exec colle les lignes."""
        assert executor.direct_exec("sh", self.MULTI) == "undeux"

    def test_subprocess_pipes_sortie_complete(self, executor):
        """Test que subprocess_pipes garde toutes les lignes."""
        assert executor.subprocess_pipes("sh", self.MULTI) == "un\ndeux\n"

    def test_shell_passthru_sortie_complete(self, executor):
        """Test que shell_passthru garde toutes les lignes."""
        assert executor.shell_passthru("sh", self.MULTI) == "un\ndeux\n"

    def test_arguments_bruts(self, executor):
        """Test d'un opérateur shell injecté volontairement."""
        out = executor.subprocess_pipes(
            "echo",
            ["un", "&&", "echo", "deux"],
            ExecutionOptions(escape_arguments=False),
        )
        assert out == "un\ndeux\n"

    def test_arguments_echappes(self, executor):
        """Test que les métacaractères échappés restent littéraux."""
        out = executor.subprocess_pipes("echo", ["un && echo deux"])
        assert out == "un && echo deux\n"


class TestSortieNonUtf8:
    """Sortie contenant des octets qui ne sont pas de l'UTF-8."""

    BINARY = ["-c", "printf '\\377ok\\n'"]

    @pytest.mark.parametrize("strategy", list(ExecutionStrategy))
    def test_strategie(self, executor, strategy):
        """Test que chaque stratégie remplace les octets invalides."""
        out = executor.run_with(strategy, "sh", self.BINARY)
        assert out.strip().endswith("ok")

    def test_run_sans_subprocess_run(self):
        """Test de run() quand la première stratégie est interdite."""
        executor = LocalExecutor(
            policy=ExecutionPolicy(["subprocess.run"])
        )
        assert executor.run("sh", self.BINARY).strip().endswith("ok")


class TestStderr:
    """Seul subprocess_pipes capture stderr."""

    MIXED = ["-c", "echo sortie; echo erreur >&2"]

    @pytest.mark.parametrize(
        "strategy",
        [
            ExecutionStrategy.DIRECT_EXEC,
            ExecutionStrategy.SHELL_EXEC,
            ExecutionStrategy.SHELL_PASSTHRU,
            ExecutionStrategy.PIPE_READ,
            ExecutionStrategy.SYSTEM_CALL,
        ],
    )
    def test_stderr_hors_sortie(self, executor, strategy, capfd):
        """Test que stderr reste sur la sortie d'erreur du processus."""
        out = executor.run_with(strategy, "sh", self.MIXED)

        assert out.strip() == "sortie"
        assert "erreur" in capfd.readouterr().err

    def test_subprocess_pipes_stderr_separe(self, executor, capfd):
        """Test que subprocess_pipes retient stderr hors de la sortie."""
        out = executor.subprocess_pipes("sh", self.MIXED)

        assert out == "sortie\n"
        assert "erreur" not in capfd.readouterr().err
