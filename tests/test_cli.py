"""Tests pour l'interface en ligne de commande local-exec."""

import shutil

import pytest

from local_exec.cli import build_parser, main
from local_exec.commands.policy import (
    CONFIG_ENV,
    DISABLE_FUNCTIONS_ENV,
    FUNC_BLACKLIST_ENV,
)
from local_exec.commands.strategies import ADAPTERS

pytestmark = pytest.mark.skipif(
    shutil.which("sh") is None, reason="sh est requis"
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Supprime toute politique héritée de l'environnement."""
    for name in (DISABLE_FUNCTIONS_ENV, FUNC_BLACKLIST_ENV, CONFIG_ENV):
        monkeypatch.delenv(name, raising=False)


class TestParser:
    """Tests pour build_parser."""

    def test_arguments_du_programme(self):
        """Les options après le programme lui sont transmises."""
        options = build_parser().parse_args(["date", "-u", "+%y%m%d"])
        assert options.program == "date"
        assert options.args == ["-u", "+%y%m%d"]

    def test_strategie_inconnue(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--strategy", "magie", "ls"])


class TestMain:
    """Tests pour main()."""

    def test_sortie_affichee(self, capsys):
        """La sortie de la commande est affichée."""
        assert main(["echo", "bonjour"]) == 0
        assert capsys.readouterr().out == "bonjour\n"

    def test_code_retour_propage(self, capsys):
        """Le code retour de la commande devient le code de sortie."""
        assert main(["sh", "-c", "exit 4"]) == 4
        assert "ExecutionError" in capsys.readouterr().err

    def test_sans_echappement(self, capsys):
        """--no-escape permet les opérateurs shell."""
        assert main(["--no-escape", "echo", "un", "&&", "echo", "deux"]) == 0
        assert capsys.readouterr().out == "undeux\n"

    def test_strategie_imposee(self, capsys):
        """--strategy utilise la stratégie demandée."""
        code = main([
            "--strategy", "system_call", "sh", "-c", "echo un; echo deux"
        ])
        assert code == 0
        assert capsys.readouterr().out == "deux\n"

    def test_tout_desactive(self, monkeypatch, capsys):
        """Tous les mécanismes interdits : code 1 et message."""
        monkeypatch.setenv(
            DISABLE_FUNCTIONS_ENV,
            ",".join(adapter.mechanism for adapter in ADAPTERS),
        )
        assert main(["echo", "x"]) == 1
        assert "désactivés" in capsys.readouterr().err

    def test_liste(self, monkeypatch, capsys):
        """--list affiche chaque stratégie et sa disponibilité."""
        monkeypatch.setenv(DISABLE_FUNCTIONS_ENV, "os.popen")
        assert main(["--list"]) == 0
        out = capsys.readouterr().out
        assert "direct_exec\tsubprocess.run\tdisponible" in out
        assert "pipe_read\tos.popen\tdésactivé" in out

    def test_programme_requis(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_config_et_log(self, tmp_path, capsys):
        """La configuration règle la politique et le niveau de log."""
        config_file = tmp_path / "exec.toml"
        config_file.write_text(
            '[policy]\n'
            'disable_functions = "subprocess.run"\n'
            '[logging]\n'
            'level = "DEBUG"\n'
        )
        log_file = tmp_path / "exec.log"

        code = main([
            "--config", str(config_file),
            "--log-file", str(log_file),
            "echo", "bonjour",
        ])

        assert code == 0
        assert capsys.readouterr().out == "bonjour\n"
        assert "[shell_exec] Exécution : echo 'bonjour'" in (
            log_file.read_text(encoding="utf-8")
        )

    def test_config_introuvable(self, tmp_path, capsys):
        """Un fichier de configuration absent est signalé."""
        code = main(["--config", str(tmp_path / "absent.toml"), "ls"])
        assert code == 1
        assert "FileNotFoundError" in capsys.readouterr().err
