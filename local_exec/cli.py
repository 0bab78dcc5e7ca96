"""Interface en ligne de commande : local-exec.

Exemples :
    local-exec date -u +%y%m%d
    local-exec --strategy pipe_read ls -la /tmp
    local-exec --no-escape sh -c "ls | wc -l"
    local-exec --list
"""

import argparse
import sys
from typing import List, Optional

from local_exec.commands import (
    ExecutionOptions,
    ExecutionPolicy,
    ExecutionStrategy,
    LocalExecutor,
)
from local_exec.config import FileConfigLoader, LocalExecConfig
from local_exec.errors import (
    ApplicationError,
    ConsoleErrorHandler,
    ErrorHandlerChain,
    LoggerErrorHandler,
)
from local_exec.logging import FileLogger


def build_parser() -> argparse.ArgumentParser:
    """Construit le parseur d'arguments de local-exec."""
    parser = argparse.ArgumentParser(
        prog="local-exec",
        description=(
            "Exécute une commande locale via le premier mécanisme "
            "d'exécution disponible."
        ),
    )
    parser.add_argument(
        "--no-escape",
        action="store_true",
        help="transmettre les arguments sans échappement shell",
    )
    parser.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in ExecutionStrategy],
        help="imposer une stratégie (la politique n'est pas consultée)",
    )
    parser.add_argument(
        "--config",
        help="fichier de configuration TOML ou JSON",
    )
    parser.add_argument(
        "--log-file",
        help="fichier de log (trace des commandes si level = DEBUG)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="afficher les stratégies et leur disponibilité",
    )
    parser.add_argument("program", nargs="?", help="programme à exécuter")
    parser.add_argument(
        "args", nargs=argparse.REMAINDER, help="arguments du programme"
    )
    return parser


def _print_strategies(executor: LocalExecutor) -> None:
    for strategy in ExecutionStrategy:
        state = (
            "disponible" if executor.is_available(strategy)
            else "désactivé"
        )
        mechanism = executor.adapter(strategy).mechanism
        print(f"{strategy.value}\t{mechanism}\t{state}")


def main(argv: Optional[List[str]] = None) -> int:
    """Point d'entrée de local-exec.

    Args:
        argv: Arguments (défaut: sys.argv[1:]).

    Returns:
        0 en cas de succès, sinon le code retour de la commande
        (ou 1 si indisponible).
    """
    parser = build_parser()
    options = parser.parse_args(argv)

    if not options.list and not options.program:
        parser.error("un programme est requis (ou --list)")

    chain = ErrorHandlerChain().add_handler(ConsoleErrorHandler())

    try:
        config = None
        if options.config:
            config = FileConfigLoader().load(
                options.config, schema=LocalExecConfig
            )

        logger = None
        if options.log_file:
            logger = FileLogger(options.log_file, config=config)
            chain.add_handler(LoggerErrorHandler(logger))

        executor = LocalExecutor(
            logger=logger,
            policy=ExecutionPolicy.from_environment(config=config),
        )

        if options.list:
            _print_strategies(executor)
            return 0

        exec_options = ExecutionOptions(
            escape_arguments=not options.no_escape
        )
        if options.strategy:
            output = executor.run_with(
                options.strategy, options.program, options.args,
                exec_options,
            )
        else:
            output = executor.run(
                options.program, options.args, exec_options
            )
    except (ApplicationError, OSError, ValueError) as e:
        chain.handle(e)
        return chain.exit_code_for(e)

    sys.stdout.write(output)
    if output and not output.endswith("\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
