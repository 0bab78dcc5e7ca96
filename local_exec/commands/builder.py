"""Constructeur de lignes de commande shell.

Ce module fournit la classe CommandBuilder qui assemble un programme
et ses arguments en une chaîne unique prête pour le shell, ainsi que
les fonctions d'échappement utilisées.

Example:
    Construction d'une commande ps :

        from local_exec.commands import CommandBuilder

        cmd = CommandBuilder.build("ps", ["a", "a b"])
        # Résultat : "ps 'a' 'a b'"

    Arguments bruts (opérateurs shell volontaires) :

        cmd = CommandBuilder.build(
            "ls",
            ["-1", "|", "wc", "-l"],
            ExecutionOptions(escape_arguments=False),
        )
        # Résultat : "ls -1 | wc -l"
"""

from typing import List, Optional

from local_exec.commands.base import Arguments, ExecutionOptions, Options
from local_exec.errors.exceptions import InvalidArgumentError

# Caractères précédés d'un backslash dans le nom du programme.
SHELL_META_CHARS = frozenset("#&;`|*?~<>^()[]{}$\\\n\xff")
QUOTE_CHARS = frozenset("'\"")


def escape_shell_cmd(command: str) -> str:
    """Échappe les métacaractères shell d'un nom de programme.

    Les métacaractères sont précédés d'un backslash. Les guillemets
    (simples ou doubles) ne sont échappés que s'ils ne sont pas
    appariés. Le résultat reste une invocation de programme et non
    un argument unique entre quotes.

    Args:
        command: Programme (éventuellement avec chemin).

    Returns:
        Programme échappé.
    """
    escaped: List[str] = []
    open_quote: Optional[str] = None
    length = len(command)

    for index, char in enumerate(command):
        if char in QUOTE_CHARS:
            if open_quote is None and char in command[index + 1:length]:
                open_quote = char
            elif open_quote == char:
                open_quote = None
            else:
                escaped.append("\\")
        elif char in SHELL_META_CHARS:
            escaped.append("\\")
        escaped.append(char)

    return "".join(escaped)


def escape_shell_arg(arg: str) -> str:
    """Entoure un argument de quotes simples.

    Les quotes simples internes deviennent '\\'' pour que l'argument
    soit transmis au programme comme un seul jeton. Contrairement à
    shlex.quote, l'argument est toujours entouré de quotes.

    Args:
        arg: Argument à protéger.

    Returns:
        Argument échappé.
    """
    return "'" + arg.replace("'", "'\\''") + "'"


class CommandBuilder:
    """Constructeur de commandes shell.

    Sans état : deux appels avec les mêmes paramètres produisent
    toujours la même chaîne.
    """

    @staticmethod
    def build(
        program: str,
        args: Arguments = None,
        options: Options = None,
    ) -> str:
        """Construit la ligne de commande complète.

        Args:
            program: Nom ou chemin du programme à exécuter.
            args: Arguments ordonnés ; les valeurs None sont ignorées.
            options: Options ou dictionnaire équivalent
                (défaut: arguments échappés).

        Returns:
            Commande prête à être passée au shell.

        Raises:
            InvalidArgumentError: Si program est vide.
        """
        program = (program or "").strip()
        if not program:
            raise InvalidArgumentError("Le programme est requis.")

        if not isinstance(options, ExecutionOptions):
            options = ExecutionOptions.from_mapping(options)
        tokens = [escape_shell_cmd(program)]

        values = [str(arg) for arg in (args or []) if arg is not None]
        if options.escape_arguments:
            values = [escape_shell_arg(value) for value in values]
        tokens.extend(values)

        return " ".join(tokens)
