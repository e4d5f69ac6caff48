"""The shell's built-in commands.

Each command writes to the streams it is given, which default to the
process's standard output and error, and returns an exit status.
"""

from __future__ import annotations

import os
import sys
from typing import Iterable, Optional, Sequence, TextIO

from minishell.environment import Environment

NC = "\001\033[0m\002"
RED = "\001\033[0;31m\002"
CYAN = "\001\033[0;36m\002"
BLUE_LIGHT = "\001\033[1;34m\002"
GREEN = "\001\033[38;5;120m\002"
BLUE_DARK = "\001\033[1;38;5;33m\002"
PURPLE_DARK = "\001\033[38;5;93m\002"
PURPLE_LIGHT = "\001\033[1;35m\002"
WHITE = "\001\033[1;37m\002"
BLACK = "\001\033[30;47m\002"

NO_NEWLINE_FLAG = "-n"


def _out(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _err(stream: Optional[TextIO]) -> TextIO:
    return sys.stderr if stream is None else stream


def cd(path: Optional[str], err: Optional[TextIO] = None) -> int:
    """Change the working directory to *path*."""
    if not path:
        _err(err).write("cd: missing argument\n")
        return 1
    try:
        os.chdir(path)
    except OSError as exc:
        _err(err).write(f"cd: {exc.strerror}\n")
        return 1
    return 0


def pwd(out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Print the working directory."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        _err(err).write(f"pwd: {exc.strerror}\n")
    else:
        _out(out).write(f"{WHITE}{cwd}\n{NC}")
    return 0


def env(
    environment: Optional[Environment],
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Print every environment entry, one per line."""
    if environment is None:
        _err(err).write("env: no environment found\n")
        return 1
    stream = _out(out)
    for entry in environment:
        stream.write(f"{WHITE}{entry}\n{NC}")
    return 0


def _expand(word: str, environment: Environment) -> str:
    if word.startswith("$") and len(word) > 1:
        return environment.get(word[1:])
    return word


def echo(
    args: Sequence[str],
    environment: Environment,
    out: Optional[TextIO] = None,
) -> int:
    """Print the words after the command name, expanding ``$NAME`` words.

    *args* includes the command name. A first argument of ``-n`` replaces the
    trailing newline with a highlighted ``%`` marker.
    """
    if not args:
        return 1
    words = list(args[1:])
    no_newline = bool(words) and words[0] == NO_NEWLINE_FLAG
    if no_newline:
        words = words[1:]
    stream = _out(out)
    stream.write(" ".join(_expand(word, environment) for word in words))
    stream.write(f"{BLACK}%{NC}\n" if no_newline else "\n")
    return 0


def export(
    environment: Environment,
    args: Sequence[str],
    out: Optional[TextIO] = None,
) -> int:
    """Set each ``NAME=value`` argument, or list the variables when there are none.

    *args* holds the arguments after the command name; those without ``=``
    are ignored.
    """
    if not args:
        stream = _out(out)
        for line in environment.declarations():
            stream.write(f"{line}\n")
        return 0
    for assignment in args:
        environment.export(assignment)
    return 0


def unset(environment: Environment, args: Iterable[str]) -> int:
    """Remove every variable named in *args*."""
    for name in args:
        environment.unset(name)
    return 0