"""The interactive read-evaluate loop."""

from __future__ import annotations

import os
import sys
from typing import List, Optional, TextIO

from minishell.builtins import (
    BLUE_DARK,
    NC,
    PURPLE_DARK,
    cd,
    echo,
    env,
    export,
    pwd,
    unset,
)
from minishell.environment import Environment
from minishell.strbuild import split

try:
    import readline
except ImportError:  # pragma: no cover - platform without readline
    readline = None

VERSION = "V0.2"


def build_prompt(cwd: Optional[str]) -> str:
    """Return the prompt showing *cwd*, or ``unknown`` when it is None."""
    head = f"{PURPLE_DARK}minishell {VERSION}{BLUE_DARK} "
    if cwd is None:
        return f"{head}(unknown)$ {NC}"
    return f"{head}({cwd})$ {NC}"


def run_line(
    line: str,
    environment: Environment,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> bool:
    """Run one command line; return False when the shell should exit."""
    args: List[str] = split(line, " ")
    if not args:
        return True
    command = args[0]
    if command == "cd":
        cd(args[1] if len(args) > 1 else None, err)
    elif command == "pwd":
        pwd(out, err)
    elif command == "env":
        env(environment, out, err)
    elif command == "echo":
        echo(args, environment, out)
    elif command.startswith("unset"):
        unset(environment, args)
    elif command == "export":
        export(environment, args[1:], out)
    elif command == "exit":
        return False
    else:
        (sys.stdout if out is None else out).write(f"Command not found: {command}\n")
    return True


def _current_directory() -> Optional[str]:
    try:
        return os.getcwd()
    except OSError:
        return None


def main(argv: Optional[List[str]] = None) -> int:
    """Read and run command lines until ``exit`` or end of input."""
    environment = Environment(f"{name}={value}" for name, value in os.environ.items())
    while True:
        try:
            line = input(build_prompt(_current_directory()))
        except EOFError:
            break
        if not line:
            continue
        if readline is not None:
            readline.add_history(line)
        if not run_line(line, environment):
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())