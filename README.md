# minishell

minishell is a small interactive shell. It shows a prompt with the current directory, reads one line at a time, splits the line on spaces and runs one of its built-in commands. It starts with a copy of the process environment and changes only that copy as you work.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Starting the shell

```
minishell
```

The prompt reads `minishell V0.2 (/current/directory)$ ` in colour. If the current directory cannot be found it shows `(unknown)` in its place. When the `readline` module is available, every line that is not empty is added to the line history. Press Ctrl-D or type `exit` to leave.

## Built-in commands

| Command | What it does |
| --- | --- |
| `cd PATH` | Changes the working directory. Without a path it reports `cd: missing argument`. If the change fails it reports the reason. |
| `pwd` | Prints the working directory, highlighted. |
| `env` | Prints every environment entry as `NAME=value`, highlighted, one per line. |
| `echo [-n] WORDS...` | Prints the words separated by single spaces. A word of the form `$NAME` is replaced by the value of that variable, or by nothing if it is not set. With `-n` the closing newline is replaced by a highlighted `%` marker followed by a newline. |
| `export` | With no arguments, lists each entry as `declare -x NAME=value`. |
| `export NAME=value ...` | Adds each variable, or replaces its value if it is already set. Arguments without `=` are ignored. |
| `unset NAME ...` | Removes each named variable. |
| `exit` | Leaves the shell. |

Any other command prints `Command not found: NAME`.

## What it does not do

Words are separated by spaces only. There are no quotes, pipes, redirections, variable expansion outside `echo`, or signal handling, and the shell does not run external programs: only the built-in commands above are available.

## Using it from Python

The pieces of the shell can also be used as a library:

```python
import io

from minishell.environment import Environment
from minishell.shell import run_line

environment = Environment(["HOME=/home/user", "LANG=C"])
out = io.StringIO()
run_line("export GREETING=hello", environment, out, io.StringIO())
run_line("echo $GREETING world", environment, out, io.StringIO())
print(out.getvalue())          # hello world
print(environment.get("LANG")) # C
```

- `minishell.shell` has `run_line(line, environment, out, err)`, which runs one line and returns `False` when the shell should exit, `build_prompt(cwd)` and `main()`.
- `minishell.builtins` has one function for each built-in command: `cd`, `pwd`, `env`, `echo`, `export` and `unset`. Each writes to the streams it is given and returns an exit status.
- `minishell.environment.Environment` holds the variables as an ordered list of `NAME=value` entries, with `get`, `export`, `unset` and `declarations`.
- `minishell.chars`, `minishell.memory`, `minishell.strsearch`, `minishell.strbuild` and `minishell.output` hold small character, byte-buffer, string and output helpers, and `minishell.linkedlist` a singly linked list (`Node`, `LinkedList`).