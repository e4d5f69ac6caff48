"""A small interactive shell with built-in cd, pwd, env, echo, export, unset and exit,
and the string, buffer and list helpers it is built on."""

__version__ = "0.2.0"