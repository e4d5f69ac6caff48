"""The shell's own copy of the environment, kept as ``NAME=value`` entries."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from minishell.strsearch import strdup

DECLARE_PREFIX = "declare -x "


def _matches(entry: str, name: str) -> bool:
    """True when *entry* is the assignment of variable *name*."""
    return entry.startswith(name) and entry[len(name):len(name) + 1] == "="


class Environment:
    """An ordered list of ``NAME=value`` entries."""

    def __init__(self, entries: Optional[Iterable[str]] = None) -> None:
        self._entries: List[str] = [strdup(entry) for entry in entries or ()]

    def get(self, name: str) -> str:
        """Return the value of *name*, or an empty string when it is not set."""
        for entry in self._entries:
            if _matches(entry, name):
                return entry[len(name) + 1:]
        return ""

    def export(self, assignment: str) -> bool:
        """Set a variable from a ``NAME=value`` string.

        An existing entry for the name is replaced in place, otherwise the
        entry is appended. A string without ``=`` is ignored and False is
        returned.
        """
        if "=" not in assignment:
            return False
        name = assignment.split("=", 1)[0]
        entry = strdup(assignment)
        for index, existing in enumerate(self._entries):
            if _matches(existing, name):
                self._entries[index] = entry
                return True
        self._entries.append(entry)
        return True

    def unset(self, name: Optional[str]) -> None:
        """Remove every entry for *name*; None is ignored."""
        if name is None:
            return
        self._entries = [entry for entry in self._entries if not _matches(entry, name)]

    def declarations(self) -> List[str]:
        """Return the entries as ``declare -x`` lines."""
        return [DECLARE_PREFIX + entry for entry in self._entries]

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)