"""The shell's environment: an ordered list of key/value pairs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping


class Environment:
    """Environment variables, most recently added first.

    Adding a key never replaces an earlier entry; the newer one simply
    shadows it in lookups and comes first when listed.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[str, str]] = []

    def add(self, key: str, value: str) -> None:
        """Add a variable in front of all existing ones."""
        self._entries.insert(0, (key, value))

    def lookup(self, name: str) -> str | None:
        """Return the value of the first variable whose key starts with ``name``."""
        for key, value in self._entries:
            if key.startswith(name):
                return value
        return None

    def format_lines(self) -> list[str]:
        """Return the variables as ``KEY=VALUE`` lines, in listing order."""
        return [f"{key}={value}" for key, value in self._entries]

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def parse_environment(entries: Iterable[str] | Mapping[str, str]) -> Environment:
    """Build an environment from ``KEY=VALUE`` strings or a mapping.

    Strings without ``=`` are ignored; the key ends at the first ``=``.
    """
    env = Environment()
    if isinstance(entries, Mapping):
        for key, value in entries.items():
            env.add(key, value)
        return env
    for entry in entries:
        key, sep, value = entry.partition("=")
        if sep:
            env.add(key, value)
    return env