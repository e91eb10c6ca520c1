"""Locating and running external commands."""

from __future__ import annotations

import os
from typing import NoReturn

from .command import Command
from .environment import Environment
from .textutil import split_nonempty


class CommandNotFound(LookupError):
    """Raised when a command cannot be located or is not runnable."""

    def __init__(self, command: str, message: str | None = None) -> None:
        self.command = command
        super().__init__(message or f"command not found : {command}")


def find_path(env: Environment) -> str | None:
    """Return the search path: the first variable whose key starts with ``PATH``."""
    for key, value in env:
        if key.startswith("PATH"):
            return value
    return None


def build_argv(command: Command) -> list[str]:
    """Return the argument vector: the command name followed by its arguments."""
    return [command.cmd or "", *command.args]


def _runnable(path: str) -> bool:
    return os.access(path, os.F_OK | os.X_OK | os.R_OK)


def resolve_executable(command: Command, env: Environment) -> str:
    """Return the file to run for ``command``.

    Absolute names are used as they are; others are looked up in each
    directory of the search path.
    """
    name = command.cmd
    if not name:
        raise CommandNotFound(name or "")
    if name.startswith("/"):
        if _runnable(name):
            return name
        raise CommandNotFound(name)
    search = find_path(env)
    if search is None:
        raise CommandNotFound(name, "minishell: PATH not set")
    for directory in split_nonempty(search, ":"):
        candidate = f"{directory}/{name}"
        if _runnable(candidate):
            return candidate
    raise CommandNotFound(name)


def execute_command(command: Command, env: Environment) -> NoReturn:
    """Replace the current process with ``command``, run with an empty environment."""
    argv = build_argv(command)
    path = resolve_executable(command, env)
    os.execve(path, argv, {})