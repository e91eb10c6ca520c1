"""Key extraction for the ``export`` built-in."""

from __future__ import annotations

from .command import Command


def _is_valid_key_start(ch: str) -> bool:
    return ch.isascii() and (ch.isalpha() or ch == "_")


def export_keys(command: Command) -> list[str]:
    """Return the variable names of the command's ``KEY[=VALUE]`` arguments.

    Arguments that do not start with a letter or underscore are skipped.
    """
    return [
        arg.partition("=")[0]
        for arg in command.args
        if arg and _is_valid_key_start(arg[0])
    ]