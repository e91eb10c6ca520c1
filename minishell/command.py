"""Grouping tokens into commands separated by pipes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from .tokens import Token, TokenType

_TEXT = (TokenType.WORD, TokenType.QUOTED)


@dataclass
class Redirection:
    """A redirection operator and the file it applies to."""

    operator: str
    file: str


@dataclass
class Command:
    """One simple command: its name, arguments and redirections."""

    cmd: str | None = None
    args: list[str] = field(default_factory=list)
    redirections: list[Redirection] = field(default_factory=list)


def merge_adjacent(tokens: Iterable[Token]) -> list[Token]:
    """Join text tokens written with no blank between them.

    Returns new tokens; the input is left untouched.
    """
    merged: list[Token] = []
    for token in tokens:
        if (
            merged
            and token.spaces == 0
            and token.type in _TEXT
            and merged[-1].type in _TEXT
        ):
            previous = merged[-1]
            if previous.value is not None or token.value is not None:
                previous.value = (previous.value or "") + (token.value or "")
            continue
        merged.append(replace(token))
    return merged


def _is_pipe(token: Token) -> bool:
    return (
        token.type is TokenType.OPERATOR
        and token.value is not None
        and token.value.startswith("|")
    )


def build_commands(tokens: Iterable[Token]) -> list[Command]:
    """Split tokens at pipes into commands.

    The first text token of each command is its name, the rest its
    arguments; an operator takes the token after it as its file.
    """
    commands: list[Command] = []
    current = Command()
    pending = False
    stream = iter(tokens)
    for token in stream:
        if _is_pipe(token):
            commands.append(current)
            current = Command()
            pending = False
            continue
        pending = True
        if token.type is TokenType.OPERATOR:
            target = next(stream, None)
            if target is not None and token.value is not None and target.value is not None:
                current.redirections.append(Redirection(token.value, target.value))
        elif token.value is not None:
            if current.cmd is None:
                current.cmd = token.value
            else:
                current.args.append(token.value)
    if pending:
        commands.append(current)
    return commands