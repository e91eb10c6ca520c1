"""The interactive loop: read a line, parse it and show what was parsed."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable, Sequence
from typing import TextIO

from .command import Command, build_commands, merge_adjacent
from .environment import Environment, parse_environment
from .expansion import expand_tokens
from .export import export_keys
from .syntax import ShellSyntaxError, check_syntax
from .tokens import Token, TokenizeError, tokenize

HEREDOC_PATH = "/tmp/heredoc_pipe"


def read_heredoc(
    delimiter: str,
    read_line: Callable[[str], str | None],
    path: str | os.PathLike[str] = HEREDOC_PATH,
) -> list[str]:
    """Read lines until one starts with ``delimiter`` or input ends.

    The lines are written to ``path`` and returned.
    """
    body: list[str] = []
    with open(path, "w", encoding="utf-8") as handle:
        while True:
            line = read_line(">")
            if line is None or line.startswith(delimiter):
                break
            handle.write(line + "\n")
            body.append(line)
    return body


def _read_input(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


def _shown(value: str | None) -> str:
    return "(null)" if value is None else value


def format_commands(line: str, commands: Sequence[Command] | None) -> str:
    """Describe the parsed commands of ``line``."""
    parts = ["\n=== Input Line ===\n", f"{line}\n", "=== Command List ===\n"]
    if commands is None:
        parts.append("No commands to display.\n")
        return "".join(parts)
    for number, command in enumerate(commands, start=1):
        parts.append(f"Command #{number}:\n")
        parts.append(f"  Cmd: {command.cmd if command.cmd else '(none)'}\n")
        if command.args:
            parts.append("  Args:" + "".join(f" *{arg}*" for arg in command.args) + "\n")
        else:
            parts.append("  Args: (none)\n")
        parts.append("  Redirections:\n")
        for redirection in command.redirections:
            parts.append(
                f"    Operator: {redirection.operator}, File: {redirection.file}\n"
            )
        parts.append("\n")
    parts.append("=====================\n")
    return "".join(parts)


def format_tokens(line: str, tokens: Iterable[Token]) -> str:
    """Describe the tokens of ``line``."""
    parts = ["\n=== Input Line ===\n", f"{line}\n", "=== Tokens ===\n"]
    for token in tokens:
        parts.append(f"Token value: *{_shown(token.value)}*\n")
        parts.append(f"  - is quote? {ord(token.quote) if token.quote else 0}\n")
        parts.append(f"  - expands? {int(token.expand)}\n")
        parts.append(f"  - Number of spaces: {token.spaces}\n")
        parts.append(f"  - Type: {token.type.value}\n")
    parts.append("===================\n")
    return "".join(parts)


def process_line(line: str, env: Environment, out: TextIO) -> list[Command]:
    """Parse one input line, report it on ``out`` and return its commands.

    Errors are reported on standard error and give an empty list.
    """
    if line.startswith("env"):
        for entry in env.format_lines():
            out.write(entry + "\n")
    try:
        tokens = list(check_syntax(tokenize(line)))
    except (TokenizeError, ShellSyntaxError) as error:
        print(error, file=sys.stderr)
        return []
    if not tokens:
        return []
    for token, following in zip(tokens, tokens[1:]):
        if token.value is not None and token.value.startswith("<<"):
            try:
                read_heredoc(following.value or "", _read_input)
            except OSError:
                print("Error opening heredoc", file=sys.stderr)
    expand_tokens(tokens, env)
    merged = merge_adjacent(tokens)
    commands = build_commands(merged)
    if commands:
        for key in export_keys(commands[0]):
            out.write(f"export key: *{key}*\n")
    out.write(format_commands(line, commands))
    out.write(format_tokens(line, merged))
    return commands


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive shell until end of input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        print("Wrong number of arguments")
        return 1
    try:
        import readline  # noqa: F401  (line editing and history for input())
    except ImportError:
        pass
    env = parse_environment(os.environ)
    while True:
        try:
            line = input("minishell> ")
        except EOFError:
            break
        process_line(line, env, sys.stdout)
    return 0