"""Checks that a token sequence forms a well-shaped command line."""

from __future__ import annotations

from collections.abc import Sequence

from .tokens import Token, TokenType


class ShellSyntaxError(ValueError):
    """Raised when operators are misplaced in a command line."""


def check_syntax(tokens: Sequence[Token]) -> Sequence[Token]:
    """Validate pipes and redirections and return ``tokens`` unchanged.

    A pipe may not start the line nor end it; a redirection must be followed
    by a word or a quoted string.
    """
    last = len(tokens) - 1
    for index, token in enumerate(tokens):
        if token.type is not TokenType.OPERATOR:
            continue
        if token.value.startswith("|"):
            if index == 0 or index == last:
                raise ShellSyntaxError("Syntax error: invalid pipe")
        elif token.value.startswith((">", "<")):
            if index == last or tokens[index + 1].type not in (
                TokenType.WORD,
                TokenType.QUOTED,
            ):
                raise ShellSyntaxError("Syntax error: invalid redirection")
    return tokens