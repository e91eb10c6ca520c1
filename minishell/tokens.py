"""Splitting an input line into words, quoted strings and operators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_QUOTES = "\"'"
_OPERATOR_CHARS = "<>|"


class TokenType(Enum):
    """Kind of a token."""

    WORD = 0
    QUOTED = 1
    OPERATOR = 2


class Operator(Enum):
    """Shell operators, valued by their spelling."""

    INPUT = "<"
    OUTPUT = ">"
    HEREDOC = "<<"
    APPEND = ">>"
    PIPE = "|"


@dataclass
class Token:
    """One token of an input line.

    ``spaces`` is the number of blanks that preceded the token, ``quote``
    the quote character that enclosed it (empty when unquoted) and
    ``expand`` whether it holds a ``$`` that may need expansion.
    """

    value: str
    type: TokenType
    spaces: int = 0
    quote: str = ""
    expand: bool = False


class TokenizeError(ValueError):
    """Raised when a line cannot be split into tokens."""


def is_space(ch: str) -> bool:
    """Whether ``ch`` is a blank: space, tab, newline, vertical tab, form feed or CR."""
    return ch == " " or "\t" <= ch <= "\r"


def is_special_char(ch: str) -> bool:
    """Whether ``ch`` ends a bare word."""
    return ch in "<>|\"'" or is_space(ch)


def operator_at(line: str, index: int) -> Operator:
    """Return the operator that starts at ``line[index]``."""
    current = line[index]
    following = line[index + 1] if index + 1 < len(line) else ""
    if current == ">" and following == ">":
        return Operator.APPEND
    if current == "<" and following == "<":
        return Operator.HEREDOC
    if current == ">":
        return Operator.OUTPUT
    if current == "<":
        return Operator.INPUT
    return Operator.PIPE


def tokenize(line: str) -> list[Token]:
    """Split ``line`` into tokens.

    Raises :class:`TokenizeError` when a quote is left open.
    """
    tokens: list[Token] = []
    length = len(line)
    i = 0
    while i < length:
        blank_start = i
        while i < length and is_space(line[i]):
            i += 1
        spaces = i - blank_start
        if i >= length:
            break
        ch = line[i]
        if ch in _QUOTES:
            end = line.find(ch, i + 1)
            if end == -1:
                raise TokenizeError("unclosed quote error")
            value = line[i + 1:end]
            tokens.append(
                Token(
                    value,
                    TokenType.QUOTED,
                    spaces,
                    quote=ch,
                    expand=ch == '"' and "$" in value,
                )
            )
            i = end + 1
        elif ch in _OPERATOR_CHARS:
            operator = operator_at(line, i)
            tokens.append(Token(operator.value, TokenType.OPERATOR, spaces))
            i += len(operator.value)
        else:
            end = i
            while end < length and not is_special_char(line[end]):
                end += 1
            word = line[i:end]
            tokens.append(Token(word, TokenType.WORD, spaces, expand="$" in word))
            i = end
    return tokens