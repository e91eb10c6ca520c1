"""Expansion of ``$NAME`` references inside word and quoted tokens."""

from __future__ import annotations

from collections.abc import Sequence

from .environment import Environment
from .tokens import Token, TokenType

_EXPANDABLE = (TokenType.WORD, TokenType.QUOTED)


def is_valid_env_char(ch: str) -> bool:
    """Whether ``ch`` may appear in a variable name: ASCII letter, digit or underscore."""
    return ch.isascii() and (ch.isalnum() or ch == "_")


def expand_value(token: Token, previous: Token | None, env: Environment) -> str | None:
    """Return the value of ``token`` with its variable references replaced.

    A token that follows a heredoc operator is returned as it is. A ``$``
    not followed by a name character stays literal in bare words and
    double-quoted strings. Unknown variables expand to nothing; when
    nothing at all is produced the result is ``None``.
    """
    if previous is not None and previous.value is not None and previous.value.startswith("<<"):
        return token.value
    value = token.value or ""
    length = len(value)
    pieces: list[str] = []
    i = 0
    while i < length:
        if value[i] != "$":
            end = value.find("$", i)
            if end == -1:
                end = length
            pieces.append(value[i:end])
            i = end
            continue
        i += 1
        following = value[i] if i < length else ""
        if token.quote in ('"', "") and not is_valid_env_char(following):
            pieces.append("$")
            continue
        start = i
        while i < length and is_valid_env_char(value[i]):
            i += 1
        found = env.lookup(value[start:i])
        if found is not None:
            pieces.append(found)
    return "".join(pieces) if pieces else None


def expand_tokens(tokens: Sequence[Token], env: Environment) -> Sequence[Token]:
    """Expand, in place and in order, every token marked for expansion."""
    previous: Token | None = None
    for token in tokens:
        if token.expand and token.type in _EXPANDABLE:
            token.value = expand_value(token, previous, env)
        previous = token
    return tokens