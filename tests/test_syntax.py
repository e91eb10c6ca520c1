import pytest

from minishell.syntax import ShellSyntaxError, check_syntax
from minishell.tokens import tokenize


@pytest.mark.parametrize(
    "line",
    [
        "echo hi",
        "ls | wc",
        "cat < in > out",
        "cat << EOF",
        "echo >> 'file name'",
        "a | | b",
        "",
    ],
)
def test_valid_lines_pass_through(line):
    tokens = tokenize(line)
    assert check_syntax(tokens) == tokens


@pytest.mark.parametrize("line", ["| ls", "ls |", "|"])
def test_invalid_pipe(line):
    with pytest.raises(ShellSyntaxError, match="Syntax error: invalid pipe"):
        check_syntax(tokenize(line))


@pytest.mark.parametrize("line", ["cat <", "echo >", "cat < | wc", "echo > >> x", "cat <<"])
def test_invalid_redirection(line):
    with pytest.raises(ShellSyntaxError, match="Syntax error: invalid redirection"):
        check_syntax(tokenize(line))


def test_error_is_value_error():
    with pytest.raises(ValueError):
        check_syntax(tokenize("ls |"))