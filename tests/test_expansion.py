from minishell.environment import Environment
from minishell.expansion import expand_tokens, expand_value, is_valid_env_char
from minishell.tokens import Token, TokenType, tokenize


def make_env(**values):
    env = Environment()
    for key, value in values.items():
        env.add(key, value)
    return env


def word(value):
    return Token(value, TokenType.WORD, expand="$" in value)


def quoted(value, quote='"'):
    return Token(value, TokenType.QUOTED, quote=quote, expand=quote == '"' and "$" in value)


def test_valid_env_chars():
    assert all(is_valid_env_char(ch) for ch in "aZ_09")
    assert not any(is_valid_env_char(ch) for ch in "-. $")
    assert is_valid_env_char("") is False


def test_expands_known_variable():
    env = make_env(HOME="/home/user")
    assert expand_value(word("$HOME"), None, env) == "/home/user"


def test_unknown_variable_alone_vanishes():
    assert expand_value(word("$MISSING"), None, make_env(HOME="/home/user")) is None


def test_unknown_variable_keeps_surrounding_text():
    assert expand_value(word("a$MISSING"), None, make_env()) == "a"


def test_lone_dollar_stays_literal():
    env = make_env(HOME="/home/user")
    assert expand_value(word("$"), None, env) == "$"
    assert expand_value(word("$-"), None, env) == "$-"
    assert expand_value(quoted("$ x"), None, env) == "$ x"


def test_heredoc_delimiter_not_expanded():
    previous = Token("<<", TokenType.OPERATOR)
    assert expand_value(word("$HOME"), previous, make_env(HOME="/home/user")) == "$HOME"


def test_lookup_matches_key_prefix():
    env = make_env(HOMEDIR="/srv")
    assert expand_value(word("$HOME"), None, env) == "/srv"


def test_expand_tokens_in_double_quotes():
    env = make_env(HOME="/home/user")
    tokens = expand_tokens(tokenize('echo "$HOME/x"'), env)
    assert [t.value for t in tokens] == ["echo", "/home/user/x"]


def test_single_quotes_left_alone():
    tokens = expand_tokens(tokenize("echo '$HOME'"), make_env(HOME="/home/user"))
    assert [t.value for t in tokens] == ["echo", "$HOME"]