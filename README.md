# minishell

The parsing front end of a small interactive shell. Each line you type is
split into tokens (words, quoted strings and the operators `<`, `>`, `<<`,
`>>`, `|`), checked for syntax errors, expanded against the environment
(`$NAME`), merged where pieces touch without blanks, and grouped into
commands with their arguments and redirections.

## Installing

```
pip install .
```

## Running

```
minishell
```

The shell shows a `minishell> ` prompt and reads lines until end of input
(Ctrl-D). It takes no arguments; given any, it prints
`Wrong number of arguments` and exits with status 1.

For each line it prints:

- the environment as `KEY=VALUE` lines, if the line starts with `env`;
- `export key: *NAME*` for each argument of the first command that starts
  with a letter or underscore (the part before any `=`);
- the commands it built: name, arguments and redirections;
- the tokens it found, with their quote character, expansion flag, the
  number of blanks before them and their type.

A `<<` operator reads a heredoc from the terminal with a `>` prompt, until
a line that starts with the delimiter or end of input. The lines are
written to `/tmp/heredoc_pipe`.

An unclosed quote or a syntax error is reported on standard error and the
line is dropped.

## What it does not do

The interactive shell does not run anything. It does not start programs,
connect pipes, open redirection files or feed heredocs to commands, and
`env`, `export` and the other built-ins only print what they find; `export`
does not change the environment.

## Using it as a library

```python
from minishell.tokens import tokenize
from minishell.syntax import check_syntax
from minishell.environment import parse_environment
from minishell.expansion import expand_tokens
from minishell.command import merge_adjacent, build_commands

env = parse_environment(["HOME=/home/user", "USER=user"])
tokens = tokenize('echo "$USER" > out.txt | wc -l')
check_syntax(tokens)
tokens = merge_adjacent(expand_tokens(tokens, env))
for command in build_commands(tokens):
    print(command)
```

- `minishell.tokens.tokenize` returns a list of `Token` objects and raises
  `TokenizeError` for an unclosed quote.
- `minishell.syntax.check_syntax` raises `ShellSyntaxError` for a pipe at
  the start or end of the line, or a redirection not followed by a word or
  quoted string.
- `minishell.environment.Environment` keeps variables newest first;
  `lookup(name)` returns the value of the first key that starts with
  `name`. `parse_environment` accepts `KEY=VALUE` strings or a mapping.
- `minishell.expansion.expand_tokens` replaces `$NAME` references in place.
  Single-quoted strings are not expanded, and a token after `<<` is left
  as it is.
- `minishell.command.build_commands` splits tokens at pipes into `Command`
  objects (`cmd`, `args`, `redirections` of `Redirection(operator, file)`).
- `minishell.export.export_keys` returns the variable names of a command's
  `KEY[=VALUE]` arguments.
- `minishell.executor.resolve_executable` finds a program by absolute name
  or through `PATH`, raising `CommandNotFound` when it cannot;
  `execute_command` replaces the current process with it, run with an empty
  environment.
- `minishell.shell.process_line` parses one line and writes the report
  above to a text stream, returning the commands.

## Tests

```
pip install .[test]
pytest
```