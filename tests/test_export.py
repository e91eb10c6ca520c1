from minishell.command import Command
from minishell.export import export_keys


def test_keys_extracted():
    command = Command("export", ["A=1", "_B", "9x=2", "C="])
    assert export_keys(command) == ["A", "_B", "C"]


def test_no_arguments():
    assert export_keys(Command("export")) == []


def test_invalid_starts_skipped():
    assert export_keys(Command("export", ["=x", "", "-a"])) == []